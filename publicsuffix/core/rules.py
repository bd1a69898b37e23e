"""Suffix rules for publicsuffix.

A rule is one line of a Public Suffix source, classified as:
- Normal rules (e.g., com, co.uk)
- Wildcard rules (e.g., *.ck means any label under ck is a public suffix)
- Exception rules (e.g., !www.ck means www.ck is NOT a public suffix)

Matching and decomposition work on dot-separated labels only.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RuleType(Enum):
    """Kind of a suffix rule."""

    NORMAL = "normal"
    WILDCARD = "wildcard"
    EXCEPTION = "exception"


def labels(name: str) -> list[str]:
    """Split a domain name into its dot-separated labels."""
    return name.split(".")


def _label_count(value: str) -> int:
    # The bare wildcard rule "*" has no literal labels
    return len(labels(value)) if value else 0


@dataclass(frozen=True)
class Rule:
    """A single rule of a Public Suffix List."""

    type: RuleType
    value: str  # Rule text without its "*." or "!" marker
    length: int  # Labels contributed to a match (precedence metric)
    private: bool = False  # Declared in the private domains section

    def match(self, name: str) -> bool:
        """
        Check if the rule matches the name.

        The rule value must be a suffix of the name that ends on a label
        boundary. A wildcard rule additionally needs one more label in
        front of its value.

        Args:
            name: Domain name to test (e.g., "www.example.co.uk")

        Returns:
            True if the rule applies to the name
        """
        if not name.endswith(self.value):
            return False

        left = name[: len(name) - len(self.value)]

        # Same labels as the rule: a match, unless the wildcard
        # still needs a label to consume
        if left == "":
            return self.type is not RuleType.WILDCARD

        return left[-1] == "."

    def decompose(self, name: str) -> tuple[str, str]:
        """
        Split the name into (TRD+SLD, TLD) according to the rule.

        Args:
            name: Domain name to decompose

        Returns:
            Tuple of (remainder, suffix). Both are empty when the name has
            no label left in front of the suffix.
        """
        parts = self.parts()
        required = len(parts) + (1 if self.type is RuleType.WILDCARD else 0)

        name_labels = labels(name)
        if required == 0 or len(name_labels) <= required:
            return "", ""

        if parts and name_labels[-len(parts):] != parts:
            return "", ""

        split = len(name_labels) - required
        return ".".join(name_labels[:split]), ".".join(name_labels[split:])

    def parts(self) -> list[str]:
        """Return the literal labels that make up the suffix."""
        if self.type is RuleType.EXCEPTION:
            return labels(self.value)[1:]
        if self.type is RuleType.WILDCARD and self.value == "":
            return []
        return labels(self.value)

    def __str__(self) -> str:
        if self.type is RuleType.WILDCARD:
            return f"*.{self.value}" if self.value else "*"
        if self.type is RuleType.EXCEPTION:
            return f"!{self.value}"
        return self.value


def parse_rule(content: str, private: bool = False) -> Rule:
    """
    Parse a single rule line.

    Args:
        content: Trimmed, non-empty, non-comment line (e.g., "*.kawasaki.jp")
        private: Whether the rule belongs to the private domains section

    Returns:
        The parsed Rule

    Raises:
        ValueError: If content is empty
    """
    if not content:
        raise ValueError("Rule content cannot be empty")

    if content[0] == "*":
        value = "" if content == "*" else content[2:]
        return Rule(RuleType.WILDCARD, value, _label_count(value) + 1, private)

    if content[0] == "!":
        value = content[1:]
        return Rule(RuleType.EXCEPTION, value, max(_label_count(value) - 1, 0), private)

    return Rule(RuleType.NORMAL, content, _label_count(content), private)


# The prevailing rule when nothing in the list matches
DEFAULT_RULE = parse_rule("*")
