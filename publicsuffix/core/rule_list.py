"""Public Suffix List container for publicsuffix.

Parses line-oriented rule sources and selects the governing rule for a
domain name.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional

from .constants import LIST_TOKEN_COMMENT, LIST_TOKEN_PRIVATE_DOMAINS
from .models import DEFAULT_FIND_OPTIONS, DEFAULT_PARSER_OPTIONS, FindOptions, ParserOptions
from .rules import DEFAULT_RULE, Rule, RuleType, parse_rule

logger = logging.getLogger(__name__)


class RuleList:
    """
    An ordered collection of suffix rules.

    Rules keep their insertion order; duplicates are allowed. Once built,
    the list is only read by lookups, so concurrent find() calls are safe.
    """

    def __init__(self, rules: Iterable[Rule] | None = None):
        self._rules: list[Rule] = list(rules) if rules else []

    @classmethod
    def from_lines(cls, lines: Iterable[str], options: ParserOptions | None = None) -> RuleList:
        """Create a list initialized with the rules in the given lines."""
        rule_list = cls()
        rule_list.load(lines, options)
        return rule_list

    @classmethod
    def from_string(cls, src: str, options: ParserOptions | None = None) -> RuleList:
        """Create a list initialized with the rules in a source string."""
        rule_list = cls()
        rule_list.load_string(src, options)
        return rule_list

    @classmethod
    def from_file(cls, path: Path | str, options: ParserOptions | None = None) -> RuleList:
        """Create a list initialized with the rules in a source file."""
        rule_list = cls()
        rule_list.load_file(path, options)
        return rule_list

    def add_rule(self, rule: Rule) -> None:
        """Append a rule to the list."""
        self._rules.append(rule)

    def load(self, lines: Iterable[str], options: ParserOptions | None = None) -> list[Rule]:
        """
        Parse rule lines and add them to the list.

        Args:
            lines: Iterable of source lines (a file object works)
            options: Parser options, defaults to including private domains

        Returns:
            The rules added by this call, in source order
        """
        if options is None:
            options = DEFAULT_PARSER_OPTIONS

        added: list[Rule] = []
        private = False

        for raw_line in lines:
            line = raw_line.strip()

            # Skip blank lines
            if not line:
                continue

            # The marker sits inside a comment, so check it first
            if LIST_TOKEN_PRIVATE_DOMAINS in line:
                if not options.private_domains:
                    break
                private = True
                continue

            if line.startswith(LIST_TOKEN_COMMENT):
                continue

            rule = parse_rule(line, private=private)
            self.add_rule(rule)
            added.append(rule)

        logger.debug(
            "Parsed %d rules (%d private)",
            len(added),
            sum(1 for r in added if r.private),
        )
        return added

    def load_string(self, src: str, options: ParserOptions | None = None) -> list[Rule]:
        """Parse a source string and add its rules to the list."""
        return self.load(io.StringIO(src), options)

    def load_file(self, path: Path | str, options: ParserOptions | None = None) -> list[Rule]:
        """
        Parse a source file and add its rules to the list.

        Raises:
            OSError: If the file cannot be read
        """
        with open(path, "r", encoding="utf-8") as f:
            return self.load(f, options)

    def find(self, name: str, options: FindOptions | None = None) -> Rule:
        """
        Find the rule that governs the domain name.

        Selection:
        1. An exception rule wins as soon as one matches
        2. Otherwise the matching rule with the most labels
           (the first one seen on ties)
        3. Otherwise the default "*" rule

        Args:
            name: Normalized domain name
            options: Find options, defaults to considering private rules

        Returns:
            The governing Rule
        """
        best: Optional[Rule] = None

        for rule in self._select_rules(name, options):
            if rule.type is RuleType.EXCEPTION:
                return rule
            if best is None or rule.length > best.length:
                best = rule

        return best if best is not None else DEFAULT_RULE

    def _select_rules(self, name: str, options: FindOptions | None) -> Iterator[Rule]:
        """Yield the rules matching the name, in list order."""
        if options is None:
            options = DEFAULT_FIND_OPTIONS

        # Plain sequential scan
        for rule in self._rules:
            if options.ignore_private and rule.private:
                continue
            if rule.match(name):
                yield rule

    def size(self) -> int:
        """Return the number of rules in the list."""
        return len(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __repr__(self) -> str:
        return f"<RuleList rules={len(self._rules)}>"
