"""Domain name parsing on top of a RuleList.

Normalizes input names and splits them into subdomain, registrable label
and public suffix using the governing rule.
"""

from __future__ import annotations

import logging

from .models import DomainName, FindOptions
from .rule_list import RuleList
from .rules import Rule

logger = logging.getLogger(__name__)


class DomainError(ValueError):
    """Base class for domain name errors."""
    pass


class InvalidNameError(DomainError):
    """Raised when a name is blank or starts with a dot."""
    pass


class NameIsSuffixError(DomainError):
    """Raised when a name is itself a public suffix."""

    def __init__(self, name: str):
        super().__init__(f"{name} is a suffix")
        self.name = name


def normalize(name: str) -> str:
    """
    Normalize a domain name for lookup.

    Args:
        name: Raw domain name (e.g., "WWW.Example.COM")

    Returns:
        The lower-cased name

    Raises:
        InvalidNameError: If the name is blank or starts with a dot
    """
    normalized = name.lower()

    if not normalized:
        raise InvalidNameError("Name is blank")
    if normalized.startswith("."):
        raise InvalidNameError(f"Name {normalized} starts with a dot")

    return normalized


def _split_remainder(remainder: str) -> tuple[str, str]:
    """Split TRD+SLD at the last dot into (sld, trd)."""
    dot = remainder.rfind(".")
    if dot == -1:
        return remainder, ""
    return remainder[dot + 1:], remainder[:dot]


def parse_domain(rule_list: RuleList, name: str, options: FindOptions | None = None) -> DomainName:
    """
    Decompose a name into TLD, SLD and TRD using the given list.

    Examples:
        parse_domain(rules, "example.com")        -> DomainName("com", "example")
        parse_domain(rules, "www.example.co.uk")  -> DomainName("co.uk", "example", "www")

    Raises:
        InvalidNameError: If the name is blank or starts with a dot
        NameIsSuffixError: If the name has no label in front of its suffix
    """
    normalized = normalize(name)

    rule: Rule = rule_list.find(normalized, options)
    remainder, tld = rule.decompose(normalized)
    if not tld:
        raise NameIsSuffixError(normalized)

    sld, trd = _split_remainder(remainder)
    return DomainName(tld=tld, sld=sld, trd=trd, rule=rule)


def domain_of(rule_list: RuleList, name: str, options: FindOptions | None = None) -> str:
    """
    Return the registrable domain of a name.

    Examples:
        domain_of(rules, "www.example.com")    -> "example.com"
        domain_of(rules, "www.example.co.uk")  -> "example.co.uk"

    Raises:
        InvalidNameError: If the name is blank or starts with a dot
        NameIsSuffixError: If the name is itself a public suffix
    """
    return parse_domain(rule_list, name, options).registrable


def suffix_of(rule_list: RuleList, name: str) -> str:
    """
    Return the public suffix of a name, or an empty string.

    The name is used as given (no normalization) and errors are never
    raised, which is what cookie policies expect.
    """
    try:
        return rule_list.find(name).decompose(name)[1]
    except (TypeError, ValueError, AttributeError) as e:
        logger.debug("No public suffix for %r: %s", name, e)
        return ""
