"""Core data models for publicsuffix."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .rules import Rule


@dataclass(frozen=True)
class ParserOptions:
    """Options controlling how a rule source is parsed."""

    private_domains: bool = True  # Keep rules after the private domains marker


@dataclass(frozen=True)
class FindOptions:
    """Options controlling how the governing rule is searched."""

    ignore_private: bool = False


DEFAULT_PARSER_OPTIONS = ParserOptions()
DEFAULT_FIND_OPTIONS = FindOptions()


@dataclass(frozen=True)
class DomainName:
    """A domain name decomposed into TLD, SLD and TRD."""

    tld: str  # Public suffix: "co.uk"
    sld: str  # Registrable label: "example"
    trd: str = ""  # Remaining subdomain labels: "www"
    rule: Optional[Rule] = None  # Governing rule

    @property
    def registrable(self) -> str:
        """Return the registrable domain (SLD + TLD)."""
        return f"{self.sld}.{self.tld}"

    def __str__(self) -> str:
        """Join the non-empty components into a single name."""
        if not self.tld:
            return ""
        if not self.sld:
            return self.tld
        if not self.trd:
            return f"{self.sld}.{self.tld}"
        return f"{self.trd}.{self.sld}.{self.tld}"

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "tld": self.tld,
            "sld": self.sld,
            "trd": self.trd,
            "rule": str(self.rule) if self.rule else None,
            "private": self.rule.private if self.rule else False,
        }
