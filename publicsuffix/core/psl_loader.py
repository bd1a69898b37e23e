"""Default Public Suffix List loader for publicsuffix.

Provides the prebuilt standard list, parsed once from the bundled
snapshot, plus module-level helpers that query it.
"""

from __future__ import annotations

import logging
import sys
from functools import lru_cache
from pathlib import Path

from .constants import PSL_FILE_NAME
from .domain import domain_of, parse_domain, suffix_of
from .models import DomainName, FindOptions, ParserOptions
from .rule_list import RuleList
from .rules import Rule

logger = logging.getLogger(__name__)


def _get_psl_path() -> Path:
    """Get the path to the PSL data file, handling frozen builds."""
    if getattr(sys, 'frozen', False):
        # Running as PyInstaller bundle
        base_path = Path(sys._MEIPASS)  # type: ignore[attr-defined]
        return base_path / "data" / PSL_FILE_NAME
    else:
        # Running from source or an installed package
        return Path(__file__).parent.parent / "data" / PSL_FILE_NAME


# Fallback minimal PSL if file not found
_FALLBACK_SOURCE = """\
// ===BEGIN ICANN DOMAINS===

// Generic TLDs
com
net
org
edu
gov
mil
int
info
biz
io
co
app
dev
ai
me

// Country code TLDs
uk
co.uk
org.uk
ac.uk
gov.uk
ltd.uk
plc.uk
au
com.au
net.au
org.au
jp
co.jp
ne.jp
or.jp
*.kawasaki.jp
!city.kawasaki.jp
*.ck
!www.ck
de
fr

// ===END ICANN DOMAINS===
// ===BEGIN PRIVATE DOMAINS===

github.io
gitlab.io
herokuapp.com
netlify.app
blogspot.com

// ===END PRIVATE DOMAINS===
"""


def _fallback_rules(options: ParserOptions) -> tuple[Rule, ...]:
    return tuple(RuleList.from_string(_FALLBACK_SOURCE, options))


@lru_cache(maxsize=2)
def _load_rules(private_domains: bool) -> tuple[Rule, ...]:
    """
    Read the bundled data file once per parser setting.

    Uses LRU cache to avoid repeated file reads. The rules are kept as a
    tuple so the cached value cannot be changed by callers.
    """
    options = ParserOptions(private_domains=private_domains)
    psl_path = _get_psl_path()

    if not psl_path.exists():
        logger.debug("PSL data file not found at %s, using fallback list", psl_path)
        return _fallback_rules(options)

    try:
        rules = tuple(RuleList.from_file(psl_path, options))
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Failed to load PSL file: %s, using fallback", e)
        return _fallback_rules(options)

    logger.info(
        "Loaded PSL: %d rules (%d private) from %s",
        len(rules),
        sum(1 for r in rules if r.private),
        psl_path,
    )
    return rules


@lru_cache(maxsize=2)
def _shared_list(private_domains: bool) -> RuleList:
    # Only used by the helpers below, never handed out
    return RuleList(_load_rules(private_domains))


def load_default_list(private_domains: bool = True) -> RuleList:
    """
    Build a rule list from the bundled data file.

    Each call returns a new RuleList, so adding rules to it does not
    affect other callers or the module-level helpers.

    Args:
        private_domains: Whether to keep rules from the private section

    Returns:
        RuleList with the bundled rules, or the fallback rules
    """
    return RuleList(_load_rules(private_domains))


def parse(name: str, options: FindOptions | None = None) -> DomainName:
    """
    Decompose a name using the default list.

    Examples:
        parse("www.example.co.uk")  -> DomainName("co.uk", "example", "www")
    """
    return parse_domain(_shared_list(True), name, options)


def domain(name: str, options: FindOptions | None = None) -> str:
    """
    Return the registrable domain of a name using the default list.

    Examples:
        domain("www.example.co.uk")  -> "example.co.uk"
    """
    return domain_of(_shared_list(True), name, options)


def public_suffix(name: str) -> str:
    """Return the public suffix of a name using the default list."""
    return suffix_of(_shared_list(True), name)


def clear_cache() -> None:
    """Clear the LRU caches for testing purposes."""
    _shared_list.cache_clear()
    _load_rules.cache_clear()
