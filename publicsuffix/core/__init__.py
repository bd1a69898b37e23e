"""Core module for publicsuffix."""

from .config import ConfigManager, ConfigError
from .logging_config import setup_logging, get_audit_logger, log_list_loaded
from .rules import Rule, RuleType, DEFAULT_RULE, parse_rule, labels
from .models import (
    DomainName,
    FindOptions,
    ParserOptions,
    DEFAULT_FIND_OPTIONS,
    DEFAULT_PARSER_OPTIONS,
)
from .rule_list import RuleList
from .domain import (
    DomainError,
    InvalidNameError,
    NameIsSuffixError,
    normalize,
    parse_domain,
    domain_of,
    suffix_of,
)
from .psl_loader import load_default_list, parse, domain, public_suffix
from .cookiejar import CookieJarList, PublicSuffixCookiePolicy

__all__ = [
    # Config
    "ConfigManager",
    "ConfigError",
    # Logging
    "setup_logging",
    "get_audit_logger",
    "log_list_loaded",
    # Rules
    "Rule",
    "RuleType",
    "DEFAULT_RULE",
    "parse_rule",
    "labels",
    "RuleList",
    # Models
    "DomainName",
    "FindOptions",
    "ParserOptions",
    "DEFAULT_FIND_OPTIONS",
    "DEFAULT_PARSER_OPTIONS",
    # Lookup
    "DomainError",
    "InvalidNameError",
    "NameIsSuffixError",
    "normalize",
    "parse_domain",
    "domain_of",
    "suffix_of",
    # Default list
    "load_default_list",
    "parse",
    "domain",
    "public_suffix",
    # Cookies
    "CookieJarList",
    "PublicSuffixCookiePolicy",
]
