"""Cookie policy integration for publicsuffix.

Adapts a RuleList to the narrow "domain in, suffix out" contract used by
cookie jars, and provides an http.cookiejar policy that refuses cookies
scoped to a public suffix.
"""

from __future__ import annotations

import logging
from http.cookiejar import Cookie, DefaultCookiePolicy
from urllib.request import Request

from .constants import DEFAULT_LIST_VERSION
from .domain import suffix_of
from .psl_loader import load_default_list
from .rule_list import RuleList

logger = logging.getLogger(__name__)


class CookieJarList:
    """Public suffix lookup for cookie jars."""

    def __init__(self, rule_list: RuleList | None = None, version: str = DEFAULT_LIST_VERSION):
        self.rule_list = rule_list if rule_list is not None else load_default_list()
        self.version = version

    def public_suffix(self, domain: str) -> str:
        """
        Return the public suffix of a domain.

        Never raises: an empty string is returned when the domain has no
        label in front of its suffix or cannot be parsed.
        """
        return suffix_of(self.rule_list, domain)

    def __str__(self) -> str:
        return self.version


class PublicSuffixCookiePolicy(DefaultCookiePolicy):
    """
    Cookie policy that rejects Domain attributes naming a public suffix.

    A cookie for "example.co.uk" is accepted, one for "co.uk" is not.
    All other checks are left to DefaultCookiePolicy.
    """

    def __init__(self, suffix_list: CookieJarList | None = None, **kwargs):
        super().__init__(**kwargs)
        self.suffix_list = suffix_list if suffix_list is not None else CookieJarList()

    def set_ok_domain(self, cookie: Cookie, request: Request) -> bool:
        if cookie.domain_specified:
            domain = cookie.domain.lstrip(".").lower()
            if domain and not self.suffix_list.public_suffix(domain):
                logger.debug("Rejecting cookie %s for public suffix domain %s", cookie.name, domain)
                return False
        return super().set_ok_domain(cookie, request)
