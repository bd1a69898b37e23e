"""Tests for cookie policy integration."""

from __future__ import annotations

from http.cookiejar import Cookie, CookieJar
from urllib.request import Request

import pytest

from publicsuffix.core.constants import DEFAULT_LIST_VERSION
from publicsuffix.core.cookiejar import CookieJarList, PublicSuffixCookiePolicy
from publicsuffix.core.psl_loader import clear_cache, load_default_list


@pytest.fixture(autouse=True)
def clear_psl_cache():
    clear_cache()
    yield
    clear_cache()


def _make_cookie(domain: str, name: str = "session_id") -> Cookie:
    return Cookie(
        version=0,
        name=name,
        value="1",
        port=None,
        port_specified=False,
        domain=domain,
        domain_specified=True,
        domain_initial_dot=domain.startswith("."),
        path="/",
        path_specified=True,
        secure=False,
        expires=None,
        discard=True,
        comment=None,
        comment_url=None,
        rest={},
    )


class TestCookieJarList:
    """Tests for CookieJarList adapter."""

    def test_public_suffix(self, sample_rule_list) -> None:
        jar_list = CookieJarList(sample_rule_list)

        assert jar_list.public_suffix("www.example.co.uk") == "co.uk"
        assert jar_list.public_suffix("foo.github.io") == "github.io"

    def test_never_raises(self, sample_rule_list) -> None:
        jar_list = CookieJarList(sample_rule_list)

        assert jar_list.public_suffix("") == ""
        assert jar_list.public_suffix("com") == ""

    def test_defaults_to_bundled_list(self) -> None:
        jar_list = CookieJarList()
        assert list(jar_list.rule_list) == list(load_default_list())

    def test_str_returns_version(self, sample_rule_list) -> None:
        assert str(CookieJarList(sample_rule_list)) == DEFAULT_LIST_VERSION
        assert str(CookieJarList(sample_rule_list, version="test")) == "test"


class TestPublicSuffixCookiePolicy:
    """Tests for PublicSuffixCookiePolicy."""

    @pytest.fixture
    def policy(self, sample_rule_list) -> PublicSuffixCookiePolicy:
        return PublicSuffixCookiePolicy(CookieJarList(sample_rule_list))

    def test_rejects_public_suffix_domain(self, policy) -> None:
        request = Request("http://www.example.co.uk/")
        assert policy.set_ok_domain(_make_cookie(".co.uk"), request) is False

    def test_rejects_private_suffix_domain(self, policy) -> None:
        request = Request("http://user.github.io/")
        assert policy.set_ok_domain(_make_cookie(".github.io"), request) is False

    def test_accepts_registrable_domain(self, policy) -> None:
        request = Request("http://www.example.co.uk/")
        assert policy.set_ok_domain(_make_cookie(".example.co.uk"), request) is True

    def test_cookie_jar_integration(self, policy) -> None:
        """A CookieJar using the policy only stores allowed cookies."""
        jar = CookieJar(policy)
        request = Request("http://www.example.co.uk/")

        jar.set_cookie_if_ok(_make_cookie(".example.co.uk", "good"), request)
        jar.set_cookie_if_ok(_make_cookie(".co.uk", "bad"), request)

        assert [c.name for c in jar] == ["good"]
