"""Tests for OAuth scopes and authorization URL construction."""
from urllib.parse import parse_qsl, urlsplit

import pytest

from orcidkit import PRODUCTION, SANDBOX, InvalidURLError, OAuthScope, OrcidEnvironment, build_authorize_url


def query_pairs(url):
    return parse_qsl(urlsplit(url).query, keep_blank_values=True)


class TestOAuthScope:
    def test_values(self):
        """Test scope values."""
        assert [scope.value for scope in OAuthScope] == [
            "/authenticate",
            "/read-limited",
            "/activities/update",
            "/person/update",
        ]

    @pytest.mark.parametrize(
        "raw,expected",
        [
            (OAuthScope.READ_LIMITED, "/read-limited"),
            ("/authenticate", "/authenticate"),
            ("read-limited", "/read-limited"),
            (" /person/update ", "/person/update"),
        ],
    )
    def test_render(self, raw, expected):
        assert OAuthScope.render(raw) == expected


class TestBuildAuthorizeURL:
    def test_all_parameters_in_order(self):
        """Test parameter order with every option set."""
        url = build_authorize_url(
            PRODUCTION,
            client_id="APP-123",
            redirect_uri="https://example.com/callback",
            scopes=[OAuthScope.AUTHENTICATE, OAuthScope.READ_LIMITED],
            state="xyz",
            show_login=True,
            prompt="login",
        )

        parts = urlsplit(url)
        assert (parts.scheme, parts.netloc, parts.path) == ("https", "orcid.org", "/oauth/authorize")
        assert query_pairs(url) == [
            ("client_id", "APP-123"),
            ("response_type", "code"),
            ("scope", "/authenticate /read-limited"),
            ("redirect_uri", "https://example.com/callback"),
            ("state", "xyz"),
            ("show_login", "true"),
            ("prompt", "login"),
        ]

    def test_exact_url(self):
        """Test the exact URL for the minimal case."""
        url = build_authorize_url(
            PRODUCTION,
            client_id="APP-123",
            redirect_uri="https://example.com/cb",
            scopes=[OAuthScope.AUTHENTICATE],
        )
        assert url == (
            "https://orcid.org/oauth/authorize?client_id=APP-123&response_type=code"
            "&scope=/authenticate&redirect_uri=https://example.com/cb"
        )

    def test_optional_parameters_omitted(self):
        """Test optional parameters are left out when not given."""
        url = build_authorize_url(SANDBOX, "APP-1", "https://example.com/cb", ["/authenticate"])

        assert url.startswith("https://sandbox.orcid.org/oauth/authorize?")
        assert [key for key, _ in query_pairs(url)] == [
            "client_id",
            "response_type",
            "scope",
            "redirect_uri",
        ]

    def test_show_login_false(self):
        """Test show_login=False is sent as "false"."""
        url = build_authorize_url(
            PRODUCTION, "APP-1", "https://example.com/cb", ["/authenticate"], show_login=False
        )
        assert ("show_login", "false") in query_pairs(url)

    def test_values_with_reserved_characters_round_trip(self):
        """Test reserved characters survive a round trip."""
        redirect = "https://example.com/cb?next=/home&lang=en"
        url = build_authorize_url(
            PRODUCTION, "APP-1", redirect, ["/authenticate"], state="a b&c=d#e"
        )

        pairs = dict(query_pairs(url))
        assert pairs["redirect_uri"] == redirect
        assert pairs["state"] == "a b&c=d#e"
        assert "#" not in url

    def test_custom_scheme_redirect_kept_readable(self):
        """Test custom-scheme redirects stay readable."""
        url = build_authorize_url(PRODUCTION, "APP-1", "myapp://callback", ["/authenticate"])
        assert "redirect_uri=myapp://callback" in url

    def test_custom_environment_with_path(self):
        """Test a custom OAuth base with a path."""
        env = OrcidEnvironment("http://localhost:8080/api/", "http://localhost:8080/orcid")
        url = build_authorize_url(env, "APP-1", "https://example.com/cb", ["/authenticate"])
        assert url.startswith("http://localhost:8080/orcid/oauth/authorize?client_id=APP-1")

    @pytest.mark.parametrize(
        "oauth_base",
        ["not a url", "/relative/path", "orcid.org", "https://orcid.org/?x=1", "https://orcid.org/#frag"],
    )
    def test_invalid_base_raises(self, oauth_base):
        """Test invalid OAuth bases raise InvalidURLError."""
        env = OrcidEnvironment(PRODUCTION.api_base_url, oauth_base)

        with pytest.raises(InvalidURLError):
            build_authorize_url(env, "APP-1", "https://example.com/cb", ["/authenticate"])
