"""
Tests for NO_PROXY bypass evaluation.
"""
import pytest
from global_proxy import is_bypassed, parse_bypass_entry

class TestParseBypassEntry:
    def test_host_only(self):
        """Should return the host with no port."""
        assert parse_bypass_entry("example.com") == ("example.com", None)

    def test_host_and_port(self):
        """Should split and trim host and port."""
        assert parse_bypass_entry(" localhost : 8080 ") == ("localhost", "8080")

    def test_lowercases_host(self):
        """Should lowercase the host."""
        assert parse_bypass_entry("Example.COM") == ("example.com", None)

    def test_non_numeric_port_kept_as_written(self):
        """Should keep a non-numeric port instead of failing."""
        assert parse_bypass_entry("example.com:http") == ("example.com", "http")

class TestIsBypassed:
    def test_empty_list(self):
        """Should not bypass when there are no entries."""
        assert is_bypassed("https://example.com", []) is False

    def test_relative_url_never_bypassed(self):
        """Should not bypass relative or empty URLs, even with a wildcard."""
        assert is_bypassed("/api/v1/items", ["*"]) is False
        assert is_bypassed("", ["*"]) is False

    def test_malformed_url_never_bypassed(self):
        """Should not bypass URLs that cannot be parsed."""
        assert is_bypassed("http://[::1", ["*"]) is False

    def test_wildcard(self):
        """Should bypass every absolute URL when '*' is present."""
        assert is_bypassed("https://anything.example.org:9443/x", ["localhost", "*"]) is True

    @pytest.mark.parametrize("url,expected", [
        ("https://example.com", True),
        ("https://api.example.com/v1", True),
        ("http://deep.api.example.com", True),
        ("https://notexample.com", False),
        ("https://example.com.evil.net", False),
    ])
    def test_suffix_match(self, url, expected):
        """Should match the host and its subdomains only."""
        assert is_bypassed(url, ["example.com"]) is expected

    def test_leading_dot_matches_subdomains(self):
        """Should treat a leading dot like a domain suffix."""
        assert is_bypassed("https://api.internal.net", [".internal.net"]) is True
        assert is_bypassed("https://notinternal.net", [".internal.net"]) is False

    def test_leading_dot_does_not_match_bare_domain(self):
        """Should not match the bare domain of a leading-dot entry."""
        assert is_bypassed("https://internal.net", [".internal.net"]) is False

    def test_host_port_entry(self):
        """Should bypass only the matching explicit port."""
        entries = ["localhost:8080"]
        assert is_bypassed("http://localhost:8080/health", entries) is True
        assert is_bypassed("http://localhost:9090/health", entries) is False

    def test_host_port_entry_without_explicit_target_port(self):
        """Should ignore the entry port when the target has no explicit port."""
        assert is_bypassed("http://localhost/health", ["localhost:8080"]) is True

    def test_case_insensitive_hosts(self):
        """Should compare hosts case-insensitively."""
        assert is_bypassed("https://API.Example.com", ["EXAMPLE.com"]) is True

    def test_non_numeric_port_matches_host_without_target_port(self):
        """Should match on host when the target has no explicit port."""
        assert is_bypassed("https://example.com/x", ["example.com:abc"]) is True
        assert is_bypassed("https://api.example.com", ["example.com:abc"]) is True

    def test_non_numeric_port_skipped_with_target_port(self):
        """Should skip the entry when the target has an explicit port."""
        assert is_bypassed("https://example.com:8443", ["example.com:abc"]) is False
        assert is_bypassed("https://example.com:8443", ["example.com:abc", "example.com"]) is True

    def test_ip_address(self):
        """Should match IP addresses exactly."""
        assert is_bypassed("http://127.0.0.1:5000", ["127.0.0.1"]) is True
        assert is_bypassed("http://10.0.0.1", ["127.0.0.1"]) is False

    def test_no_match(self):
        """Should not bypass unrelated hosts."""
        assert is_bypassed("https://github.com", ["localhost", "internal.net"]) is False
