# tests/unit/test_validators.py
from __future__ import annotations

import pytest

from blockforge.utils import is_valid_email, is_valid_ip, is_valid_url


@pytest.mark.parametrize("url", [
    "https://example.com",
    "http://example.com/path?q=1",
    "ftp://files.example.com",
    "mailto:someone@example.com",
])
def test_valid_urls(url):
    assert is_valid_url(url)


@pytest.mark.parametrize("url", ["", "example.com", "http://", "https:// spaced.com", "not a url"])
def test_invalid_urls(url):
    assert not is_valid_url(url)


def test_email():
    assert is_valid_email("security@company.com")
    assert not is_valid_email("security@company")
    assert not is_valid_email("no at sign.com")
    assert not is_valid_email("")


@pytest.mark.parametrize("ip,expected", [
    ("192.168.1.100", True),
    ("0.0.0.0", True),
    ("255.255.255.255", True),
    ("256.1.1.1", False),
    ("1.2.3", False),
    ("::1", False),
    ("", False),
])
def test_ipv4(ip, expected):
    assert is_valid_ip(ip) is expected
