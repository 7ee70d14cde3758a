"""Tests for defanging and host extraction."""

from __future__ import annotations

import pytest

from mercyctl.domain.urls import defang, hostname_of, refang


class TestDefang:
    def test_url(self) -> None:
        assert defang("https://example.com") == "https://example[.]com"

    def test_every_dot(self) -> None:
        assert defang("a.b.c.d") == "a[.]b[.]c[.]d"

    def test_idempotent(self) -> None:
        once = defang("https://sub.example.co.uk/x.html")
        assert defang(once) == once

    def test_refang_inverts(self) -> None:
        text = "http://10.0.0.1/a.b"
        assert refang(defang(text)) == text


class TestHostnameOf:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("https://azazelm3dj3d.com", "azazelm3dj3d.com"),
            ("http://Example.COM:8080/path?q=1", "example.com"),
            ("example.com/path", "example.com"),
            ("  example.org  ", "example.org"),
            ("hxxps://example[.]com", "example.com"),
            ("", ""),
            ("http://[oops", ""),
        ],
    )
    def test_extract(self, value: str, expected: str) -> None:
        assert hostname_of(value) == expected
