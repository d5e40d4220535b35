from __future__ import annotations

import pytest

from treeconf.utils.paths import format_path, parse_path, to_key_path


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("user.name", ("user", "name")),
        ("user", ("user",)),
        ("", ()),
        ("  server.tls.enabled ", ("server", "tls", "enabled")),
        ("user..name.", ("user", "name")),
    ],
)
def test_parse_path(text: str, expected: tuple[str, ...]) -> None:
    assert parse_path(text) == expected


def test_parse_path_with_custom_separator() -> None:
    assert parse_path("server/tls", "/") == ("server", "tls")
    assert parse_path("server.tls", "/") == ("server.tls",)


def test_format_path() -> None:
    assert format_path(("server", "tls", "enabled")) == "server.tls.enabled"
    assert format_path(("server", "tls"), "/") == "server/tls"
    assert format_path(()) == ""


def test_to_key_path_accepts_sequences_and_strings() -> None:
    assert to_key_path(["a", "b"]) == ("a", "b")
    assert to_key_path("a.b") == ("a", "b")
    assert to_key_path("a:b", ":") == ("a", "b")
