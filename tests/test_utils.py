"""Tests for utils module."""

from __future__ import annotations

import json

import pytest


def test_safe_json_dict():
    from dirscope.utils import safe_json

    data = {"key": "value", "number": 42}
    assert safe_json(data) == json.dumps(data)


def test_safe_json_keeps_unicode():
    from dirscope.utils import safe_json

    assert safe_json({"name": "日本語.txt"}) == '{"name": "日本語.txt"}'


def test_safe_json_invalid():
    from dirscope.utils import safe_json

    # Non-serializable object
    class Custom:
        pass

    assert safe_json(Custom()) == "<unserializable>"


@pytest.mark.parametrize(
    "num_bytes,expected",
    [
        (0, "0.0B"),
        (512, "512.0B"),
        (1024, "1.0KB"),
        (1536, "1.5KB"),
        (1048576, "1.0MB"),
        (5 * 1024**3, "5.0GB"),
        (3 * 1024**4, "3.0TB"),
        (-1, "0.0B"),
    ],
)
def test_format_size(num_bytes, expected):
    from dirscope.utils import format_size

    assert format_size(num_bytes) == expected


@pytest.mark.parametrize(
    "text,expected",
    [
        ("1024", 1024),
        ("1.5M", 1572864),
        ("4.0K", 4096),
        ("1.0KB", 1024),
        ("2KiB", 2048),
        ("1,5K", 1536),
        ("1T", 1024**4),
        ("", 0),
        ("n/a", 0),
        ("1.2.3", 0),
    ],
)
def test_parse_size(text, expected):
    from dirscope.utils import parse_size

    assert parse_size(text) == expected


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("plain.txt", "plain.txt"),
        ("café.txt", "café.txt"),
        (b"bad\xff.txt".decode("utf-8", "surrogateescape"), "bad\ufffd.txt"),
    ],
)
def test_display_name(raw, expected):
    from dirscope.utils import display_name

    assert display_name(raw) == expected
    display_name(raw).encode("utf-8")
