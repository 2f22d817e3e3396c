from __future__ import annotations

import pytest

from homesync.handlers.tcp.parser import (
    is_object_line,
    parse_message,
    correlation_key,
    parse_classification,
)


def test_parse_message_ok() -> None:
    msg = parse_message('{"type":"toggle","id":"5"}')
    assert msg == {"type": "toggle", "id": "5"}


@pytest.mark.parametrize("raw", ["{not json}", "{\"type\": }", "{}}"])
def test_parse_message_invalid(raw: str) -> None:
    with pytest.raises(ValueError):
        parse_message(raw)


def test_is_object_line() -> None:
    assert is_object_line("{}")
    assert not is_object_line("[1]")
    assert not is_object_line("{ unterminated")


@pytest.mark.parametrize(
    ("rest", "expected"),
    [
        ("esp32", ("ESP32", None)),
        ("ESP32:42", ("ESP32", "42")),
        ("mobile: phone-1 ", ("MOBILE", "phone-1")),
        ("ESP32:AA:BB:CC", ("ESP32", "AA:BB:CC")),
        ("ESP32:", ("ESP32", None)),
    ],
)
def test_parse_classification(rest: str, expected: tuple[str, str | None]) -> None:
    assert parse_classification(rest) == expected


def test_parse_classification_requires_type() -> None:
    with pytest.raises(ValueError):
        parse_classification(":42")


def test_correlation_key_normalizes_non_strings() -> None:
    assert correlation_key("7") == "7"
    assert correlation_key(7) == "7"
    assert correlation_key(None) is None
