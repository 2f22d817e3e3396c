"""Parsing for classification commands and JSON message lines."""

from __future__ import annotations

from typing import Any

import orjson


def is_object_line(line: str) -> bool:
    return line.startswith("{") and line.endswith("}")


def parse_message(raw: str) -> dict[str, Any]:
    try:
        msg = orjson.loads(raw)
    except orjson.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON: {exc}") from exc

    if not isinstance(msg, dict):
        raise ValueError("message must be a JSON object")
    return msg


def parse_classification(rest: str) -> tuple[str, str | None]:
    """Parse the part of `TYPE:<TYPE>[:<ID>]` after the prefix.

    The id keeps any further colons so MAC-style identifiers survive intact.
    """
    type_token, sep, id_token = rest.partition(":")
    device_type = type_token.strip().upper()
    if not device_type:
        raise ValueError("classification missing device type")
    device_id = id_token.strip() if sep else ""
    return device_type, (device_id or None)


def correlation_key(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return orjson.dumps(value).decode("utf-8")


__all__ = ["is_object_line", "parse_message", "parse_classification", "correlation_key"]
