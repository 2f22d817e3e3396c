from __future__ import annotations

import pytest

from homesync.handlers.tcp.framing import LineFramer

STREAM = "TYPE:ESP32:42\nLIST\n\n{\"type\":\"state\",\"id\":\"7\",\"on\":true}\nhéllo ☃\n".encode()
EXPECTED = ["TYPE:ESP32:42", "LIST", "", '{"type":"state","id":"7","on":true}', "héllo ☃"]


def _frame(chunks: list[bytes]) -> list[str]:
    framer = LineFramer()
    lines: list[str] = []
    for chunk in chunks:
        lines.extend(framer.feed(chunk))
    return lines


def test_single_chunk_yields_every_line() -> None:
    assert _frame([STREAM]) == EXPECTED


@pytest.mark.parametrize("split", range(1, len(STREAM)))
def test_lines_do_not_depend_on_chunk_boundaries(split: int) -> None:
    assert _frame([STREAM[:split], STREAM[split:]]) == EXPECTED


def test_byte_at_a_time_delivery() -> None:
    assert _frame([STREAM[i : i + 1] for i in range(len(STREAM))]) == EXPECTED


def test_partial_line_stays_buffered() -> None:
    framer = LineFramer()
    assert list(framer.feed(b"PI")) == []
    assert framer.pending == b"PI"
    assert list(framer.feed(b"NG\nQU")) == ["PING"]
    assert framer.pending == b"QU"


def test_invalid_utf8_is_replaced_not_dropped() -> None:
    framer = LineFramer()
    assert list(framer.feed(b"\xffPING\n")) == ["\ufffdPING"]
