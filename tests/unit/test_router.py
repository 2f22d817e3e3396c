from __future__ import annotations

from homesync.handlers.tcp.dispatch import handle_line

from tests.utils.streams import FakeStream, FakeScheduler, make_deps

TOGGLE = '{"type":"toggle","id":"5"}'


def _client(deps, device_type: str | None = None, *, fail_writes: bool = False):
    stream = FakeStream()
    conn = deps.connections.admit(stream, f"peer-{len(deps.connections.connections())}")
    if device_type is not None:
        handle_line(deps, conn, f"TYPE:{device_type}")
    stream.take()
    stream.fail_writes = fail_writes
    return conn, stream


def test_json_ping_gets_pong() -> None:
    deps = make_deps()
    conn, stream = _client(deps)
    handle_line(deps, conn, '{"type":"ping"}')
    assert stream.take() == ["PONG"]


def test_toggle_reaches_only_other_esp32_clients() -> None:
    deps = make_deps()
    _esp_a, esp_a_stream = _client(deps, "ESP32")
    _esp_b, esp_b_stream = _client(deps, "ESP32")
    _other_mobile, other_mobile_stream = _client(deps, "MOBILE")
    sender, sender_stream = _client(deps, "MOBILE")

    handle_line(deps, sender, TOGGLE)

    assert esp_a_stream.take() == [TOGGLE]
    assert esp_b_stream.take() == [TOGGLE]
    assert other_mobile_stream.take() == []
    assert sender_stream.take() == ["ACK forwarded=2"]


def test_toggle_from_esp32_skips_the_sender() -> None:
    deps = make_deps()
    sender, sender_stream = _client(deps, "ESP32")
    _peer, peer_stream = _client(deps, "ESP32")

    handle_line(deps, sender, TOGGLE)

    assert peer_stream.take() == [TOGGLE]
    assert sender_stream.take() == ["ACK forwarded=1"]


def test_failed_recipient_does_not_abort_fan_out() -> None:
    deps = make_deps()
    _broken, _ = _client(deps, "ESP32", fail_writes=True)
    _healthy, healthy_stream = _client(deps, "ESP32")
    sender, sender_stream = _client(deps, "MOBILE")

    handle_line(deps, sender, TOGGLE)

    assert healthy_stream.take() == [TOGGLE]
    assert sender_stream.take() == ["ACK forwarded=1"]


def test_request_state_requires_id() -> None:
    deps = make_deps()
    _esp, esp_stream = _client(deps, "ESP32")
    sender, sender_stream = _client(deps, "MOBILE")

    handle_line(deps, sender, '{"type":"request_state","id":null}')

    assert sender_stream.take() == ["ERROR missing_id"]
    assert esp_stream.take() == []
    assert len(deps.pending) == 0


def test_request_state_without_devices_times_out() -> None:
    scheduler = FakeScheduler()
    deps = make_deps(scheduler)
    sender, sender_stream = _client(deps, "MOBILE")

    handle_line(deps, sender, '{"type":"request_state","id":"7"}')
    assert sender_stream.take() == ["ACK request_state forwarded=0"]
    assert "7" in deps.pending

    scheduler.fire_all()

    assert sender_stream.take_json() == [{"type": "error", "id": "7", "error": "timeout"}]
    assert "7" not in deps.pending


def test_two_requesters_share_one_state_answer() -> None:
    deps = make_deps()
    esp, esp_stream = _client(deps, "ESP32")
    first, first_stream = _client(deps, "MOBILE")
    second, second_stream = _client(deps, "MOBILE")
    query = '{"type":"request_state","id":"lamp"}'
    answer = '{"type":"state","id":"lamp","on":true}'

    handle_line(deps, first, query)
    handle_line(deps, second, query)
    assert esp_stream.take() == [query, query]
    first_stream.take()
    second_stream.take()

    handle_line(deps, esp, answer)

    assert first_stream.take() == [answer]
    assert second_stream.take() == [answer]
    assert esp_stream.take() == ["ACK"]


def test_report_without_requesters_goes_to_mobile_clients() -> None:
    deps = make_deps()
    esp, esp_stream = _client(deps, "ESP32")
    _mobile, mobile_stream = _client(deps, "MOBILE")
    _other_esp, other_esp_stream = _client(deps, "ESP32")
    report = '{"type":"ack","id":"9","ok":true}'

    handle_line(deps, esp, report)

    assert mobile_stream.take() == [report]
    assert other_esp_stream.take() == []
    assert esp_stream.take() == ["ACK"]


def test_requester_disconnect_purges_pending_entry() -> None:
    scheduler = FakeScheduler()
    deps = make_deps(scheduler)
    esp, esp_stream = _client(deps, "ESP32")
    requester, requester_stream = _client(deps, "MOBILE")
    _bystander, bystander_stream = _client(deps, "MOBILE")

    handle_line(deps, requester, '{"type":"request_state","id":"7"}')
    requester_stream.take()
    esp_stream.take()

    deps.connections.evict(requester)
    deps.pending.purge_connection(requester)
    assert "7" not in deps.pending
    assert scheduler.active == []

    answer = '{"type":"state","id":"7"}'
    handle_line(deps, esp, answer)
    assert bystander_stream.take() == [answer]
    assert requester_stream.take() == []


def test_numeric_ids_correlate_with_string_ids() -> None:
    deps = make_deps()
    esp, _ = _client(deps, "ESP32")
    requester, requester_stream = _client(deps, "MOBILE")

    handle_line(deps, requester, '{"type":"request_state","id":7}')
    requester_stream.take()
    handle_line(deps, esp, '{"type":"state","id":"7"}')

    assert requester_stream.take() == ['{"type":"state","id":"7"}']


def test_unrecognized_kinds_get_generic_ack() -> None:
    deps = make_deps()
    _esp, esp_stream = _client(deps, "ESP32")
    _mobile, mobile_stream = _client(deps, "MOBILE")
    sender, sender_stream = _client(deps, "ESP32")

    handle_line(deps, sender, '{"type":"telemetry","temp":21}')
    handle_line(deps, sender, '{"value":1}')
    handle_line(deps, sender, '{"type":"state"}')

    assert sender_stream.take() == ["ACK", "ACK", "ACK"]
    assert esp_stream.take() == []
    assert mobile_stream.take() == []
