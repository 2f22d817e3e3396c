"""Line protocol constants: commands, replies and device types."""

from __future__ import annotations

LINE_DELIMITER = b"\n"
LINE_ENCODING = "utf-8"

# Line commands (matched case-insensitively)
CMD_TYPE_PREFIX = "TYPE:"
CMD_LIST = "LIST"
CMD_HEALTH = "HEALTH"
CMD_PING = "PING"
CMD_QUIT = "QUIT"

# Device types
DEVICE_TYPE_ESP32 = "ESP32"
DEVICE_TYPE_MOBILE = "MOBILE"
DEVICE_TYPE_UNKNOWN = "UNKNOWN"

# Structured message keys and kinds
MSG_KEY_TYPE = "type"
MSG_KEY_ID = "id"

MSG_PING = "ping"
MSG_TOGGLE = "toggle"
MSG_REQUEST_STATE = "request_state"
MSG_ACK = "ack"
MSG_STATE = "state"

# Replies
REPLY_PONG = "PONG"
REPLY_BYE = "BYE"
REPLY_ACK = "ACK"
REPLY_ECHO_PREFIX = "ECHO: "
REPLY_ERROR = "ERROR"
REPLY_ERROR_MISSING_ID = "ERROR missing_id"
REPLY_ERROR_INVALID_JSON = "ERROR invalid_json"
REPLY_ERROR_INVALID_TYPE = "ERROR invalid_type"

HEALTH_STATUS_OK = "ok"
TIMEOUT_ERROR = "timeout"

BANNER = (
    "Homesync Online TCP server. Send TYPE:<TYPE>[:<ID>], LIST, HEALTH, PING, QUIT "
    "or a JSON message per line."
)

__all__ = [
    "LINE_DELIMITER",
    "LINE_ENCODING",
    "CMD_TYPE_PREFIX",
    "CMD_LIST",
    "CMD_HEALTH",
    "CMD_PING",
    "CMD_QUIT",
    "DEVICE_TYPE_ESP32",
    "DEVICE_TYPE_MOBILE",
    "DEVICE_TYPE_UNKNOWN",
    "MSG_KEY_TYPE",
    "MSG_KEY_ID",
    "MSG_PING",
    "MSG_TOGGLE",
    "MSG_REQUEST_STATE",
    "MSG_ACK",
    "MSG_STATE",
    "REPLY_PONG",
    "REPLY_BYE",
    "REPLY_ACK",
    "REPLY_ECHO_PREFIX",
    "REPLY_ERROR",
    "REPLY_ERROR_MISSING_ID",
    "REPLY_ERROR_INVALID_JSON",
    "REPLY_ERROR_INVALID_TYPE",
    "HEALTH_STATUS_OK",
    "TIMEOUT_ERROR",
    "BANNER",
]
