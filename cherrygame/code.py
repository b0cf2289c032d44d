"""Result codes shared by the framework's RPC and actor layers."""

from enum import IntEnum


class Code(IntEnum):
    """Well-known result codes."""

    OK = 0
    SESSION_UID_NOT_BIND = 10
    DISCOVERY_NOT_FOUND_NODE = 11
    NODE_REQUEST_ERROR = 12
    RPC_NET_ERROR = 20
    RPC_UNMARSHAL_ERROR = 21
    RPC_MARSHAL_ERROR = 22
    RPC_REMOTE_EXECUTE_ERROR = 23
    ACTOR_PATH_IS_NIL = 24
    ACTOR_FUNC_NAME_ERROR = 25
    ACTOR_CONVERT_PATH_ERROR = 26
    ACTOR_MARSHAL_ERROR = 27
    ACTOR_UNMARSHAL_ERROR = 28
    ACTOR_CALL_FAIL = 29
    ACTOR_SOURCE_EQUAL_TARGET = 30
    ACTOR_PUBLISH_REMOTE_ERROR = 31
    ACTOR_CHILD_ID_NOT_FOUND = 32


def is_ok(code: int) -> bool:
    """Return True when ``code`` signals success."""
    return code == Code.OK


def is_fail(code: int) -> bool:
    """Return True when ``code`` signals a failure."""
    return code != Code.OK