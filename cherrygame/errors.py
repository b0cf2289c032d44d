"""Framework error type, helpers and predefined errors."""


class CherryError(Exception):
    """Error raised by the framework."""

    def __str__(self) -> str:
        return self.args[0] if self.args else ""


def error(text: str) -> CherryError:
    """Create an error carrying ``text``."""
    return CherryError(text)


def errorf(format: str, *args: object) -> CherryError:
    """Create an error from a %-style format string."""
    return CherryError(format % args if args else format)


def wrap(err: BaseException | str, text: str) -> CherryError:
    """Create an error that records ``err`` together with ``text``."""
    result = errorf("err:%s, text:%s", err, text)
    if isinstance(err, BaseException):
        result.__cause__ = err
    return result


def wrapf(err: BaseException | str, format: str, *args: object) -> CherryError:
    """Like :func:`wrap`, with the text built from a format string."""
    return wrap(err, format % args if args else format)


# session
SESSION_MEMBER_NOT_FOUND = error("member not found in the group")
SESSION_CLOSED_GROUP = error("group is closed")
SESSION_DUPLICATION = error("session has existed in the current group")
SESSION_NOT_FOUND_IN_CONTEXT = error("session not found in context")

# route
ROUTE_FIELD_CANT_EMPTY = error("route field can not be empty")
ROUTE_INVALID = error("invalid route")

# packet
PACKET_WRONG_TYPE = error("wrong packet type")
PACKET_SIZE_EXCEED = error("codec: packet size exceed")
PACKET_CONNECT_CLOSED = error("client connection closed")
PACKET_INVALID_HEADER = error("invalid header")
PACKET_MSG_SMALLER_THAN_EXPECTED = error("received less data than expected, EOF?")
PACKET_HEAD_FUNC_NO_SET = error("head func no set")

# message
MESSAGE_WRONG_TYPE = error("wrong message type")
MESSAGE_INVALID = error("invalid message")
MESSAGE_ROUTE_NOT_FOUND = error("route info not found in dictionary")

PROTOBUF_WRONG_VALUE_TYPE = error("convert on wrong type value")

DISCOVERY_MEMBER_LIST_IS_EMPTY = error("get member list is empty.")

# cluster
CLUSTER_RPC_CLIENT_IS_STOP = error("rpc client is stop")
CLUSTER_NO_IMPLEMENT = error("no implement")
NODE_TYPE_IS_NIL = error("node type is nil.")

ACTOR_PATH_ERROR = error("actor path is error.")

FUNC_IS_NIL = error("function is nil")
FUNC_TYPE_ERROR = error("Is not func type")