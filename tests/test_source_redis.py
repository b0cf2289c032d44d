import queue

import pytest

from cherrygame.dataconfig.source_redis import RedisSource
from cherrygame.errors import CherryError


class FakePubSub:
    def __init__(self):
        self.messages = queue.Queue()
        self.channels = []
        self.closed = False

    def subscribe(self, channel):
        self.channels.append(channel)

    def get_message(self, ignore_subscribe_messages=False, timeout=0.0):
        try:
            return self.messages.get(timeout=timeout)
        except queue.Empty:
            return None

    def close(self):
        self.closed = True


class FakeRedis:
    def __init__(self):
        self.store = {}
        self.pubsub_obj = FakePubSub()
        self.closed = False

    def get(self, key):
        return self.store.get(key)

    def pubsub(self):
        return self.pubsub_obj

    def close(self):
        self.closed = True


SETTINGS = {"redis": {"address": "localhost:6379", "prefix_key": "cfg", "subscribe_key": "cfg_change"}}


@pytest.fixture
def client():
    return FakeRedis()


def test_source_name():
    assert RedisSource().name == "redis"


def test_read_bytes_uses_prefix(client):
    client.store["cfg:hero"] = b'{"id": 1}'
    source = RedisSource(client)
    source.init(SETTINGS)
    try:
        assert source.read_bytes("hero") == b'{"id": 1}'
    finally:
        source.stop()


def test_read_bytes_errors(client):
    source = RedisSource(client)
    source.init(SETTINGS)
    try:
        with pytest.raises(CherryError):
            source.read_bytes("")
        with pytest.raises(CherryError):
            source.read_bytes("missing")
    finally:
        source.stop()


def test_change_message_triggers_reload(client):
    client.store["cfg:hero"] = b"[1]"
    events = queue.Queue()
    source = RedisSource(client)
    source.on_change(lambda name, data: events.put((name, data)))
    source.init(SETTINGS)
    try:
        client.pubsub_obj.messages.put({"type": "message", "data": b""})
        client.pubsub_obj.messages.put({"type": "message", "data": b"hero"})
        assert events.get(timeout=5) == ("hero", b"[1]")
        assert client.pubsub_obj.channels == ["cfg_change"]
    finally:
        source.stop()


def test_stop_closes_client_and_pubsub(client):
    source = RedisSource(client)
    source.init(SETTINGS)
    source.stop()
    assert client.closed
    assert client.pubsub_obj.closed


def test_missing_node_leaves_source_unconfigured(client):
    source = RedisSource(client)
    source.init({})
    assert source.subscribe_key == ""
    assert client.pubsub_obj.channels == []


def test_empty_subscribe_key_raises(client):
    source = RedisSource(client)
    with pytest.raises(CherryError):
        source.init({"redis": {"address": "localhost:6379", "prefix_key": "cfg"}})