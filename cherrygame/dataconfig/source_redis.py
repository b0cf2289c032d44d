"""Config data read from redis, with reloads announced over pub/sub."""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from typing import Any

import redis

from cherrygame.dataconfig.interfaces import ConfigChangeFn, IDataSource
from cherrygame.errors import CherryError

logger = logging.getLogger(__name__)

DEFAULT_PORT = 6379


class RedisSource(IDataSource):
    """Reads configs from redis keys ``<prefix_key>:<name>``.

    A message published on ``subscribe_key`` carries the name of a
    config that changed; the config is then read again.
    """

    name = "redis"

    def __init__(self, client: Any = None) -> None:
        self.address = ""
        self.password = ""
        self.db = 0
        self.prefix_key = ""
        self.subscribe_key = ""
        self._client = client
        self._change_fn: ConfigChangeFn | None = None
        self._stop_event: threading.Event | None = None
        self._thread: threading.Thread | None = None

    def init(self, settings: Mapping[str, Any] | None) -> None:
        """Read the ``redis`` node of ``settings``, connect and subscribe.

        Does nothing but log when the node is missing; raises CherryError
        when no subscribe key is configured.
        """
        node = (settings or {}).get(self.name)
        if not isinstance(node, Mapping):
            logger.warning("[data_config]->[%s] node not found.", self.name)
            return

        self.address = str(node.get("address", ""))
        self.password = str(node.get("password", ""))
        self.db = int(node.get("db", 0) or 0)
        self.prefix_key = str(node.get("prefix_key", ""))
        self.subscribe_key = str(node.get("subscribe_key", ""))

        if self._client is None:
            self._client = self._new_client()

        if not self.subscribe_key:
            raise CherryError("subscribe key is empty.")

        self._stop_event = threading.Event()
        self._thread = threading.Thread(
            target=self._listen, args=(self._stop_event,), name="redis-source-subscriber", daemon=True
        )
        self._thread.start()

    def _new_client(self) -> redis.Redis:
        host, sep, port = self.address.rpartition(":")
        if not sep:
            host, port = self.address, str(DEFAULT_PORT)
        return redis.Redis(
            host=host or "localhost",
            port=int(port),
            password=self.password or None,
            db=self.db,
        )

    def _listen(self, stop_event: threading.Event) -> None:
        pubsub = self._client.pubsub()
        try:
            pubsub.subscribe(self.subscribe_key)
            while not stop_event.is_set():
                message = pubsub.get_message(ignore_subscribe_messages=True, timeout=0.2)
                if not message:
                    continue
                payload = message.get("data")
                if isinstance(payload, bytes):
                    payload = payload.decode("utf-8", errors="replace")
                if not payload or not isinstance(payload, str):
                    continue
                self._handle(payload)
        except redis.RedisError as exc:
            logger.error("redis subscribe error = %s", exc)
        finally:
            try:
                pubsub.close()
            except redis.RedisError as exc:
                logger.warning("%s", exc)

    def _handle(self, config_name: str) -> None:
        logger.info("[name = %s] trigger file change.", config_name)
        try:
            data = self.read_bytes(config_name)
        except (CherryError, redis.RedisError) as exc:
            logger.warning("[name = %s] read data error = %s", config_name, exc)
            return
        if self._change_fn is None:
            return
        try:
            self._change_fn(config_name, data)
        except Exception:
            logger.exception("[name = %s] change handler failed", config_name)

    def read_bytes(self, config_name: str) -> bytes:
        """Return the value stored for the config; raise CherryError when absent."""
        if not config_name:
            raise CherryError("configName is empty.")
        if self._client is None:
            raise CherryError("redis client is not initialised.")
        value = self._client.get(f"{self.prefix_key}:{config_name}")
        if value is None:
            raise CherryError("redis: nil")
        if isinstance(value, str):
            return value.encode("utf-8")
        return bytes(value)

    def on_change(self, fn: ConfigChangeFn) -> None:
        """Set the function called when a config change is announced."""
        self._change_fn = fn

    def stop(self) -> None:
        """Stop listening and close the client."""
        logger.info("close redis client [address = %s]", self.address)
        if self._stop_event is not None:
            self._stop_event.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None
        if self._client is not None:
            try:
                self._client.close()
            except redis.RedisError as exc:
                logger.error("%s", exc)