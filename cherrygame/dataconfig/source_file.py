"""Config data read from local files, with polling for changes."""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from cherrygame.dataconfig.interfaces import ConfigChangeFn, IDataSource
from cherrygame.errors import CherryError, errorf
from cherrygame.files import get_file_name, join_path

logger = logging.getLogger(__name__)

DEFAULT_FILE_PATH = "data/"
DEFAULT_EXT_NAME = ".json"
DEFAULT_RELOAD_TIME = 3000
"""Polling interval in milliseconds."""


class FileSource(IDataSource):
    """Reads configs from ``<base_path>/<file_path>/<name><ext_name>``.

    The directory is polled every ``reload_time`` milliseconds and the
    change function is called for every existing file that was written.
    """

    name = "file"

    def __init__(self, base_path: str | os.PathLike[str] = ".") -> None:
        self.base_path = os.fspath(base_path)
        self.file_path = DEFAULT_FILE_PATH
        self.ext_name = DEFAULT_EXT_NAME
        self.reload_time = DEFAULT_RELOAD_TIME
        self.monitor_path = ""
        self._change_fn: ConfigChangeFn | None = None
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self._snapshot: dict[str, tuple[int, int]] = {}

    def init(self, settings: Mapping[str, Any] | None) -> None:
        """Read the ``file`` node of ``settings`` and start watching.

        Raises CherryError when the node is malformed or the directory
        does not exist.
        """
        if self._thread is not None:
            self.stop()

        node = (settings or {}).get(self.name)
        if node is None:
            node = {}
        if not isinstance(node, Mapping):
            raise errorf("Unmarshal fileConfig fail. err = %s", "node is not an object")

        self.file_path = str(node.get("file_path") or "") or DEFAULT_FILE_PATH
        self.ext_name = str(node.get("ext_name") or "") or DEFAULT_EXT_NAME
        try:
            reload_time = int(node.get("reload_time") or 0)
        except (TypeError, ValueError) as exc:
            raise errorf("Unmarshal fileConfig fail. err = %s", exc) from exc
        self.reload_time = reload_time if reload_time >= 1 else DEFAULT_RELOAD_TIME

        try:
            self.monitor_path = join_path(self.base_path, self.file_path)
        except OSError as exc:
            raise errorf("[name = %s] join path fail. err = %s.", self.name, exc) from exc

        self._snapshot = self._stat_files()
        self._stop_event = threading.Event()
        self._thread = threading.Thread(
            target=self._watch, args=(self._stop_event,), name="file-source-watcher", daemon=True
        )
        self._thread.start()

    def read_bytes(self, config_name: str) -> bytes:
        """Return the contents of the config file; raise CherryError on failure."""
        if not config_name:
            raise CherryError("Config name is empty.")
        try:
            full_path = join_path(self.monitor_path, config_name + self.ext_name)
        except OSError as exc:
            raise errorf("Config file not found. err = %s", exc) from exc
        try:
            data = Path(full_path).read_bytes()
        except OSError as exc:
            raise errorf("Read file error. [path = %s, err = %s]", full_path, exc) from exc
        if not data:
            raise errorf("Data is empty. [configName = %s]", config_name)
        return data

    def on_change(self, fn: ConfigChangeFn) -> None:
        """Set the function called when a config file is written."""
        self._change_fn = fn

    def stop(self) -> None:
        """Stop watching the directory."""
        if self._thread is None:
            return
        self._stop_event.set()
        self._thread.join()
        self._thread = None
        logger.info("Remove watcher [path = %s]", self.monitor_path)

    def _stat_files(self) -> dict[str, tuple[int, int]]:
        if os.path.isdir(self.monitor_path):
            try:
                with os.scandir(self.monitor_path) as entries:
                    paths = [e.path for e in entries if not e.is_dir()]
            except OSError:
                return {}
        else:
            paths = [self.monitor_path]
        result = {}
        for path in paths:
            if not path.endswith(self.ext_name):
                continue
            try:
                info = os.stat(path)
            except OSError:
                continue
            result[path] = (info.st_mtime_ns, info.st_size)
        return result

    def _watch(self, stop_event: threading.Event) -> None:
        interval = self.reload_time / 1000
        while not stop_event.wait(interval):
            self._scan()

    def _scan(self) -> None:
        previous = self._snapshot
        current = self._stat_files()
        self._snapshot = current
        changed = sorted(p for p, sig in current.items() if p in previous and previous[p] != sig)
        for path in changed:
            config_name = get_file_name(os.path.basename(path), True)
            logger.info("Trigger file change. [name = %s]", config_name)
            try:
                data = self.read_bytes(config_name)
            except CherryError as exc:
                logger.warning("Read data fail. [name = %s, err = %s]", config_name, exc)
                continue
            if self._change_fn is None:
                continue
            try:
                self._change_fn(config_name, data)
            except Exception:
                logger.exception("[name = %s] change handler failed", config_name)