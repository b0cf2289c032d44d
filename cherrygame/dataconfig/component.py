"""Component that loads registered configs from a data source."""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from typing import Any

from cherrygame.dataconfig.interfaces import IConfig, IDataParser, IDataSource, JsonParser
from cherrygame.dataconfig.source_file import FileSource
from cherrygame.dataconfig.source_redis import RedisSource
from cherrygame.errors import CherryError, errorf

logger = logging.getLogger(__name__)

NAME = "data_config_component"

_parsers: dict[str, IDataParser] = {}
_sources: dict[str, IDataSource] = {}


def get_parser(name: str) -> IDataParser | None:
    """Return the parser registered under ``name``, or None."""
    return _parsers.get(name)


def register_parser(parser: IDataParser) -> None:
    """Register ``parser`` under its type name."""
    _parsers[parser.type_name] = parser


def get_data_source(name: str) -> IDataSource | None:
    """Return the data source registered under ``name``, or None."""
    return _sources.get(name)


def register_source(source: IDataSource) -> None:
    """Register ``source`` under its name."""
    _sources[source.name] = source


register_parser(JsonParser())
register_source(FileSource())
register_source(RedisSource())


class DataConfigComponent:
    """Loads configs through the source and parser named in ``settings``.

    ``settings`` is the ``data_config`` node: ``data_source`` and
    ``parser`` name registered entries, and each source reads its own
    sub-node.
    """

    name = NAME

    def __init__(self, settings: Mapping[str, Any] | None = None) -> None:
        self.settings = settings
        self._lock = threading.RLock()
        self._data_source: IDataSource | None = None
        self._parser: IDataParser | None = None
        self._configs: list[IConfig] = []

    @property
    def data_source(self) -> IDataSource | None:
        """The data source in use after :meth:`init`."""
        return self._data_source

    @property
    def parser(self) -> IDataParser | None:
        """The parser in use after :meth:`init`."""
        return self._parser

    @property
    def configs(self) -> list[IConfig]:
        """The registered configs, in registration order."""
        return list(self._configs)

    def init(self) -> None:
        """Resolve source and parser, then load every registered config.

        Raises CherryError when the settings, source or parser are
        missing; failures while loading are logged.
        """
        if not isinstance(self.settings, Mapping):
            raise CherryError("`data_config` node not found.")

        source_name = str(self.settings.get("data_source", ""))
        self._data_source = get_data_source(source_name)
        if self._data_source is None:
            raise errorf("[sourceName = %s] data source not found.", source_name)

        parser_name = str(self.settings.get("parser", ""))
        self._parser = get_parser(parser_name)
        if self._parser is None:
            raise errorf("[parserName = %s] parser not found.", parser_name)

        try:
            self._data_source.init(self.settings)

            for cfg in self._configs:
                cfg.init()

            for cfg in self._configs:
                data = self.get_bytes(cfg.name)
                if data is None:
                    logger.warning("[config = %s] load data fail.", cfg.name)
                    continue
                self._load_config(cfg, data, False)

            for cfg in self._configs:
                cfg.on_after_load(False)

            self._data_source.on_change(self._on_change)
        except Exception as exc:
            logger.error("%s", exc)

    def _on_change(self, config_name: str, data: bytes) -> None:
        cfg = self.get_iconfig(config_name)
        if cfg is None:
            return
        self._load_config(cfg, data, True)
        cfg.on_after_load(True)

    def _load_config(self, cfg: IConfig, data: bytes, reload: bool) -> None:
        try:
            parsed = self._parser.unmarshal(data)
        except Exception as exc:
            logger.warning("[config = %s] unmarshal error = %s", cfg.name, exc)
            return
        with self._lock:
            try:
                size = cfg.on_load(parsed, reload)
            except Exception as exc:
                logger.warning("[config = %s] execute Load() error = %s", cfg.name, exc)
                return
        logger.info("[config = %s] loaded. [size = %s]", cfg.name, size)

    def on_stop(self) -> None:
        """Stop the data source."""
        if self._data_source is not None:
            self._data_source.stop()

    def register(self, *args: IConfig) -> None:
        """Add configs to be loaded; None entries are skipped."""
        if not args:
            logger.warning("IConfig size is less than 1.")
            return
        self._configs.extend(cfg for cfg in args if cfg is not None)

    def get_iconfig(self, name: str) -> IConfig | None:
        """Return the first registered config named ``name``, or None."""
        return next((cfg for cfg in self._configs if cfg.name == name), None)

    def get_bytes(self, config_name: str) -> bytes | None:
        """Return the raw data of a config, or None when it cannot be read."""
        if self._data_source is None:
            return None
        try:
            return self._data_source.read_bytes(config_name)
        except Exception as exc:
            logger.warning("%s", exc)
            return None