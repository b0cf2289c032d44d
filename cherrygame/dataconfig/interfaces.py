"""Interfaces for data-config parsers, sources and configs, and the JSON parser."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Callable

ConfigChangeFn = Callable[[str, bytes], None]
"""Called with a config name and its new raw data when the data changes."""


class IDataParser(ABC):
    """Turns raw config data into Python objects."""

    @property
    @abstractmethod
    def type_name(self) -> str:
        """Name the parser is registered under."""

    @abstractmethod
    def unmarshal(self, data: bytes | str) -> Any:
        """Parse ``data``; raise ValueError when it is malformed."""


class IDataSource(ABC):
    """Supplies raw config data and reports changes to it."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Name the source is registered under."""

    @abstractmethod
    def init(self, settings: Mapping[str, Any]) -> None:
        """Prepare the source from the ``data_config`` settings node."""

    @abstractmethod
    def read_bytes(self, config_name: str) -> bytes:
        """Return the raw data of a config; raise when it cannot be read."""

    @abstractmethod
    def on_change(self, fn: ConfigChangeFn) -> None:
        """Set the function called when a config changes."""

    @abstractmethod
    def stop(self) -> None:
        """Release the source's resources."""


class IConfig(ABC):
    """A config table filled from parsed data."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of the config, used to look up its data."""

    @abstractmethod
    def init(self) -> None:
        """Prepare the config before any data is loaded."""

    @abstractmethod
    def on_load(self, maps: Any, reload: bool) -> int:
        """Load parsed data; return the number of entries loaded."""

    @abstractmethod
    def on_after_load(self, reload: bool) -> None:
        """Called after every config has been loaded."""


class JsonParser(IDataParser):
    """Parser for JSON config data."""

    type_name = "json"

    def unmarshal(self, data: bytes | str) -> Any:
        """Decode JSON text; raise ValueError when it is malformed."""
        return json.loads(data)