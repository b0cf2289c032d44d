# cherrygame

Building blocks for game servers:

- `cherrygame.code`: the `Code` enum of result codes, with `is_ok(code)` and `is_fail(code)`.
- `cherrygame.errors`: the `CherryError` exception, the helpers `error`, `errorf`, `wrap` and
  `wrapf`, and predefined error values such as `ROUTE_INVALID` and `PACKET_SIZE_EXCEED`.
- `cherrygame.const`: `version()` and `get_logo()`, the start-up banner with the version filled in.
- `cherrygame.base58`: `encode(data)` and `decode(text)` with the Bitcoin alphabet; `decode`
  raises `Base58Error` on an illegal character.
- `cherrygame.compress`: `deflate_data`, `inflate_data` (raises `ValueError` on bad input) and
  `is_compressed`, which recognises zlib and gzip headers.
- `cherrygame.crypto`: `md5`, `md5_with_bytes`, `base64_encode`, `base64_decode`,
  `base64_decode_bytes` (raise `ValueError` on malformed input) and `crc32`.
- `cherrygame.jsonutil`: `to_json(obj)` (compact JSON, `""` for `None` or values that cannot be
  encoded) and `read_maps(path, maps)`, which merges a JSON object from a file into a dict.
- `cherrygame.maps.Map`: a key/value map that holds a lock on every operation when created with
  `safe=True`.
- `cherrygame.string_any_map.StringAnyMap`: a locked string-keyed map with get-or-set,
  set-if-absent, pop, filter, merge and JSON helpers.
- `cherrygame.files`: locating directories and files relative to the working directory, the
  program directory or the call stack (`judge_path`, `judge_file`), `join_path`, `get_file_name`,
  `walk_files` and `read_dir`.
- `cherrygame.http_client`: `get`, `post` (form-encoded) and `post_json`, each returning
  `(body, response)` with a timeout of `DEFAULT_TIMEOUT` seconds (5), plus `add_params` and
  `to_url_values`.
- `cherrygame.dataconfig`: a component that loads game tables through a named parser and data
  source, and reloads them when the source reports a change.

## Installation

```
pip install cherrygame
```

Python 3.10 or newer is required.

## Examples

Base58:

```python
from cherrygame import base58

text = base58.encode(b"\x00\x01hello")
assert base58.decode(text) == b"\x00\x01hello"
```

Compression:

```python
from cherrygame.compress import deflate_data, inflate_data, is_compressed

packed = deflate_data(b"payload" * 100)
assert is_compressed(packed)
assert inflate_data(packed) == b"payload" * 100
```

A map with locking:

```python
from cherrygame.maps import Map

m = Map(safe=True)
m.put(1, "one")
value, found = m.get(1)      # ("one", True)
missing = m.get(2)           # (None, False)
```

Query parameters:

```python
from cherrygame.http_client import add_params, to_url_values

url = add_params("http://localhost/api", to_url_values({"id": "7"}))
# "http://localhost/api?id=7"
```

## Data configuration

`DataConfigComponent` takes the `data_config` settings node as a mapping. Its `data_source`
and `parser` keys name registered entries; the `json` parser and the `file` and `redis`
sources are registered when `cherrygame.dataconfig.component` is imported. Further parsers and
sources can be added with `register_parser` and `register_source`.

Subclass `IConfig` for each table and register it before calling `init()`:

```python
from cherrygame.dataconfig.component import DataConfigComponent
from cherrygame.dataconfig.interfaces import IConfig


class ItemTable(IConfig):
    name = "item"

    def init(self):
        self.rows = {}

    def on_load(self, maps, reload):
        self.rows = {row["id"]: row for row in maps}
        return len(self.rows)

    def on_after_load(self, reload):
        pass


settings = {
    "data_source": "file",
    "parser": "json",
    "file": {"file_path": "data/", "ext_name": ".json", "reload_time": 3000},
}

component = DataConfigComponent(settings)
component.register(ItemTable())
component.init()      # reads data/item.json and starts watching the directory
...
component.on_stop()   # stops the watcher
```

`init()` raises `CherryError` when the settings are missing or the named source or parser is
not registered; errors while reading or loading a table are logged and the table is skipped.

The `file` source reads `<file_path>/<name><ext_name>` under its base path (the working
directory for the registered instance; register `FileSource(base_path)` to use another) and
polls every `reload_time` milliseconds for files that were written.

The `redis` source reads the key `<prefix_key>:<name>` and reloads a table whenever its name is
published on `subscribe_key`. Its node takes `address` (`host:port`), `password`, `db`,
`prefix_key` and `subscribe_key`; a subscribe key is required.

## What this package does not do

There is no application runtime here: nothing starts a server node, manages a component
lifecycle, handles signals, discovers cluster members or accepts network connections.
`DataConfigComponent.init()` and `on_stop()` are called by your own code.

## Running the tests

```
pip install -e ".[test]"
pytest
```