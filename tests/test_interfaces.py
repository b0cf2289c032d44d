import pytest

from cherrygame.dataconfig.interfaces import IConfig, IDataParser, IDataSource, JsonParser


def test_json_parser_type_name():
    assert JsonParser().type_name == "json"


def test_json_parser_unmarshal_bytes():
    assert JsonParser().unmarshal(b'{"a": [1, 2], "b": "x"}') == {"a": [1, 2], "b": "x"}


def test_json_parser_unmarshal_str():
    assert JsonParser().unmarshal("[true, null]") == [True, None]


def test_json_parser_rejects_malformed():
    with pytest.raises(ValueError):
        JsonParser().unmarshal(b"{not json")


@pytest.mark.parametrize("cls", [IDataParser, IDataSource, IConfig])
def test_interfaces_are_abstract(cls):
    with pytest.raises(TypeError):
        cls()


def test_config_subclass_loads_parsed_data():
    class Hero(IConfig):
        def __init__(self):
            self.rows = []

        @property
        def name(self):
            return "hero"

        def init(self):
            self.rows = []

        def on_load(self, maps, reload):
            self.rows = list(maps)
            return len(self.rows)

        def on_after_load(self, reload):
            pass

    hero = Hero()
    hero.init()
    parsed = JsonParser().unmarshal(b'[{"id": 1}, {"id": 2}, {"id": 3}]')
    assert hero.on_load(parsed, False) == 3
    assert hero.rows == [{"id": 1}, {"id": 2}, {"id": 3}]