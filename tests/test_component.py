import pytest

from cherrygame.dataconfig.component import (
    DataConfigComponent,
    get_data_source,
    get_parser,
    register_parser,
    register_source,
)
from cherrygame.dataconfig.interfaces import IConfig, IDataParser, IDataSource, JsonParser
from cherrygame.dataconfig.source_file import FileSource
from cherrygame.dataconfig.source_redis import RedisSource
from cherrygame.errors import CherryError


class MemorySource(IDataSource):
    name = "memory"

    def __init__(self, store):
        self.store = store
        self.settings = None
        self.change_fn = None
        self.stopped = False

    def init(self, settings):
        self.settings = settings

    def read_bytes(self, config_name):
        if config_name not in self.store:
            raise CherryError("missing")
        return self.store[config_name]

    def on_change(self, fn):
        self.change_fn = fn

    def stop(self):
        self.stopped = True


class RecordingConfig(IConfig):
    def __init__(self, config_name, fail=False):
        self._name = config_name
        self.fail = fail
        self.initialised = False
        self.loads = []
        self.after = []

    @property
    def name(self):
        return self._name

    def init(self):
        self.initialised = True

    def on_load(self, maps, reload):
        if self.fail:
            raise ValueError("bad rows")
        self.loads.append((maps, reload))
        return len(maps)

    def on_after_load(self, reload):
        self.after.append(reload)


SETTINGS = {"data_source": "memory", "parser": "json"}


@pytest.fixture
def source():
    src = MemorySource({"hero": b'{"a": 1}', "broken": b"{oops"})
    register_source(src)
    return src


def test_default_registrations():
    assert isinstance(get_parser("json"), JsonParser)
    assert isinstance(get_data_source("file"), FileSource)
    assert isinstance(get_data_source("redis"), RedisSource)
    assert get_parser("yaml-unknown") is None
    assert get_data_source("unknown") is None


def test_register_parser():
    class UpperParser(IDataParser):
        type_name = "upper"

        def unmarshal(self, data):
            return data.upper()

    parser = UpperParser()
    register_parser(parser)
    assert get_parser("upper") is parser


def test_component_name():
    assert DataConfigComponent().name == "data_config_component"


def test_init_loads_configs(source):
    hero = RecordingConfig("hero")
    component = DataConfigComponent(SETTINGS)
    component.register(hero)
    component.init()
    assert hero.initialised
    assert hero.loads == [({"a": 1}, False)]
    assert hero.after == [False]
    assert source.settings == SETTINGS
    assert component.data_source is source


def test_missing_or_broken_data_is_skipped(source):
    missing = RecordingConfig("nothing")
    broken = RecordingConfig("broken")
    component = DataConfigComponent(SETTINGS)
    component.register(missing, broken)
    component.init()
    assert missing.loads == []
    assert broken.loads == []
    assert missing.after == [False]
    assert broken.after == [False]


def test_failing_on_load_does_not_stop_others(source):
    bad = RecordingConfig("hero", fail=True)
    component = DataConfigComponent(SETTINGS)
    component.register(bad)
    component.init()
    assert bad.after == [False]


def test_change_reloads_config(source):
    hero = RecordingConfig("hero")
    component = DataConfigComponent(SETTINGS)
    component.register(hero)
    component.init()
    source.change_fn("hero", b'{"b": 2}')
    source.change_fn("unknown", b"{}")
    assert hero.loads[-1] == ({"b": 2}, True)
    assert hero.after == [False, True]


def test_missing_settings_raise():
    with pytest.raises(CherryError):
        DataConfigComponent(None).init()


def test_unknown_source_raises():
    with pytest.raises(CherryError):
        DataConfigComponent({"data_source": "unknown", "parser": "json"}).init()


def test_unknown_parser_raises(source):
    with pytest.raises(CherryError):
        DataConfigComponent({"data_source": "memory", "parser": "unknown"}).init()


def test_on_stop_stops_source(source):
    component = DataConfigComponent(SETTINGS)
    component.init()
    component.on_stop()
    assert source.stopped


def test_register_and_lookup():
    component = DataConfigComponent(SETTINGS)
    component.register()
    assert component.configs == []
    hero = RecordingConfig("hero")
    component.register(None, hero)
    assert component.configs == [hero]
    assert component.get_iconfig("hero") is hero
    assert component.get_iconfig("other") is None


def test_get_bytes(source):
    component = DataConfigComponent(SETTINGS)
    component.init()
    assert component.get_bytes("hero") == b'{"a": 1}'
    assert component.get_bytes("nothing") is None