import copy
import json

import pytest

from sitesearch.config.loader import _migrate_config, load_config, save_config
from sitesearch.config.schema import DEFAULT_SEARCH_URL, Config


def test_config_defaults() -> None:
    config = Config()

    assert config.endpoint.base_url == DEFAULT_SEARCH_URL
    assert config.endpoint.timeout == 10.0
    assert config.search_bar.debounce_ms == 300
    assert config.search_bar.query_param == "query"
    assert config.logging.level == "INFO"


def test_config_accepts_camel_and_snake_keys() -> None:
    camel = Config.model_validate({"searchBar": {"debounceMs": 150}})
    snake = Config.model_validate({"search_bar": {"debounce_ms": 150}})

    assert camel.search_bar.debounce_ms == 150
    assert snake.search_bar.debounce_ms == 150


def test_migrate_fills_default_base_url() -> None:
    migrated = _migrate_config({"endpoint": {"baseUrl": ""}})

    assert migrated["endpoint"]["baseUrl"] == DEFAULT_SEARCH_URL


def test_migrate_keeps_configured_base_url() -> None:
    raw = {"endpoint": {"base_url": "https://blog.example/api/search"}}

    migrated = _migrate_config(copy.deepcopy(raw))

    assert migrated == raw
    assert Config.model_validate(migrated).endpoint.base_url == "https://blog.example/api/search"


@pytest.mark.parametrize("data", [[], "text", 3])
def test_migrate_rejects_non_object_root(data) -> None:
    with pytest.raises(ValueError, match="config root must be an object"):
        _migrate_config(data)


def test_save_then_load(tmp_path) -> None:
    path = tmp_path / "config.json"
    config = Config()
    config.endpoint.base_url = "https://blog.example/api/search"
    config.search_bar.query_param = "q"

    save_config(config, path)
    raw = json.loads(path.read_text(encoding="utf-8"))
    loaded = load_config(path)

    assert raw["endpoint"]["baseUrl"] == "https://blog.example/api/search"
    assert loaded.endpoint.base_url == "https://blog.example/api/search"
    assert loaded.search_bar.query_param == "q"


def test_load_invalid_file_falls_back_to_defaults(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")

    assert load_config(path) == Config()


@pytest.mark.parametrize(
    "payload",
    [[], "text", {"endpoint": "https://blog.example"}, {"searchBar": []}],
)
def test_load_wrong_shapes_fall_back_to_defaults(tmp_path, payload) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps(payload), encoding="utf-8")

    assert load_config(path) == Config()


def test_load_rejects_negative_debounce(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"searchBar": {"debounceMs": -5}}), encoding="utf-8")

    assert load_config(path).search_bar.debounce_ms == 300
