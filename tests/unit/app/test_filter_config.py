import os

import pytest

from datatable_filters.app.config import (
    CONFIG_ENV_VAR,
    DATATABLE_FILTERS_YML,
    FilterConfig,
    get_config,
    load_config,
    reset_config,
    set_config,
)
from datatable_filters.errors import BadConfigError


def test_defaults():
    config = FilterConfig()
    assert config.date_format == "%Y-%m-%d"
    assert config.value_separator == ", "
    assert config.validate_parameters is True
    assert config.verbose is False


def test_yaml_round_trip():
    config = FilterConfig(date_format="%d.%m.%Y", value_separator="; ", verbose=True)
    assert FilterConfig.from_yaml(config.to_yaml()) == config


def test_from_yaml_partial_and_unknown_keys():
    config = FilterConfig.from_yaml("date_format: '%m/%d/%Y'\nsomething_else: 1\n")
    assert config.date_format == "%m/%d/%Y"
    assert config.value_separator == ", "


def test_from_yaml_empty_document():
    assert FilterConfig.from_yaml("") == FilterConfig()


def test_from_yaml_invalid():
    with pytest.raises(BadConfigError):
        FilterConfig.from_yaml("verbose: sometimes\n")
    with pytest.raises(BadConfigError):
        FilterConfig.from_yaml("date_format: ''\n")


def test_load_config_from_path(tmp_path):
    path = tmp_path / "filters.yaml"
    path.write_text("value_separator: ' / '\n")
    assert load_config(str(path)).value_separator == " / "


def test_load_config_missing_or_invalid(tmp_path):
    assert load_config(str(tmp_path / "missing.yaml")) is None
    bad = tmp_path / "bad.yaml"
    bad.write_text("verbose: [1, 2\n")
    assert load_config(str(bad)) is None


def test_load_config_search_order(tmp_path, monkeypatch):
    env_file = tmp_path / "env.yaml"
    env_file.write_text("date_format: '%Y'\n")
    (tmp_path / DATATABLE_FILTERS_YML).write_text("date_format: '%m'\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))

    monkeypatch.setenv(CONFIG_ENV_VAR, str(env_file))
    assert load_config().date_format == "%Y"

    monkeypatch.delenv(CONFIG_ENV_VAR)
    assert load_config().date_format == "%m"

    os.remove(tmp_path / DATATABLE_FILTERS_YML)
    assert load_config() is None


def test_default_config_is_loaded_once(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    reset_config()
    assert get_config() == FilterConfig()
    assert get_config() is get_config()

    custom = FilterConfig(verbose=True)
    set_config(custom)
    assert get_config() is custom


def test_undecodable_config_file_is_skipped(tmp_path, monkeypatch):
    from datatable_filters.core.columns import TextColumnSpec
    from datatable_filters.core.filters import StringFilter
    from datatable_filters.core.predicates import FilterPredicate

    binary = tmp_path / "binary.yaml"
    binary.write_bytes(b"date_format: \xff\xfe\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv(CONFIG_ENV_VAR, str(binary))
    assert load_config() is None

    reset_config()
    string_filter = StringFilter(TextColumnSpec("Name", lambda r: r), FilterPredicate.IS, "a")
    assert string_filter.config == FilterConfig()
    assert string_filter.test("A")


def test_unreadable_config_file_is_skipped(tmp_path, monkeypatch):
    import builtins

    path = tmp_path / "locked.yaml"
    path.write_text("verbose: true\n")
    real_open = builtins.open

    def fail_open(file, *args, **kwargs):
        if str(file) == str(path):
            raise PermissionError(13, "Permission denied", str(file))
        return real_open(file, *args, **kwargs)

    monkeypatch.setattr(builtins, "open", fail_open)
    assert load_config(str(path)) is None
