import os
from pathlib import Path

import pytest

from toolbox.utils.paths import Config, HomeDirectoryError, normalize_path


def test_config_from_env_prefers_home():
    config = Config.from_env({"HOME": "/home/u", "USERPROFILE": "C:/Users/u"})
    assert config.home == "/home/u"


def test_config_from_env_falls_back_to_userprofile():
    config = Config.from_env({"USERPROFILE": "/profiles/u", "ATUIN_DB_PATH": "/tmp/h.db"})
    assert config.home == "/profiles/u"
    assert config.db_override == "/tmp/h.db"


def test_config_treats_empty_values_as_unset():
    config = Config.from_env({"HOME": "", "ATUIN_DB_PATH": "", "XDG_DATA_HOME": ""})
    assert config == Config()


def test_default_db_path_uses_local_share():
    assert Config(home="/home/u").db_path() == Path("/home/u/.local/share/atuin/history.db")


def test_default_db_path_honors_xdg_data_home():
    config = Config(home="/home/u", xdg_data_home="/data")
    assert config.db_path() == Path("/data/atuin/history.db")


def test_db_path_precedence():
    config = Config(home="/home/u", db_override="/env/history.db")
    assert config.db_path() == Path("/env/history.db")
    assert config.db_path("~/cli.db") == Path("/home/u/cli.db")


def test_default_db_path_without_home():
    with pytest.raises(HomeDirectoryError):
        Config().db_path()


def test_normalize_path_expands_tilde():
    config = Config(home="/home/u")
    assert normalize_path("~", config) == "/home/u"
    assert normalize_path("~/proj/", config) == "/home/u/proj"
    assert normalize_path("~/proj/../other/./x", config) == "/home/u/other/x"


def test_normalize_path_leaves_other_users_alone(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    assert normalize_path("~bob", Config(home="/home/u")) == os.path.join(os.getcwd(), "~bob")


def test_normalize_relative_path(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    assert normalize_path("sub//dir/", Config()) == os.path.join(os.getcwd(), "sub", "dir")


def test_normalize_tilde_without_home():
    with pytest.raises(HomeDirectoryError, match="Cannot determine home directory"):
        normalize_path("~/proj", Config())
