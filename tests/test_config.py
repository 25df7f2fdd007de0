import pytest

from djset_cli.exceptions import ConfigurationError
from djset_cli.models.config import AppConfig
from djset_cli.storage.config_manager import ConfigManager


def test_missing_config_file_uses_defaults(tmp_path):
    config = ConfigManager(tmp_path / "config.ini").load_config()
    assert config.bpm_min == 60
    assert config.bpm_max == 200
    assert config.max_tracks == 7
    assert config.initial_capacity == 2
    assert config.bpm_range == 5
    assert config.library_report == "DJ_Set_Report.txt"


def test_save_then_load_round_trip(tmp_path):
    path = tmp_path / "nested" / "config.ini"
    manager = ConfigManager(path)
    saved = manager.save_new_config({"max_tracks": 12, "bpm_range": 3})
    assert saved.max_tracks == 12
    assert path.is_file()

    loaded = ConfigManager(path).load_config()
    assert loaded.max_tracks == 12
    assert loaded.bpm_range == 3
    assert loaded.bpm_max == 200


def test_cli_options_override_file(tmp_path):
    path = tmp_path / "config.ini"
    ConfigManager(path).save_new_config({"max_tracks": 12})
    config = ConfigManager(path).load_config({"max_tracks": 3})
    assert config.max_tracks == 3


def test_missing_keys_are_migrated(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text("[DEFAULT]\nmax_tracks = 9\n", encoding="utf-8")

    config = ConfigManager(path).load_config()
    assert config.max_tracks == 9
    assert config.bpm_range == 5

    text = path.read_text(encoding="utf-8")
    assert "bpm_range = 5" in text
    assert "collection_report = DJ_Set_Collection_Report.txt" in text


def test_non_numeric_setting_is_a_configuration_error(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text("[DEFAULT]\nmax_tracks = lots\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        ConfigManager(path).load_config()


def test_inverted_bpm_bounds_fail_validation(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text("[DEFAULT]\nbpm_min = 150\nbpm_max = 90\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        ConfigManager(path).load_config()


def test_model_validators():
    with pytest.raises(ValueError):
        AppConfig(initial_capacity=1)
    with pytest.raises(ValueError):
        AppConfig(max_tracks=0)
    with pytest.raises(ValueError):
        AppConfig(library_report="")
    assert AppConfig(library_report="  my_set.txt ").library_report == "my_set.txt"


def test_saved_file_holds_exactly_the_settings(tmp_path):
    path = tmp_path / "config.ini"
    ConfigManager(path).save_new_config()
    keys = {
        line.split(" = ")[0]
        for line in path.read_text(encoding="utf-8").splitlines()
        if " = " in line
    }
    assert keys == AppConfig.get_ini_keys()
    assert keys == {
        "bpm_min",
        "bpm_max",
        "max_tracks",
        "initial_capacity",
        "bpm_range",
        "library_report",
        "collection_report",
    }
