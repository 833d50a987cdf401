import pytest

from floccus import config


@pytest.fixture
def clean_environment(monkeypatch, tmp_path):
    for name in ("FLOCCUS_DEBUG", "FLOCCUS_WORKERS"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    return tmp_path


def write_config(directory, text):
    path = directory / "floccus.conf"
    path.write_text(text)
    return path


class TestLoadConfig:
    """Environment, then config file, then defaults"""

    def test_defaults(self, clean_environment):
        assert config.load_config() == config.DEFAULTS
        assert config.DEFAULTS.debug is False
        assert config.DEFAULTS.workers is None

    def test_no_xdg(self, monkeypatch):
        for name in ("FLOCCUS_DEBUG", "FLOCCUS_WORKERS", "XDG_CONFIG_HOME"):
            monkeypatch.delenv(name, raising=False)
        assert config.get_config_file() is None
        assert config.load_config() == config.DEFAULTS

    def test_config_file(self, clean_environment):
        write_config(clean_environment, "[Diagnostics]\ndebug = yes\n\n[Parallel]\nworkers = 4\n")
        assert config.get_config_file() == str(clean_environment / "floccus.conf")
        assert config.load_config() == config.Config(debug=True, workers=4)

    def test_explicit_file(self, clean_environment, tmp_path):
        path = write_config(tmp_path, "[Parallel]\nworkers = 2\n")
        assert config.load_config(str(path)).workers == 2

    def test_environment_wins(self, clean_environment, monkeypatch):
        write_config(clean_environment, "[Diagnostics]\ndebug = yes\n\n[Parallel]\nworkers = 4\n")
        monkeypatch.setenv("FLOCCUS_DEBUG", "off")
        monkeypatch.setenv("FLOCCUS_WORKERS", "8")
        assert config.load_config() == config.Config(debug=False, workers=8)

    @pytest.mark.parametrize("text", ["1", "true", "Yes", "on"])
    def test_true_values(self, clean_environment, monkeypatch, text):
        monkeypatch.setenv("FLOCCUS_DEBUG", text)
        assert config.load_config().debug is True

    def test_bad_boolean(self, clean_environment, monkeypatch):
        monkeypatch.setenv("FLOCCUS_DEBUG", "maybe")
        with pytest.raises(ValueError):
            config.load_config()

    @pytest.mark.parametrize("text", ["0", "-3", "many"])
    def test_bad_workers(self, clean_environment, monkeypatch, text):
        monkeypatch.setenv("FLOCCUS_WORKERS", text)
        with pytest.raises(ValueError):
            config.load_config()


class TestGetConfig:

    def test_cached(self, restore_config):
        assert config.get_config() is config.get_config()

    def test_reload(self, clean_environment, monkeypatch, restore_config):
        monkeypatch.setenv("FLOCCUS_WORKERS", "6")
        assert config.get_config(reload=True).workers == 6

    def test_set_workers(self, restore_config):
        assert config.set_workers(3).workers == 3
        assert config.get_config().workers == 3
        with pytest.raises(ValueError):
            config.set_workers(0)
