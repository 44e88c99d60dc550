import tomllib
from pathlib import Path

import pytest

import config as config_module
from config import Config, load_config


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setattr(Path, "home", lambda: tmp_path)
    return tmp_path


class TestLoadConfig:
    """Tests for load_config."""

    def test_creates_default_config(self, home):
        config = load_config()

        assert config == Config.default()
        assert config.storage_dir == home / "data" / "spendwise" / "storage"
        assert config.persist_budgets is True
        assert config.llm_enabled is False

        with open(config_module.get_config_path(), "rb") as f:
            written = tomllib.load(f)
        assert written["budgets"]["persist"] is True
        assert "openai_model" not in written["llm"]

    def test_reads_existing_config(self, home):
        path = home / ".config" / "spendwise.toml"
        path.parent.mkdir(parents=True)
        path.write_text(
            'base_dir = "/srv/money"\n'
            "[logging]\n"
            'level = "DEBUG"\n'
            "[display]\n"
            'locale = "de_DE"\n'
            "[budgets]\n"
            "persist = false\n"
            "[llm]\n"
            "enabled = true\n"
            'openai_api_key = "sk-abc"\n'
            'openai_model = "gpt-4o"\n'
        )

        config = load_config()

        assert config.base_dir == Path("/srv/money")
        assert config.storage_dir == Path("/srv/money/storage")
        assert config.log_level == "DEBUG"
        assert config.locale == "de_DE"
        assert config.persist_budgets is False
        assert config.llm_enabled is True
        assert config.llm_provider == "openai"
        assert config.llm_openai_api_key == "sk-abc"
        assert config.llm_openai_model == "gpt-4o"

    def test_default_config_round_trips(self, home):
        first = load_config()
        second = load_config()

        assert first == second
