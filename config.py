"""Configuration management for Spendwise.

Reads configuration from ~/.config/spendwise.toml and creates default config if needed.
"""

from pathlib import Path
from dataclasses import dataclass
from typing import Optional
import tomllib
import tomli_w


@dataclass
class Config:
    """Application configuration."""

    base_dir: Path
    storage_dir: Path
    log_level: str
    log_dir: Path
    locale: str = "en_US"
    persist_budgets: bool = True
    llm_enabled: bool = False
    llm_provider: Optional[str] = "openai"
    llm_openai_api_key: str = ""
    llm_openai_model: Optional[str] = None

    @classmethod
    def default(cls) -> "Config":
        """Create a Config with default values."""
        home = Path.home()
        base_dir = home / "data" / "spendwise"
        return cls(
            base_dir=base_dir,
            storage_dir=base_dir / "storage",
            log_level="INFO",
            log_dir=base_dir / "logs",
        )


def get_config_path() -> Path:
    """Get the path to the config file."""
    return Path.home() / ".config" / "spendwise.toml"


def load_config() -> Config:
    """Load configuration from file, creating default if it doesn't exist.

    Returns:
        Config object with loaded or default values.
    """
    config_path = get_config_path()

    # If config doesn't exist, create it with defaults
    if not config_path.exists():
        config = Config.default()
        _write_config(config)
        return config

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    # Parse with defaults for any missing values
    base_dir = Path(data.get("base_dir", Path.home() / "data" / "spendwise"))

    storage_config = data.get("storage", {})
    storage_dir = Path(storage_config.get("data_dir", base_dir / "storage"))

    log_config = data.get("logging", {})
    log_level = log_config.get("level", "INFO")
    log_dir = Path(log_config.get("log_dir", base_dir / "logs"))

    display_config = data.get("display", {})
    locale = display_config.get("locale", "en_US")

    budget_config = data.get("budgets", {})
    persist_budgets = budget_config.get("persist", True)

    llm_config = data.get("llm", {})

    return Config(
        base_dir=base_dir,
        storage_dir=storage_dir,
        log_level=log_level,
        log_dir=log_dir,
        locale=locale,
        persist_budgets=persist_budgets,
        llm_enabled=llm_config.get("enabled", False),
        llm_provider=llm_config.get("provider", "openai"),
        llm_openai_api_key=llm_config.get("openai_api_key", ""),
        llm_openai_model=llm_config.get("openai_model"),
    )


def _write_config(config: Config) -> None:
    """Write config to the config file.

    Args:
        config: Config object to write.
    """
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    llm_data = {
        "enabled": config.llm_enabled,
        "provider": config.llm_provider or "openai",
        "openai_api_key": config.llm_openai_api_key,
    }
    # TOML has no null, so an unset model is left out
    if config.llm_openai_model:
        llm_data["openai_model"] = config.llm_openai_model

    data = {
        "base_dir": str(config.base_dir),
        "storage": {
            "data_dir": str(config.storage_dir),
        },
        "logging": {
            "level": config.log_level,
            "log_dir": str(config.log_dir),
        },
        "display": {
            "locale": config.locale,
        },
        "budgets": {
            "persist": config.persist_budgets,
        },
        "llm": llm_data,
    }

    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)
