"""Application settings loader from YAML configuration."""
import os
import yaml
from pathlib import Path
from typing import List, Optional
from dataclasses import dataclass

from desikit.utils.exceptions import ConfigError

CONFIG_ENV_VAR = "DESIKIT_CONFIG"
DEFAULT_CONFIG_PATH = Path(__file__).parent / "defaults.yaml"


@dataclass(frozen=True)
class AppSettings:
    """Package-wide settings loaded from a YAML file."""

    # App info
    app_name: str
    app_version: str

    # Logging
    log_level: str
    log_file: Optional[str]
    log_max_file_size_mb: int
    log_backup_count: int

    # Local pass
    pass_title: str
    pass_classes: List[str]
    pass_invalid_marker: str

    # Chat parser
    chat_funny_markers: List[str]
    chat_love_markers: List[str]

    # UPI analyzer
    upi_min_amount_exclusive: float
    upi_large_transaction_threshold: float

    @classmethod
    def load(cls, config_path: Path = None) -> "AppSettings":
        """
        Load settings from YAML file.

        Args:
            config_path: Path to the YAML file. Defaults to $DESIKIT_CONFIG,
                then to the defaults shipped with the package.

        Returns:
            AppSettings instance

        Raises:
            FileNotFoundError: if the file does not exist
            ConfigError: if the file is not valid YAML or a key is missing
        """
        if config_path is None:
            env_path = os.getenv(CONFIG_ENV_VAR)
            config_path = Path(env_path) if env_path else DEFAULT_CONFIG_PATH

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

        try:
            return cls(
                app_name=config["app"]["name"],
                app_version=str(config["app"]["version"]),
                log_level=config["logging"]["level"],
                log_file=config["logging"].get("file"),
                log_max_file_size_mb=config["logging"]["max_file_size_mb"],
                log_backup_count=config["logging"]["backup_count"],
                pass_title=config["pass"]["title"],
                pass_classes=[c.lower() for c in config["pass"]["classes"]],
                pass_invalid_marker=config["pass"]["invalid_marker"],
                chat_funny_markers=list(config["chat"]["funny_markers"]),
                chat_love_markers=list(config["chat"]["love_markers"]),
                upi_min_amount_exclusive=config["upi"]["min_amount_exclusive"],
                upi_large_transaction_threshold=config["upi"]["large_transaction_threshold"]
            )
        except (KeyError, TypeError) as e:
            raise ConfigError(f"Missing or malformed setting in {config_path}: {e}") from e


# Global settings instance
_settings: Optional[AppSettings] = None


def get_settings() -> AppSettings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = AppSettings.load()
    return _settings
