"""
Configuration management for the Go turn engine.

Loads configuration from config.yaml and provides typed access.
Every section is optional; missing keys fall back to the dataclass defaults.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from .rules import SuicidePolicy


@dataclass
class RulesConfig:
    """Rule variants and default board dimensions."""
    width: int = 9
    height: int = 9
    suicide: SuicidePolicy = SuicidePolicy.FORBID
    allow_self_join: bool = False


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"


@dataclass
class AppConfig:
    """Main application configuration."""
    rules: RulesConfig = field(default_factory=RulesConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to config.yaml. If None, searches in:
                     1. Current directory
                     2. Project root (relative to this file)
                     and falls back to defaults when neither exists.

    Returns:
        AppConfig instance

    Raises:
        FileNotFoundError: If an explicit config_path does not exist
        ValueError: If config file is invalid
    """
    if config_path is None:
        search_paths = [
            Path.cwd() / "config.yaml",
            get_project_root() / "config.yaml",
        ]

        for path in search_paths:
            if path.exists():
                config_path = str(path)
                break
        else:
            return AppConfig()

    if not Path(config_path).exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not data:
        raise ValueError(f"Config file is empty: {config_path}")
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")

    rules_data = data.get("rules") or {}
    try:
        suicide = SuicidePolicy(str(rules_data.get("suicide", "forbid")).lower())
    except ValueError:
        raise ValueError(
            f"rules.suicide must be 'forbid' or 'allow', got {rules_data.get('suicide')!r}"
        )

    allow_self_join = rules_data.get("allow_self_join", False)
    if not isinstance(allow_self_join, bool):
        raise ValueError(
            f"rules.allow_self_join must be true or false, got {allow_self_join!r}"
        )

    rules_config = RulesConfig(
        width=int(rules_data.get("width", 9)),
        height=int(rules_data.get("height", 9)),
        suicide=suicide,
        allow_self_join=allow_self_join,
    )

    logging_data = data.get("logging") or {}
    logging_config = LoggingConfig(
        level=str(logging_data.get("level", "INFO")).upper(),
    )

    return AppConfig(
        rules=rules_config,
        logging=logging_config,
    )
