"""
Configuration Loader - Load configuration from YAML.

Looks for config.yaml in the working directory and the project root.
Missing files and missing sections fall back to defaults; unknown keys
are ignored.
"""
import logging
import yaml
from pathlib import Path
from typing import Optional, Any
from dataclasses import dataclass, field, asdict

logger = logging.getLogger(__name__)


@dataclass
class GameConfig:
    """Game presentation settings (gameplay itself is fixed)."""
    style: str = "neon"


@dataclass
class DisplayConfig:
    """Window settings."""
    title: str = "Snake"
    fps: int = 60
    padding: int = 24


@dataclass
class AudioConfig:
    """Sound cue settings."""
    enabled: bool = True
    volume: float = 1.0


@dataclass
class HighScoreConfig:
    """Where the high score lives."""
    path: str = "data/highscore.json"
    key: str = "snakeHighScore"


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    log_file: Optional[str] = None


@dataclass
class Config:
    """Complete application configuration."""
    game: GameConfig = field(default_factory=GameConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    audio: AudioConfig = field(default_factory=AudioConfig)
    high_score: HighScoreConfig = field(default_factory=HighScoreConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


_SECTIONS = {
    'game': GameConfig,
    'display': DisplayConfig,
    'audio': AudioConfig,
    'high_score': HighScoreConfig,
    'logging': LoggingConfig,
}


def _dict_to_dataclass(data: dict, cls: type) -> Any:
    """Convert a dictionary to a dataclass instance."""
    if not data:
        return cls()

    # Get the fields that the dataclass expects
    field_names = {f.name for f in cls.__dataclass_fields__.values()}

    # Filter to only include valid fields
    filtered_data = {k: v for k, v in data.items() if k in field_names}

    return cls(**filtered_data)


def _find_config_file() -> Optional[Path]:
    """Try to find config.yaml in common locations."""
    possible_paths = [
        Path.cwd() / "config.yaml",
        Path(__file__).parent.parent.parent / "config.yaml",
    ]

    for path in possible_paths:
        if path.exists():
            return path

    return None


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to config file (defaults to config.yaml lookup)

    Returns:
        Config object with all settings
    """
    path = Path(config_path) if config_path else _find_config_file()

    if path is None or not path.exists():
        logger.info("No config file found, using defaults")
        return Config()

    with open(path, 'r') as f:
        data = yaml.safe_load(f)

    if not data:
        return Config()

    config = Config()
    for section, cls in _SECTIONS.items():
        if section in data:
            setattr(config, section, _dict_to_dataclass(data[section], cls))

    logger.debug("Loaded config from %s", path)
    return config


def save_config(config: Config, config_path: str):
    """
    Save configuration to a YAML file.

    Args:
        config: Config object to save
        config_path: Path to save to
    """
    data = asdict(config)

    with open(config_path, 'w') as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
