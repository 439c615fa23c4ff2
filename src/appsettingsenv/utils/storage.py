"""Load and save conversion presets as JSON."""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from appsettingsenv.models.config import CONFIG_DIR, CONFIG_FILE, ConverterConfig

logger = logging.getLogger(__name__)


def load_config(path: Path | None = None) -> ConverterConfig:
    """Load a preset from disk, falling back to defaults if missing or unreadable."""
    config_file = path or CONFIG_FILE
    if not config_file.exists():
        return ConverterConfig()

    try:
        raw = json.loads(config_file.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Failed to read config file: %s", e)
        return ConverterConfig()

    try:
        return ConverterConfig.model_validate(raw)
    except ValidationError as e:
        logger.warning("Invalid config file %s: %s", config_file, e)
        return ConverterConfig()


def save_config(config: ConverterConfig, path: Path | None = None) -> None:
    """Write a preset to disk as indented JSON."""
    config_file = path or CONFIG_FILE
    config_dir = config_file.parent if path else CONFIG_DIR
    config_dir.mkdir(parents=True, exist_ok=True)

    data = config.model_dump()
    config_file.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
    logger.info("Config saved to %s", config_file)
