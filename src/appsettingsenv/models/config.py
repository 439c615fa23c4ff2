"""Reusable conversion preset model."""

from pathlib import Path

from pydantic import BaseModel, Field

from appsettingsenv.models.options import ConversionOptions, FormatOptions, OutputFormat

# Default config directory
CONFIG_DIR = Path.home() / ".appsettingsenv"
CONFIG_FILE = CONFIG_DIR / "config.json"


class ConverterConfig(BaseModel):
    """A saved combination of output format and conversion/format options."""

    output_format: OutputFormat = "docker-compose"
    conversion: ConversionOptions = Field(default_factory=ConversionOptions)
    formats: FormatOptions = Field(default_factory=FormatOptions)
