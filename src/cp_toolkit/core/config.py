"""Configuration management for cp-toolkit."""

from pathlib import Path
from typing import Literal
import json
from pydantic import BaseModel, Field


class QueryConfig(BaseModel):
    """Configuration for the query runner."""

    answer_style: Literal["digit", "yesno"] = Field(
        default="digit", description="Answer format for connectivity queries"
    )


class OutputConfig(BaseModel):
    """Configuration for output settings."""

    output_dir: Path = Field(default=Path("./output"), description="Default output directory")
    verbose: bool = Field(default=False, description="Enable verbose logging")


class Config(BaseModel):
    """Main configuration for cp-toolkit."""

    query: QueryConfig = Field(default_factory=QueryConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def load_from_file(cls, config_path: Path) -> "Config":
        """Load configuration from a JSON file."""
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, "r") as f:
            data = json.load(f)

        return cls(**data)

    def save_to_file(self, config_path: Path) -> None:
        """Save configuration to a JSON file."""
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w") as f:
            json.dump(self.model_dump(), f, indent=2, default=str)

    @classmethod
    def get_default(cls) -> "Config":
        """Get default configuration."""
        return cls()


def load_config(config_path: Path | None = None) -> Config:
    """Load configuration from file or return default.

    Args:
        config_path: Path to configuration file. If None, searches the default
            locations and falls back to the default config.

    Returns:
        Config object
    """
    if config_path is None:
        default_locations = [
            Path.home() / ".config" / "cp-toolkit" / "config.json",
            Path.cwd() / "cp-toolkit.json",
        ]

        for location in default_locations:
            if location.exists():
                return Config.load_from_file(location)

        return Config.get_default()

    return Config.load_from_file(config_path)
