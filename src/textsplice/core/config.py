from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Chunking
    SPLIT_METHODS: List[str] = ["space", "sentence", "marker"]  # cascade order
    SPLIT_MARKER: str = "\U000130f0"  # used only by the "marker" strategy
    MAX_LENGTH: int = 0  # <= 0 means unbounded
    HYBRID_MAX_ITERATIONS: int = Field(default=100, ge=1)

    # Alignment
    ALIGN_MISS_WARN_RATIO: float = Field(
        default=0.2,
        ge=0.0,
        le=1.0,
        description="Warn when more than this share of lexical items cannot be aligned",
    )

    # Observability
    LOG_FORMAT: str = "auto"  # json|plain|auto
    LOG_LEVEL: str = "warning"

    model_config = SettingsConfigDict(
        env_prefix="TEXTSPLICE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @classmethod
    def load_config(cls, config_file: Optional[str] = None) -> "Settings":
        """Load settings with config file -> env -> CLI precedence."""
        config_data: Dict[str, Any] = {}

        # Find config file
        config_path: Optional[Path]
        if config_file:
            config_path = Path(config_file)
        else:
            # Auto-discover .textsplice.{yaml,yml,toml}
            for ext in ["yaml", "yml", "toml"]:
                config_path = Path(f".textsplice.{ext}")
                if config_path.exists():
                    break
            else:
                config_path = None

        if config_path and config_path.exists():
            if config_path.suffix in [".yaml", ".yml"]:
                import yaml

                with open(config_path, encoding="utf-8") as f:
                    config_data = yaml.safe_load(f) or {}
            elif config_path.suffix == ".toml":
                import tomllib

                with open(config_path, "rb") as f:
                    config_data = tomllib.load(f)

        # Keys in the file are accepted case-insensitively
        config_data = {key.upper(): value for key, value in config_data.items()}

        # Environment variables override file values
        overrides = cls()
        for name in cls.model_fields:
            if name in overrides.model_fields_set:
                config_data[name] = getattr(overrides, name)

        return cls(**config_data)
