"""
Configuration handling for numfuncs
"""

import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

import yaml

from numfuncs.validation import ValidationMode

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
OUTPUT_FORMATS = ("plain", "json")


@dataclass
class ValidationConfig:
    """Configuration for argument checking"""

    # "strict" type-checks arguments, "permissive" passes them through
    mode: str = ValidationMode.STRICT.value

    # Non-finite values
    allow_nan: bool = True
    allow_infinity: bool = True

    def __post_init__(self):
        if isinstance(self.mode, ValidationMode):
            self.mode = self.mode.value
        valid_modes = [m.value for m in ValidationMode]
        if self.mode not in valid_modes:
            raise ValueError(f"Invalid validation mode '{self.mode}', expected one of {valid_modes}")
        for name in ("allow_nan", "allow_infinity"):
            if not isinstance(getattr(self, name), bool):
                raise ValueError(f"{name} must be true or false, got {getattr(self, name)!r}")


@dataclass
class OutputConfig:
    """Configuration for command-line output"""

    format: str = "plain"

    # Round float results to this many digits (None leaves them untouched)
    precision: int | None = None

    def __post_init__(self):
        if self.format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Invalid output format '{self.format}', expected one of {list(OUTPUT_FORMATS)}"
            )
        if self.precision is not None and self.precision < 0:
            raise ValueError(f"precision must be non-negative, got {self.precision}")


@dataclass
class Config:
    """Master configuration for numfuncs"""

    log_level: str = "WARNING"

    # Component configurations
    validation: ValidationConfig = field(default_factory=ValidationConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    def __post_init__(self):
        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level '{self.log_level}', expected one of {list(LOG_LEVELS)}")

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Config":
        """Load configuration from a YAML file"""
        with open(path) as f:
            config_dict = yaml.safe_load(f)
        return cls.from_dict(config_dict or {})

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "Config":
        """Create configuration from a dictionary"""
        if not isinstance(config_dict, dict):
            raise ValueError(f"configuration must be a mapping, got {type(config_dict).__name__}")

        config = Config()

        nested_keys = ["validation", "output"]

        # Update top-level fields
        for key, value in config_dict.items():
            if key not in nested_keys and hasattr(config, key):
                setattr(config, key, value)

        # Update nested configs
        if "validation" in config_dict:
            config.validation = ValidationConfig(**(config_dict["validation"] or {}))
        if "output" in config_dict:
            config.output = OutputConfig(**(config_dict["output"] or {}))

        # Re-run top-level checks after setattr
        config.__post_init__()
        return config

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to a YAML file"""
        with open(path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False)


def load_config(config_path: str | Path | None = None) -> Config:
    """Load configuration from a YAML file or use defaults"""
    if config_path and os.path.exists(config_path):
        config = Config.from_yaml(config_path)
    else:
        config = Config()

    # Environment variables win over the file
    log_level = os.environ.get("NUMFUNCS_LOG_LEVEL")
    if log_level:
        config.log_level = log_level
        config.__post_init__()

    mode = os.environ.get("NUMFUNCS_VALIDATION_MODE")
    if mode:
        config.validation = ValidationConfig(
            mode=mode.lower(),
            allow_nan=config.validation.allow_nan,
            allow_infinity=config.validation.allow_infinity,
        )

    return config
