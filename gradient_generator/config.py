"""
Configuration management for the gradient generator.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

CONFIG_ENV_VAR = "GRADIENT_GENERATOR_CONFIG"


@dataclass
class UIConfig:
    appearance_mode: str = "system"
    color_theme: str = "blue"
    title: str = "Gradient Generator"
    min_size: Tuple[int, int] = (900, 600)


@dataclass
class GenerationConfig:
    # размеры в форме до загрузки изображения; после загрузки берутся из него
    default_width: int = 0
    default_height: int = 0


@dataclass
class BatchConfig:
    width: int = 5000
    height: int = 5000


@dataclass
class LoggingConfig:
    level: str = "INFO"


@dataclass
class AppConfig:
    ui: UIConfig = field(default_factory=UIConfig)
    generation: GenerationConfig = field(default_factory=GenerationConfig)
    batch: BatchConfig = field(default_factory=BatchConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "AppConfig":
        """Build config from a parsed mapping; missing sections keep defaults."""
        data = data or {}
        unknown = set(data) - {f.name for f in fields(cls)}
        if unknown:
            raise ValueError(f"Unknown config sections: {', '.join(sorted(unknown))}")

        ui_data = dict(data.get("ui") or {})
        if "min_size" in ui_data:
            ui_data["min_size"] = tuple(ui_data["min_size"])

        return cls(
            ui=_build_section(UIConfig, ui_data),
            generation=_build_section(GenerationConfig, data.get("generation")),
            batch=_build_section(BatchConfig, data.get("batch")),
            logging=_build_section(LoggingConfig, data.get("logging")),
        )

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> "AppConfig":
        """Load configuration from YAML file."""
        with open(config_path, "r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as exc:
                raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc
        if data is not None and not isinstance(data, dict):
            raise ValueError(f"Config root must be a mapping: {config_path}")
        return cls.from_dict(data)


def _build_section(section_cls, data: Optional[Dict[str, Any]]):
    data = data or {}
    allowed = {f.name for f in fields(section_cls)}
    unknown = set(data) - allowed
    if unknown:
        raise ValueError(f"Unknown keys in {section_cls.__name__}: {', '.join(sorted(unknown))}")
    return section_cls(**data)


def load_config(config_path: Optional[str | Path] = None) -> AppConfig:
    """Load config from explicit path, else from $GRADIENT_GENERATOR_CONFIG, else defaults."""
    path = config_path or os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return AppConfig()
    return AppConfig.from_yaml(path)
