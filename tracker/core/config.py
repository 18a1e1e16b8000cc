"""
User configuration for the tracker.

Stores settings like the data directory and the turn model in a JSON file.
Missing keys are filled from the defaults, and an unreadable or invalid file
falls back to the defaults altogether.
"""

import json
from pathlib import Path
from typing import Any

from catchery import log_warning
from pydantic import BaseModel, Field, ValidationError

from core.constants import (
    ACCRUAL_ATTRIBUTE,
    ACCRUAL_MULTIPLIER,
    DEFAULT_DATA_DIR,
    TURN_ENDED_DISPLAY_SECONDS,
    Attribute,
    TurnModel,
)

CONFIG_FILE_NAME = "config.json"


class TrackerConfig(BaseModel):
    """Settings controlling storage location and turn rules."""

    data_dir: Path = Field(
        default=Path(DEFAULT_DATA_DIR),
        description="Directory where the persisted keys are stored.",
    )
    turn_model: TurnModel = Field(
        default=TurnModel.TWO_PHASE,
        description="Whether turns use separate start/end steps or a single fused end step.",
    )
    accrual_attribute: Attribute = Field(
        default=ACCRUAL_ATTRIBUTE,
        description="Attribute whose effective value drives currency accrual.",
    )
    accrual_multiplier: int = Field(
        default=ACCRUAL_MULTIPLIER,
        description="Currency gained per point of the accrual attribute.",
    )
    turn_ended_display_seconds: float = Field(
        default=TURN_ENDED_DISPLAY_SECONDS,
        ge=0,
        description="How long the 'turn ended' notice stays visible.",
    )


def get_config_path(data_dir: Path | str = DEFAULT_DATA_DIR) -> Path:
    """Get path to the config file inside a data directory."""
    return Path(data_dir) / CONFIG_FILE_NAME


def load_config(path: Path | str | None = None, **overrides: Any) -> TrackerConfig:
    """
    Load config from file, or return defaults if not found.

    Args:
        path (Path | str | None):
            The config file. Defaults to the file inside the default data
            directory.
        **overrides:
            Values that take precedence over the file (e.g. from the command
            line). Entries set to None are ignored.

    Returns:
        TrackerConfig:
            The merged configuration.

    """
    path = Path(path) if path else get_config_path()
    data: dict[str, Any] = {}

    if path.exists():
        try:
            with open(path, "r", encoding="utf-8") as f:
                saved = json.load(f)
            if not isinstance(saved, dict):
                raise ValueError("config root must be an object")
            data.update(saved)
        except (OSError, ValueError) as e:
            log_warning(
                f"Ignoring unreadable config file: {e}",
                {"path": str(path)},
            )
            data = {}

    data.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return TrackerConfig(**data)
    except ValidationError as e:
        log_warning(
            "Invalid configuration, using defaults",
            {"path": str(path), "errors": e.error_count()},
        )
        return TrackerConfig(**{k: v for k, v in overrides.items() if v is not None})


def save_config(config: TrackerConfig, path: Path | str | None = None) -> bool:
    """Save config to file. Returns True on success."""
    path = Path(path) if path else get_config_path(config.data_dir)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(config.model_dump_json(indent=2))
        return True
    except OSError as e:
        log_warning(f"Could not save config: {e}", {"path": str(path)})
        return False
