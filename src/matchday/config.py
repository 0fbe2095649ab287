"""Load a ScheduleConfig from a JSON file.

Expected layout (all keys optional except where the materializer needs them)::

    {
      "schedule": {
        "start_date": "2025-01-06",
        "format": "double-round-robin",
        "days_between_rounds": 7,
        "time_slots": ["18:00", "19:30", "21:00"],
        "venue_overrides": {"TEAM_ID": "Stadium"}
      }
    }

A flat object without the "schedule" wrapper is accepted as well.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from matchday.errors import InvalidConfiguration
from matchday.models.config import ScheduleConfig


def load_config(path: str | Path | None = None, **overrides: Any) -> ScheduleConfig:
    """Read config from ``path`` (if given) and apply keyword overrides.

    Overrides whose value is None are ignored, so CLI flags that were not
    passed leave file values alone.

    Raises:
        FileNotFoundError: ``path`` does not exist.
        InvalidConfiguration: The file is not valid JSON or holds invalid values.
    """
    data: dict[str, Any] = {}
    if path is not None:
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Schedule config not found: {config_path}")
        try:
            with open(config_path) as f:
                raw = json.load(f)
        except json.JSONDecodeError as exc:
            raise InvalidConfiguration(f"{config_path} is not valid JSON: {exc}") from exc
        if not isinstance(raw, dict):
            raise InvalidConfiguration(f"{config_path} must contain a JSON object")
        data = dict(raw.get("schedule", raw))

    data.update({k: v for k, v in overrides.items() if v is not None})
    return ScheduleConfig.parse(data)
