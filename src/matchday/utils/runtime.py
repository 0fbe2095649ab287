"""Environment checks the schedule CLI runs before reading any input."""

from __future__ import annotations

import importlib.util
import sys
from collections.abc import Iterable

MIN_PYTHON = (3, 12)
INSTALL_HINT = 'Install matchday with `python -m pip install -e ".[dev]"`.'

# Modules every scheduling run imports.
CORE_MODULES = ("matchday", "pydantic")

# Optional CLI features and the modules each one pulls in.
FEATURE_MODULES: dict[str, tuple[str, ...]] = {
    "team_csv": ("pandas",),
    "schedule_export": ("pandas",),
}


def cli_features(output: str | None = None) -> list[str]:
    """Features a generate_schedule run needs, given its --output flag."""
    features = ["team_csv"]
    if output:
        features.append("schedule_export")
    return features


def missing_prerequisites(
    features: Iterable[str] = (),
    python_version: tuple[int, int] | None = None,
) -> list[str]:
    """Describe each unmet prerequisite; an empty list means the run can go ahead."""
    problems: list[str] = []
    current = python_version or (sys.version_info.major, sys.version_info.minor)
    if current < MIN_PYTHON:
        problems.append(
            f"Python {current[0]}.{current[1]} is too old, "
            f"matchday needs {MIN_PYTHON[0]}.{MIN_PYTHON[1]} or newer"
        )

    for module in CORE_MODULES:
        if importlib.util.find_spec(module) is None:
            problems.append(f"{module} is not importable")

    for feature in features:
        try:
            modules = FEATURE_MODULES[feature]
        except KeyError:
            raise ValueError(f"Unknown CLI feature {feature!r}") from None
        for module in modules:
            if importlib.util.find_spec(module) is None:
                problems.append(f"{feature.replace('_', ' ')} needs {module}, which is not installed")
    return problems


def validate_runtime(
    features: Iterable[str] = (),
    python_version: tuple[int, int] | None = None,
) -> None:
    """Raise RuntimeError listing every unmet prerequisite for ``features``."""
    problems = missing_prerequisites(features, python_version)
    if problems:
        raise RuntimeError(
            "Cannot generate a schedule: " + "; ".join(problems) + ". " + INSTALL_HINT
        )
