"""Session plan loading.

A session plan describes one inspection run in a YAML file: the building,
how its dampers are laid out, and how the controller should behave. Only
``session.building`` is required; everything else falls back to the
defaults of SequenceParameters and ControllerConfig.

Example YAML:
    session:
      building: "Block A"
      name: "Block A Annual Inspection"
      project_id: "proj-001"

    sequence:
      start_floor: 0
      floor_count: 12
      dampers_per_floor: 2
      location: "Smoke Shaft"
      shaft_id_prefix: "SS1"

    controller:
      strict: false
      date_format: "%d/%m/%Y"
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from dampertest_core.errors import PlanError, SequenceParameterError

from dampertest_sequencing.controller import ControllerConfig
from dampertest_sequencing.generator import SequenceParameters

_SEQUENCE_INT_FIELDS = ("start_floor", "floor_count", "dampers_per_floor")
_SEQUENCE_STR_FIELDS = ("location", "shaft_id_prefix")


@dataclass(frozen=True)
class SessionPlan:
    """A planned inspection run loaded from YAML.

    Attributes:
        building: Building the inspections cover.
        name: Optional session name.
        project_id: Optional external project reference.
        parameters: Sequence generation parameters.
        controller: Controller configuration.
    """

    building: str
    name: str | None = None
    project_id: str | None = None
    parameters: SequenceParameters = field(default_factory=SequenceParameters)
    controller: ControllerConfig = field(default_factory=ControllerConfig)


def _section(data: dict[str, Any], key: str) -> dict[str, Any]:
    section = data.get(key) or {}
    if not isinstance(section, dict):
        raise PlanError(f"{key} must be a mapping")
    return section


def _optional_str(section: dict[str, Any], key: str, prefix: str) -> str | None:
    value = section.get(key)
    if value is None:
        return None
    if not isinstance(value, (str, int)) or isinstance(value, bool):
        raise PlanError(f"{prefix}.{key} must be a string")
    return str(value)


def _parse_parameters(section: dict[str, Any]) -> SequenceParameters:
    unknown = set(section) - set(_SEQUENCE_INT_FIELDS) - set(_SEQUENCE_STR_FIELDS)
    if unknown:
        raise PlanError(f"Unknown sequence fields: {sorted(unknown)}")

    kwargs: dict[str, Any] = {}
    for key in _SEQUENCE_INT_FIELDS:
        if key in section:
            kwargs[key] = section[key]
    for key in _SEQUENCE_STR_FIELDS:
        if key in section:
            value = _optional_str(section, key, "sequence")
            if not value:
                raise PlanError(f"sequence.{key} must not be empty")
            kwargs[key] = value

    parameters = SequenceParameters(**kwargs)
    try:
        parameters.validate()
    except SequenceParameterError as exc:
        raise PlanError(f"Invalid sequence: {exc}") from exc
    return parameters


def _parse_controller(section: dict[str, Any]) -> ControllerConfig:
    config = ControllerConfig()
    strict = section.get("strict", config.strict)
    if not isinstance(strict, bool):
        raise PlanError("controller.strict must be true or false")
    date_format = section.get("date_format", config.date_format)
    if not isinstance(date_format, str) or not date_format:
        raise PlanError("controller.date_format must be a non-empty string")
    return ControllerConfig(strict=strict, date_format=date_format)


def parse_session_plan(data: Any) -> SessionPlan:
    """Build a SessionPlan from parsed YAML data.

    Args:
        data: The parsed document.

    Returns:
        Parsed SessionPlan.

    Raises:
        PlanError: If the document is malformed.
    """
    if not isinstance(data, dict):
        raise PlanError("Session plan must be a YAML mapping")

    session_data = _section(data, "session")
    building = _optional_str(session_data, "building", "session")
    if not building or not building.strip():
        raise PlanError("Missing required field: session.building")

    return SessionPlan(
        building=building,
        name=_optional_str(session_data, "name", "session"),
        project_id=_optional_str(session_data, "project_id", "session"),
        parameters=_parse_parameters(_section(data, "sequence")),
        controller=_parse_controller(_section(data, "controller")),
    )


def load_session_plan(path: str | Path) -> SessionPlan:
    """Load a session plan from a YAML file.

    Args:
        path: Path to the plan file.

    Returns:
        Parsed SessionPlan.

    Raises:
        FileNotFoundError: If the plan file doesn't exist.
        PlanError: If the plan is malformed.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Session plan not found: {path}")

    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise PlanError(f"Invalid YAML in {path}: {exc}") from exc

    return parse_session_plan(data)
