"""
Input controls of a report and their current states.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .resource import json_objects


@dataclass
class InputControlOption:
    label: str = ""
    value: str = ""
    selected: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "InputControlOption":
        return cls(label=data.get("label") or "", value=data.get("value") or "", selected=bool(data.get("selected")))


@dataclass
class InputControlState:
    """Value, options and validation error of one control, as computed by the server."""

    id: str = ""
    uri: Optional[str] = None
    value: Optional[str] = None
    error: Optional[str] = None
    options: List[InputControlOption] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "InputControlState":
        return cls(
            id=data.get("id") or "",
            uri=data.get("uri"),
            value=data.get("value"),
            error=data.get("error"),
            options=[InputControlOption.from_dict(item) for item in json_objects(data, "options")],
        )


@dataclass
class ValidationRule:
    # e.g. "mandatoryValidationRule", "dateTimeFormatValidationRule"
    type: str
    error_message: Optional[str] = None
    format: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ValidationRule":
        rule_type, body = next(iter(data.items()), ("", {}))
        body = body or {}
        return cls(type=rule_type, error_message=body.get("errorMessage"), format=body.get("format"))


@dataclass
class InputControl:
    id: str
    label: str = ""
    mandatory: bool = False
    read_only: bool = False
    type: Optional[str] = None
    uri: Optional[str] = None
    visible: bool = True
    master_dependencies: List[str] = field(default_factory=list)
    slave_dependencies: List[str] = field(default_factory=list)
    validation_rules: List[ValidationRule] = field(default_factory=list)
    state: Optional[InputControlState] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "InputControl":
        state = data.get("state")
        return cls(
            id=data.get("id") or "",
            label=data.get("label") or "",
            mandatory=bool(data.get("mandatory")),
            read_only=bool(data.get("readOnly")),
            type=data.get("type"),
            uri=data.get("uri"),
            visible=data.get("visible", True),
            master_dependencies=list(data.get("masterDependencies") or []),
            slave_dependencies=list(data.get("slaveDependencies") or []),
            validation_rules=[ValidationRule.from_dict(rule) for rule in json_objects(data, "validationRules")],
            state=InputControlState.from_dict(state) if state else None,
        )

    @property
    def selected_values(self) -> List[str]:
        """Values currently chosen: selected options, or the single free-form value."""
        if self.state is None:
            return []
        if self.state.options:
            return [option.value for option in self.state.options if option.selected]
        if self.state.value is not None:
            return [self.state.value]
        return []


@dataclass
class InputControlsList:
    input_controls: List[InputControl] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "InputControlsList":
        if not data:
            return cls()
        return cls([InputControl.from_dict(item) for item in json_objects(data, "inputControl")])


@dataclass
class InputControlStatesList:
    input_control_states: List[InputControlState] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "InputControlStatesList":
        if not data:
            return cls()
        return cls([InputControlState.from_dict(item) for item in json_objects(data, "inputControlState")])
