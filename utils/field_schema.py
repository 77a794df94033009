# utils/field_schema.py
"""
Feldbeschreibungen für jeden Payload-Typ.

Jeder Payload-Typ besitzt genau eine geordnete Tabelle von FieldSpec-Einträgen.
Binder, Validierung und describe_fields() lesen alle dieselbe Tabelle, damit
Regeln nur an einer Stelle gepflegt werden.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple, Type, Union

# größter Wert für Range-Regeln (32-bit signed)
INT_MAX = 2**31 - 1


class InputType(str, Enum):
    STRING = "String"
    INTEGER = "Integer"
    BOOLEAN = "Boolean"
    ENUM = "Enum"
    DROPDOWN = "Dropdown"


class RuleKind(str, Enum):
    REQUIRED = "required"
    RANGE = "range"
    CUSTOM = "custom"


@dataclass(frozen=True)
class ValidationRule:
    kind: RuleKind
    error_message: str
    bounds: Optional[Tuple[int, int]] = None
    check: Optional[Callable[[Any], bool]] = field(default=None, compare=False, repr=False)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"rule": self.kind.value, "error_message": self.error_message}
        if self.bounds is not None:
            data["min"], data["max"] = self.bounds
        return data


def required(message: str) -> ValidationRule:
    return ValidationRule(RuleKind.REQUIRED, message)


def in_range(minimum: int, maximum: int, message: str) -> ValidationRule:
    return ValidationRule(RuleKind.RANGE, message, bounds=(minimum, maximum))


def custom(check: Callable[[Any], bool], message: str) -> ValidationRule:
    return ValidationRule(RuleKind.CUSTOM, message, check=check)


@dataclass(frozen=True)
class FieldDefinition:
    """UI-Metadaten eines Feldes (wird nur vom Formular-Renderer gelesen)."""

    name: str
    semantic_type: InputType
    placeholder: str = ""
    description: str = ""
    validation_rules: Tuple[ValidationRule, ...] = ()
    dropdown_options: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "name": self.name,
            "type": self.semantic_type.value,
            "placeholder": self.placeholder,
            "description": self.description,
            "validation_rules": [rule.to_dict() for rule in self.validation_rules],
        }
        if self.semantic_type is InputType.DROPDOWN:
            data["dropdown_options"] = list(self.dropdown_options)
        return data


ValueType = Union[Type[str], Type[int], Type[bool], Type[Enum]]


@dataclass(frozen=True)
class FieldSpec:
    """
    Ein Eintrag der Feldtabelle:
    name → Attribut, Werttyp (Parser), UI-Typ und Regeln.
    """

    name: str
    value_type: ValueType = str
    input_type: InputType = InputType.STRING
    placeholder: Optional[str] = None
    description: str = ""
    rules: Tuple[ValidationRule, ...] = ()
    options: Tuple[str, ...] = ()
    attribute: Optional[str] = None

    @property
    def attr(self) -> str:
        return self.attribute or self.name

    @property
    def is_enum(self) -> bool:
        return isinstance(self.value_type, type) and issubclass(self.value_type, Enum)

    def get(self, record: Any) -> Any:
        return getattr(record, self.attr)

    def set(self, record: Any, value: Any) -> None:
        setattr(record, self.attr, value)

    def dropdown_options(self) -> List[str]:
        if self.options:
            return list(self.options)
        if self.is_enum:
            return [member.name for member in self.value_type]  # type: ignore[union-attr]
        return []

    def describe(self, record: Any = None) -> FieldDefinition:
        placeholder = self.placeholder
        if placeholder is None:
            # ohne festen Platzhalter: aktueller Wert des Datensatzes
            current = self.get(record) if record is not None else None
            if current is None:
                placeholder = ""
            elif isinstance(current, Enum):
                placeholder = current.name
            else:
                placeholder = str(current)
        options = self.dropdown_options() if self.input_type is InputType.DROPDOWN else []
        return FieldDefinition(
            name=self.name,
            semantic_type=self.input_type,
            placeholder=placeholder,
            description=self.description,
            validation_rules=self.rules,
            dropdown_options=tuple(options),
        )


def describe_all(fields: Tuple[FieldSpec, ...], record: Any = None) -> List[FieldDefinition]:
    return [spec.describe(record) for spec in fields]
