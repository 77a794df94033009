# utils/binder.py
# =============================================================================
# 🔗 Query-String-Binder
# Überträgt flache Schlüssel/Wert-Paare auf die typisierten Felder eines
# Payload-Datensatzes. Unbekannte Schlüssel werden ignoriert.
# =============================================================================

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Iterable, Mapping, Tuple, Type, Union

from utils.field_schema import FieldSpec
from utils.payload_errors import BindingFailure

Params = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]

_INT_RE = re.compile(r"^[+-]?\d+$")
_TRUE = {"true", "1", "yes", "on"}
_FALSE = {"false", "0", "no", "off"}


def parse_enum(enum_type: Type[Enum], key: str, value: str) -> Enum:
    wanted = value.strip().lower()
    for member in enum_type:
        if member.name.lower() == wanted:
            return member
    raise BindingFailure(
        key,
        value,
        enum_type.__name__,
        reason=f"Invalid value '{value}' for enum type '{enum_type.__name__}'.",
    )


def parse_int(key: str, value: str) -> int:
    text = value.strip()
    if not _INT_RE.match(text):
        raise BindingFailure(key, value, "int")
    return int(text)


def parse_bool(key: str, value: str) -> bool:
    text = value.strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise BindingFailure(key, value, "bool")


def convert_value(spec: FieldSpec, value: str) -> Any:
    if spec.is_enum:
        return parse_enum(spec.value_type, spec.name, value)  # type: ignore[arg-type]
    if spec.value_type is bool:
        return parse_bool(spec.name, value)
    if spec.value_type is int:
        return parse_int(spec.name, value)
    return value


def _iter_params(params: Params) -> Iterable[Tuple[str, Any]]:
    if isinstance(params, Mapping):
        return params.items()
    return params


def bind(record: Any, fields: Iterable[FieldSpec], params: Params) -> Any:
    """
    Setzt alle bekannten Felder (exakter, case-sensitiver Namensvergleich).
    Spätere Paare überschreiben frühere. None-Werte werden übersprungen.
    """
    by_name = {spec.name: spec for spec in fields}

    for key, raw in _iter_params(params):
        spec = by_name.get(key)
        if spec is None or raw is None:
            continue
        if isinstance(raw, Enum):
            raw = raw.name
        value = raw if isinstance(raw, str) else str(raw)
        spec.set(record, convert_value(spec, value))

    return record
