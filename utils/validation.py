# utils/validation.py
# =============================================================================
# ✅ Validierung eines Payload-Datensatzes gegen seine Feldtabelle
# - sammelt ALLE Verstöße (kein Abbruch beim ersten Fehler)
# - Reihenfolge = Reihenfolge der Felddeklaration
# =============================================================================

from __future__ import annotations

from typing import Any, Iterable, List

from utils.field_schema import FieldSpec, RuleKind, ValidationRule
from utils.payload_errors import ValidationFailure


def is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def _violates(rule: ValidationRule, value: Any) -> bool:
    if rule.kind is RuleKind.REQUIRED:
        return is_empty(value)

    if rule.kind is RuleKind.RANGE:
        if rule.bounds is None or isinstance(value, bool) or not isinstance(value, int):
            return False
        minimum, maximum = rule.bounds
        return value < minimum or value > maximum

    # CUSTOM: leere Werte meldet bereits REQUIRED
    if rule.check is None or is_empty(value):
        return False
    return not rule.check(value)


def collect_violations(record: Any, fields: Iterable[FieldSpec]) -> List[str]:
    """Gibt alle Fehlermeldungen des Datensatzes zurück (leer = gültig)."""
    errors: List[str] = []
    for spec in fields:
        value = spec.get(record)
        for rule in spec.rules:
            if _violates(rule, value):
                errors.append(rule.error_message)
    return errors


def validate_record(record: Any, fields: Iterable[FieldSpec]) -> None:
    """Wirft ValidationFailure mit allen Meldungen, falls der Datensatz ungültig ist."""
    errors = collect_violations(record, fields)
    if errors:
        raise ValidationFailure(errors)
