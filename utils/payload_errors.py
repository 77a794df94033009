# =============================================================================
# ❌ utils/payload_errors.py
# Fehlerklassen für Payload-Validierung, Binding und Parsing
# =============================================================================

from __future__ import annotations

from typing import List, Optional, Sequence


class PayloadError(ValueError):
    """Basisklasse aller Payload-Fehler."""


class ValidationFailure(PayloadError):
    """
    Eine oder mehrere Regelverletzungen (required / range / custom).
    Die Meldungen werden in Feldreihenfolge mit einem Leerzeichen verbunden.
    """

    def __init__(self, violations: Sequence[str]):
        self.violations: List[str] = list(violations)
        super().__init__(" ".join(self.violations))


class BindingFailure(PayloadError):
    """Ein Parameterwert passt nicht zum Typ seines Feldes."""

    def __init__(self, key: str, value: str, expected: str, reason: Optional[str] = None):
        self.key = key
        self.value = value
        self.expected = expected
        reason = reason or f"Invalid value '{value}' for type '{expected}'."
        super().__init__(f"Error setting field '{key}': {reason}")


class MalformedInput(PayloadError):
    """Der Payload-String entspricht nicht der Grammatik des Typs."""


class UnknownPayloadType(PayloadError, KeyError):
    """Kein Payload-Typ für dieses Kürzel registriert."""

    def __init__(self, qr_type: str):
        self.qr_type = qr_type
        super().__init__(f"Unsupported qr type: {qr_type}")

    def __str__(self) -> str:
        return str(self.args[0])
