# =============================================================================
# 📦 models/base.py
# -----------------------------------------------------------------------------
# Gemeinsame Basisklasse aller Payload-Typen (OTP, WiFi, E-Mail, ...)
# =============================================================================

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional, Tuple, Type, TypeVar

from utils.binder import Params, bind
from utils.field_schema import FieldDefinition, FieldSpec, describe_all
from utils.validation import collect_violations, validate_record

P = TypeVar("P", bound="BasePayload")


class BasePayload(ABC):
    """
    Ein Payload-Typ = Datensatz + Feldtabelle + Codec.

    Unterklassen sind Dataclasses, deren Felder den Datensatz bilden, und
    liefern FIELDS, split_payload() und build().
    """

    QR_TYPE: ClassVar[str] = ""
    FIELDS: ClassVar[Tuple[FieldSpec, ...]] = ()

    # ------------------------------------------------------------------
    # Erzeugen
    # ------------------------------------------------------------------
    @classmethod
    def from_data(cls: Type[P], data: Optional[Params] = None) -> P:
        payload = cls()
        if data:
            bind(payload, cls.FIELDS, data)
        return payload

    @classmethod
    def parse(cls: Type[P], text: Optional[str]) -> P:
        """Liest einen kodierten Payload-String. Leerer Text = leerer Datensatz."""
        if text is None or not text.strip():
            return cls()
        return cls.from_data(cls.split_payload(text))

    @classmethod
    @abstractmethod
    def split_payload(cls, text: str) -> List[Tuple[str, str]]:
        """Zerlegt den String in flache Schlüssel/Wert-Paare."""

    # ------------------------------------------------------------------
    # Validieren & Kodieren
    # ------------------------------------------------------------------
    def validation_errors(self) -> List[str]:
        return collect_violations(self, self.FIELDS)

    def is_valid(self) -> bool:
        return not self.validation_errors()

    def validate(self) -> None:
        validate_record(self, self.FIELDS)

    def encode(self) -> str:
        self.validate()
        return self.build()

    @abstractmethod
    def build(self) -> str:
        """Baut den Payload-String (Datensatz ist bereits validiert)."""

    # ------------------------------------------------------------------
    # Introspektion
    # ------------------------------------------------------------------
    def describe_fields(self) -> List[FieldDefinition]:
        return describe_all(self.FIELDS, self)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        for spec in self.FIELDS:
            value = spec.get(self)
            data[spec.name] = value.name if isinstance(value, Enum) else value
        return data
