# utils/payload_registry.py
"""
Zuordnung Typ-Kürzel → Payload-Klasse.
Erkennt außerdem den Typ eines unbekannten Payload-Strings anhand des Präfixes.
"""

from __future__ import annotations

import re
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Type

from models import (
    BasePayload,
    EmailPayload,
    OTPPayload,
    PhonePayload,
    SMSPayload,
    TextPayload,
    UrlPayload,
    WifiPayload,
)
from utils.payload_errors import UnknownPayloadType


class QRCodeType(str, Enum):
    OTP = "otp"
    WIFI = "wifi"
    EMAIL = "email"
    PHONE = "phone"
    SMS = "sms"
    URL = "url"
    TEXT = "text"


PAYLOAD_TYPES: Mapping[QRCodeType, Type[BasePayload]] = MappingProxyType(
    {
        QRCodeType.OTP: OTPPayload,
        QRCodeType.WIFI: WifiPayload,
        QRCodeType.EMAIL: EmailPayload,
        QRCodeType.PHONE: PhonePayload,
        QRCodeType.SMS: SMSPayload,
        QRCodeType.URL: UrlPayload,
        QRCodeType.TEXT: TextPayload,
    }
)

# Reihenfolge ist relevant: erstes passendes Präfix gewinnt
_PREFIXES = (
    (re.compile(r"^otpauth://", re.IGNORECASE), QRCodeType.OTP),
    (re.compile(r"^WIFI:"), QRCodeType.WIFI),
    (re.compile(r"^mailto:", re.IGNORECASE), QRCodeType.EMAIL),
    (re.compile(r"^tel:", re.IGNORECASE), QRCodeType.PHONE),
    (re.compile(r"^(SMSTO|sms):", re.IGNORECASE), QRCodeType.SMS),
    (re.compile(r"^https?://", re.IGNORECASE), QRCodeType.URL),
)


def resolve_qr_type(qr_type: str | QRCodeType) -> QRCodeType:
    if isinstance(qr_type, QRCodeType):
        return qr_type
    key = str(qr_type or "").strip().lower()
    try:
        return QRCodeType(key)
    except ValueError:
        raise UnknownPayloadType(key) from None


def get_payload_class(qr_type: str | QRCodeType) -> Type[BasePayload]:
    return PAYLOAD_TYPES[resolve_qr_type(qr_type)]


def detect_payload_type(text: str) -> QRCodeType:
    candidate = (text or "").strip()
    for pattern, qr_type in _PREFIXES:
        if pattern.match(candidate):
            return qr_type
    return QRCodeType.TEXT


def parse_payload(text: str, qr_type: Optional[str | QRCodeType] = None) -> BasePayload:
    """Liest einen Payload-String; ohne Typangabe wird der Typ erkannt."""
    resolved = resolve_qr_type(qr_type) if qr_type else detect_payload_type(text)
    # Freitext behält seine Leerzeichen, alle anderen Formate nicht
    if text and resolved is not QRCodeType.TEXT:
        text = text.strip()
    return PAYLOAD_TYPES[resolved].parse(text)
