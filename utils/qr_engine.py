"""
utils/qr_engine.py
────────────────────────────────────────────
Zentrale Payload-Engine.
- Unterstützt: OTP, Wi-Fi, E-Mail, Tel, SMS, URL, Text
- Nutzt: utils/qr_config und utils/payload_registry
- Jeder Aufruf arbeitet mit einer eigenen Payload-Instanz
────────────────────────────────────────────
"""

from typing import Any, Dict, List, Optional
import logging

from models.base import BasePayload
from utils.payload_errors import MalformedInput, PayloadError
from utils.payload_registry import (
    PAYLOAD_TYPES,
    get_payload_class,
    parse_payload,
    resolve_qr_type,
)
from utils.qr_config import get_qr_defaults, get_settings

logger = logging.getLogger(__name__)


def list_payload_types() -> List[str]:
    return [qr_type.value for qr_type in PAYLOAD_TYPES]


def create_payload(qr_type: str, data: Optional[Dict[str, Any]] = None) -> BasePayload:
    """
    Erstellt eine Payload-Instanz aus Standardwerten + übergebenen Daten.
    Übergebene Daten überschreiben die Standardwerte.
    """
    resolved = resolve_qr_type(qr_type)
    payload_cls = get_payload_class(resolved)
    params = {**get_qr_defaults(resolved.value), **(data or {})}
    return payload_cls.from_data(params)


def describe_payload(qr_type: str) -> List[Dict[str, Any]]:
    """Formular-Metadaten für einen Payload-Typ."""
    payload = create_payload(qr_type)
    return [definition.to_dict() for definition in payload.describe_fields()]


def check_payload(qr_type: str, data: Dict[str, Any]) -> List[str]:
    """Gibt alle Validierungsfehler zurück, ohne zu kodieren."""
    return create_payload(qr_type, data).validation_errors()


def build_payload(qr_type: str, data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Baut den Payload-String für einen QR-Code und gibt
    ein Dictionary mit {"type": "...", "payload": "..."} zurück.
    """
    try:
        payload = create_payload(qr_type, data)
        encoded = payload.encode()
    except PayloadError as exc:
        logger.warning(f"⚠️ Payload ({qr_type}) konnte nicht erstellt werden: {exc}")
        raise

    max_length = get_settings().max_payload_length
    if len(encoded.encode("utf-8")) > max_length:
        logger.warning(f"⚠️ Payload ({qr_type}) größer als {max_length} Bytes – evtl. nicht scanbar")

    logger.info(f"✅ Payload erfolgreich erstellt: type={payload.QR_TYPE}, length={len(encoded)}")
    return {"type": payload.QR_TYPE, "payload": encoded}


def read_payload(text: str, qr_type: Optional[str] = None) -> Dict[str, Any]:
    """
    Liest einen vorhandenen Payload-String und gibt
    {"type": "...", "data": {...}} zurück.
    """
    max_length = get_settings().max_payload_length
    if len((text or "").encode("utf-8")) > max_length:
        raise MalformedInput(f"Payload exceeds {max_length} bytes")

    try:
        payload = parse_payload(text, qr_type)
    except PayloadError as exc:
        logger.warning(f"⚠️ Payload konnte nicht gelesen werden: {exc}")
        raise

    logger.info(f"📥 Payload gelesen: type={payload.QR_TYPE}")
    return {"type": payload.QR_TYPE, "data": payload.to_dict()}


__all__ = [
    "build_payload",
    "check_payload",
    "create_payload",
    "describe_payload",
    "list_payload_types",
    "read_payload",
]
