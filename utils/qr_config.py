"""
utils/qr_config.py
────────────────────────────────────────────
Globale Konfiguration des QR-Payload-Codecs.

- App-Einstellungen aus Umgebung / .env
- Standardwerte pro Payload-Typ (für Formulare und die API)
────────────────────────────────────────────
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

from dotenv import load_dotenv

# 🔹 .env laden (z. B. aus .env-Datei im Projektverzeichnis)
load_dotenv()

# ─────────────────────────────────────────────
# ⚙️ APP-EINSTELLUNGEN
# ─────────────────────────────────────────────

# maximale Byte-Kapazität eines QR-Codes (Version 40, Level L)
QR_MAX_BYTES = 2953


@dataclass(frozen=True)
class AppSettings:
    app_title: str
    app_version: str
    log_level: str
    default_otp_issuer: Optional[str]
    max_payload_length: int


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def get_settings() -> AppSettings:
    """Liest die Einstellungen bei jedem Aufruf neu (Tests setzen Variablen per monkeypatch)."""
    return AppSettings(
        app_title=os.getenv("APP_TITLE", "QR Payload Codec"),
        app_version=os.getenv("APP_VERSION", "1.0"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        default_otp_issuer=os.getenv("DEFAULT_OTP_ISSUER") or None,
        max_payload_length=_int_env("MAX_PAYLOAD_LENGTH", QR_MAX_BYTES),
    )


# ─────────────────────────────────────────────
# 🧩 STANDARDWERTE PRO TYP
# ─────────────────────────────────────────────
QR_DEFAULTS: Dict[str, Dict[str, Any]] = {
    "otp": {
        "otp_type": "TOTP",
        "algorithm": "SHA1",
        "digits": 6,
        "period": 30,
        "counter": 0,
    },
    "wifi": {
        "security": "WPA",
        "hidden_ssid": False,
    },
}


def get_qr_defaults(qr_type: str) -> Dict[str, Any]:
    """
    Gibt die Standardwerte eines Payload-Typs zurück.
    Unbekannte Typen liefern ein leeres Dictionary.
    """
    defaults = dict(QR_DEFAULTS.get(qr_type, {}))
    if qr_type == "otp":
        issuer = get_settings().default_otp_issuer
        if issuer:
            defaults["issuer"] = issuer
    return defaults
