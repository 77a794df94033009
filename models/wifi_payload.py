# =============================================================================
# 📶 models/wifi_payload.py
# -----------------------------------------------------------------------------
# WLAN-Zugangsdaten
# Format: WIFI:S:\"<ssid>\";T:<WPA|WEP|WPA2EAP|nopass>;[P:<password>;];
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, List, Optional, Tuple

from models.base import BasePayload
from utils.encoding import escape_wifi_value, split_unescaped, unescape_wifi_value
from utils.field_schema import FieldSpec, InputType, required
from utils.payload_errors import MalformedInput

WIFI_PREFIX = "WIFI:"


class WifiSecurity(str, Enum):
    WPA = "WPA"
    WEP = "WEP"
    WPA2EAP = "WPA2EAP"
    nopass = "nopass"


# Kürzel im WIFI-String → Feldname
_WIFI_KEYS = {
    "S": "ssid",
    "T": "security",
    "P": "password",
    "H": "hidden_ssid",
}


@dataclass
class WifiPayload(BasePayload):
    ssid: Optional[str] = None
    # wird im WIFI-String nicht ausgegeben
    hidden_ssid: bool = False
    password: Optional[str] = None
    security: WifiSecurity = WifiSecurity.WPA

    QR_TYPE: ClassVar[str] = "wifi"
    FIELDS: ClassVar[Tuple[FieldSpec, ...]] = (
        FieldSpec(
            "ssid",
            description="The network name",
            rules=(required("SSID is required."),),
        ),
        FieldSpec(
            "hidden_ssid",
            value_type=bool,
            input_type=InputType.BOOLEAN,
            placeholder="",
            description="Whether the network is hidden",
        ),
        FieldSpec(
            "password",
            placeholder="",
            description="The network password",
        ),
        FieldSpec(
            "security",
            value_type=WifiSecurity,
            input_type=InputType.DROPDOWN,
            placeholder="",
            description="The network security type",
        ),
    )

    @classmethod
    def split_payload(cls, text: str) -> List[Tuple[str, str]]:
        if not text.startswith(WIFI_PREFIX):
            raise MalformedInput(f"Not a WIFI payload: {text!r}")

        params: List[Tuple[str, str]] = []
        for token in split_unescaped(text[len(WIFI_PREFIX):], ";"):
            if not token:
                continue
            key, sep, value = token.partition(":")
            if not sep:
                raise MalformedInput(f"Invalid WIFI field {token!r}")
            name = _WIFI_KEYS.get(key)
            if name is None:
                continue
            if name == "ssid":
                value = unescape_wifi_value(value)
            params.append((name, value))
        return params

    def build(self) -> str:
        payload = f"{WIFI_PREFIX}S:{escape_wifi_value(self.ssid or '')};T:{self.security.name};"
        if self.password and self.password.strip():
            payload += f"P:{self.password};"
        return payload + ";"
