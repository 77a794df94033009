# utils/encoding.py
"""
Escaping- und Encoding-Bausteine für QR-Payloads.

- Wi-Fi: Semikolon-Escaping mit festem \\" Rahmen
- URI: Prozent-Kodierung nach RFC 3986
- OTP: Base32-Erkennung und -Kodierung von Secrets (RFC 4648)
"""

from __future__ import annotations

import base64
import re
from email.utils import parseaddr
from typing import List
from urllib.parse import quote, unquote

WIFI_QUOTE = '\\"'

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+$")

# Zeichen mit Sonderbedeutung in otpauth-URIs
_URI_DELIMITERS = frozenset("#?%&/")


# --------------------------------------------------------------------------- #
# 📶 Wi-Fi
# --------------------------------------------------------------------------- #

def escape_wifi_value(value: str) -> str:
    """
    Setzt den Wert immer in \\"...\\" und maskiert ';' als '\\;'.
    Ein Backslash bleibt ein einzelner Backslash.
    """
    escaped: List[str] = [WIFI_QUOTE]
    for ch in value:
        if ch == ";":
            escaped.append("\\;")
        elif ch == "\\":
            escaped.append("\\")
        else:
            escaped.append(ch)
    escaped.append(WIFI_QUOTE)
    return "".join(escaped)


def unescape_wifi_value(value: str) -> str:
    """Umkehrung von escape_wifi_value(); Werte ohne Rahmen bleiben erhalten."""
    if len(value) >= 2 * len(WIFI_QUOTE) and value.startswith(WIFI_QUOTE) and value.endswith(WIFI_QUOTE):
        value = value[len(WIFI_QUOTE):-len(WIFI_QUOTE)]

    result: List[str] = []
    i = 0
    while i < len(value):
        if value[i] == "\\" and i + 1 < len(value) and value[i + 1] == ";":
            result.append(";")
            i += 2
            continue
        result.append(value[i])
        i += 1
    return "".join(result)


def split_unescaped(text: str, delimiter: str = ";") -> List[str]:
    """Trennt an Delimitern, vor denen kein Backslash steht."""
    parts: List[str] = []
    current: List[str] = []
    previous = ""
    for ch in text:
        if ch == delimiter and previous != "\\":
            parts.append("".join(current))
            current = []
        else:
            current.append(ch)
        previous = ch
    parts.append("".join(current))
    return parts


# --------------------------------------------------------------------------- #
# 🌐 URI
# --------------------------------------------------------------------------- #

def uri_encode(value: str) -> str:
    return quote(value or "", safe="")


def uri_decode(value: str) -> str:
    return unquote(value or "")


def is_valid_email(value: str | None) -> bool:
    """
    Prüft auf eine einfache Mailbox-Adresse local@domain.
    Adressen mit URI-Trennzeichen gelten nicht als lesbar und werden kodiert.
    """
    candidate = (value or "").strip()
    if not candidate or not _EMAIL_RE.match(candidate):
        return False
    if _URI_DELIMITERS.intersection(candidate):
        return False
    _, address = parseaddr(candidate)
    return address == candidate


def encode_account_name(account_name: str | None) -> str:
    """E-Mail-Adressen bleiben lesbar, alles andere wird prozent-kodiert."""
    if not account_name or not account_name.strip():
        return ""
    if is_valid_email(account_name):
        return account_name
    return uri_encode(account_name)


# --------------------------------------------------------------------------- #
# 🔑 Base32
# --------------------------------------------------------------------------- #

def is_base32(value: str) -> bool:
    """Akzeptiert auch Kleinbuchstaben und fehlendes Padding."""
    normalized = (value or "").upper()
    normalized += "=" * ((-len(normalized)) % 8)
    try:
        base64.b32decode(normalized, casefold=True)
    except ValueError:
        return False
    return True


def normalize_secret(secret: str) -> str:
    """
    Bereits Base32-kodierte Secrets werden unverändert übernommen,
    alle anderen als UTF-8 Bytes Base32-kodiert.
    """
    if is_base32(secret):
        return secret
    return base64.b32encode(secret.encode("utf-8")).decode("ascii")
