# =============================================================================
# 🌐 models/url_payload.py
# -----------------------------------------------------------------------------
# Web-Link; ohne Schema wird https:// ergänzt
# =============================================================================

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, List, Optional, Tuple
from urllib.parse import urlsplit

from models.base import BasePayload
from utils.field_schema import FieldSpec, custom, required
from utils.payload_errors import MalformedInput


def normalize_url(url: str) -> str:
    """Sorgt dafür, dass eine URL mit https:// beginnt."""
    if not url:
        return ""
    url = url.strip()
    if not re.match(r"^https?://", url, re.IGNORECASE):
        url = "https://" + url
    return url


def is_valid_url(value: str) -> bool:
    parts = urlsplit(normalize_url(value))
    return parts.scheme.lower() in {"http", "https"} and bool(parts.netloc) and " " not in parts.netloc


@dataclass
class UrlPayload(BasePayload):
    url: Optional[str] = None

    QR_TYPE: ClassVar[str] = "url"
    FIELDS: ClassVar[Tuple[FieldSpec, ...]] = (
        FieldSpec(
            "url",
            placeholder="https://example.com",
            description="The web address to open",
            rules=(
                required("URL is required."),
                custom(is_valid_url, "URL must be a valid http(s) address."),
            ),
        ),
    )

    @classmethod
    def split_payload(cls, text: str) -> List[Tuple[str, str]]:
        text = text.strip()
        if not re.match(r"^https?://", text, re.IGNORECASE):
            raise MalformedInput(f"Not an http(s) URL: {text!r}")
        return [("url", text)]

    def build(self) -> str:
        return normalize_url(self.url or "")
