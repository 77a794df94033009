# =============================================================================
# ✉️ models/email_payload.py
# -----------------------------------------------------------------------------
# E-Mail: mailto:<adresse>?subject=...&body=...
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, List, Optional, Tuple
from urllib.parse import parse_qsl, urlsplit

from models.base import BasePayload
from utils.encoding import is_valid_email, uri_decode, uri_encode
from utils.field_schema import FieldSpec, custom, required
from utils.payload_errors import MalformedInput

MAILTO_PREFIX = "mailto:"


@dataclass
class EmailPayload(BasePayload):
    email: Optional[str] = None
    subject: Optional[str] = None
    body: Optional[str] = None

    QR_TYPE: ClassVar[str] = "email"
    FIELDS: ClassVar[Tuple[FieldSpec, ...]] = (
        FieldSpec(
            "email",
            placeholder="name@example.com",
            description="The recipient address",
            rules=(
                required("Email is required."),
                custom(is_valid_email, "Email must be a valid e-mail address."),
            ),
        ),
        FieldSpec("subject", placeholder="Subject", description="The message subject"),
        FieldSpec("body", placeholder="Message", description="The message text"),
    )

    @classmethod
    def split_payload(cls, text: str) -> List[Tuple[str, str]]:
        text = text.strip()
        if not text.lower().startswith(MAILTO_PREFIX):
            raise MalformedInput(f"Not a mailto URI: {text!r}")

        parts = urlsplit(text)
        params: List[Tuple[str, str]] = [("email", uri_decode(parts.path))]
        params.extend(parse_qsl(parts.query, keep_blank_values=True))
        return params

    def build(self) -> str:
        query = [
            f"{key}={uri_encode(value)}"
            for key, value in (("subject", self.subject), ("body", self.body))
            if value
        ]
        payload = f"{MAILTO_PREFIX}{self.email.strip()}"  # type: ignore[union-attr]
        if query:
            payload += "?" + "&".join(query)
        return payload
