# =============================================================================
# 💬 models/sms_payload.py
# -----------------------------------------------------------------------------
# SMS: SMSTO:<nummer>:<nachricht>
# Beim Einlesen wird auch sms:<nummer>?body=<nachricht> akzeptiert.
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, List, Optional, Tuple
from urllib.parse import parse_qsl

from models.base import BasePayload
from models.phone_payload import PHONE_RULES
from utils.field_schema import FieldSpec
from utils.payload_errors import MalformedInput

SMSTO_PREFIX = "SMSTO:"
SMS_URI_PREFIX = "sms:"


@dataclass
class SMSPayload(BasePayload):
    phone: Optional[str] = None
    message: Optional[str] = None

    QR_TYPE: ClassVar[str] = "sms"
    FIELDS: ClassVar[Tuple[FieldSpec, ...]] = (
        FieldSpec(
            "phone",
            placeholder="+49 170 1234567",
            description="The recipient phone number",
            rules=PHONE_RULES,
        ),
        FieldSpec("message", placeholder="Message", description="The message text"),
    )

    @classmethod
    def split_payload(cls, text: str) -> List[Tuple[str, str]]:
        lowered = text.lower()

        if lowered.startswith(SMSTO_PREFIX.lower()):
            phone, _, message = text[len(SMSTO_PREFIX):].partition(":")
            return [("phone", phone), ("message", message)]

        if lowered.startswith(SMS_URI_PREFIX):
            phone, _, query = text[len(SMS_URI_PREFIX):].partition("?")
            params: List[Tuple[str, str]] = [("phone", phone)]
            params.extend(
                ("message", value)
                for key, value in parse_qsl(query, keep_blank_values=True)
                if key == "body"
            )
            return params

        raise MalformedInput(f"Not an SMS payload: {text!r}")

    def build(self) -> str:
        return f"{SMSTO_PREFIX}{self.phone.strip()}:{self.message or ''}"  # type: ignore[union-attr]
