# =============================================================================
# 📞 models/phone_payload.py
# -----------------------------------------------------------------------------
# Telefon: tel:<nummer>
# =============================================================================

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, List, Optional, Tuple

from models.base import BasePayload
from utils.field_schema import FieldSpec, ValidationRule, custom, required
from utils.payload_errors import MalformedInput

TEL_PREFIX = "tel:"

_PHONE_RE = re.compile(r"^\+?[0-9 ()/.\-]*[0-9][0-9 ()/.\-]*$")


def is_valid_phone(value: str) -> bool:
    return bool(_PHONE_RE.match(value.strip()))


PHONE_RULES: Tuple[ValidationRule, ...] = (
    required("Phone is required."),
    custom(is_valid_phone, "Phone may only contain digits, spaces and + - ( ) / . characters."),
)


@dataclass
class PhonePayload(BasePayload):
    phone: Optional[str] = None

    QR_TYPE: ClassVar[str] = "phone"
    FIELDS: ClassVar[Tuple[FieldSpec, ...]] = (
        FieldSpec(
            "phone",
            placeholder="+49 170 1234567",
            description="The phone number to call",
            rules=PHONE_RULES,
        ),
    )

    @classmethod
    def split_payload(cls, text: str) -> List[Tuple[str, str]]:
        text = text.strip()
        if not text.lower().startswith(TEL_PREFIX):
            raise MalformedInput(f"Not a tel URI: {text!r}")
        return [("phone", text[len(TEL_PREFIX):])]

    def build(self) -> str:
        return f"{TEL_PREFIX}{self.phone.strip()}"  # type: ignore[union-attr]
