# models/text_payload.py
# Freitext, wird unverändert übernommen

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, List, Optional, Tuple

from models.base import BasePayload
from utils.field_schema import FieldSpec, required


@dataclass
class TextPayload(BasePayload):
    text: Optional[str] = None

    QR_TYPE: ClassVar[str] = "text"
    FIELDS: ClassVar[Tuple[FieldSpec, ...]] = (
        FieldSpec(
            "text",
            placeholder="Text",
            description="Any text content",
            rules=(required("Text is required."),),
        ),
    )

    @classmethod
    def split_payload(cls, text: str) -> List[Tuple[str, str]]:
        return [("text", text)]

    def build(self) -> str:
        return self.text or ""
