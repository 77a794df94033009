from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from utils.payload_errors import (
    BindingFailure,
    MalformedInput,
    UnknownPayloadType,
    ValidationFailure,
)
from utils.qr_engine import (
    build_payload,
    check_payload,
    describe_payload,
    list_payload_types,
    read_payload,
)

router = APIRouter(prefix="/api/v1", tags=["Payload API"])


class PayloadDataIn(BaseModel):
    data: dict[str, Any] = Field(default_factory=dict)


class ParsePayloadIn(BaseModel):
    payload: str = Field(..., description="Encoded QR payload")
    type: Optional[str] = Field(default=None, description="QR type, detected when omitted")


@router.get("/types")
def list_types():
    return {"items": list_payload_types()}


@router.get("/types/{qr_type}/fields")
def get_fields(qr_type: str):
    try:
        fields = describe_payload(qr_type)
    except UnknownPayloadType as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    return {"type": qr_type.lower(), "fields": fields}


@router.post("/types/{qr_type}/validate")
def validate_payload(qr_type: str, body: PayloadDataIn):
    try:
        errors = check_payload(qr_type, body.data)
    except UnknownPayloadType as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    except BindingFailure as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return {"valid": not errors, "errors": errors}


@router.post("/types/{qr_type}/encode")
def encode_payload(qr_type: str, body: PayloadDataIn):
    try:
        return build_payload(qr_type, body.data)
    except UnknownPayloadType as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    except BindingFailure as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except ValidationFailure as exc:
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc), "errors": exc.violations},
        )


@router.post("/parse")
def parse_payload(body: ParsePayloadIn):
    try:
        return read_payload(body.payload, body.type)
    except UnknownPayloadType as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    except (MalformedInput, BindingFailure) as exc:
        raise HTTPException(status_code=400, detail=str(exc))
