# =============================================================================
# 🔐 models/otp_payload.py
# -----------------------------------------------------------------------------
# OTP-Provisioning (otpauth://) für Authenticator-Apps
# Format:
#   otpauth://totp/Issuer:account?secret=...&issuer=...&algorithm=SHA1
#       &digits=6&period=30[&counter=0]
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, List, Optional, Tuple
from urllib.parse import parse_qsl, urlsplit

from models.base import BasePayload
from utils.encoding import encode_account_name, normalize_secret, uri_decode, uri_encode
from utils.field_schema import INT_MAX, FieldSpec, InputType, in_range, required
from utils.payload_errors import MalformedInput

OTP_SCHEME = "otpauth"


class OTPType(str, Enum):
    TOTP = "TOTP"
    HOTP = "HOTP"


class Algorithm(str, Enum):
    SHA1 = "SHA1"
    SHA256 = "SHA256"
    SHA512 = "SHA512"


@dataclass
class OTPPayload(BasePayload):
    account_name: Optional[str] = None
    issuer: Optional[str] = None
    secret: Optional[str] = None
    otp_type: OTPType = OTPType.TOTP
    algorithm: Algorithm = Algorithm.SHA1
    digits: int = 6
    period: int = 30
    # nur für HOTP relevant, wird aber immer geführt
    counter: int = 0

    QR_TYPE: ClassVar[str] = "otp"
    FIELDS: ClassVar[Tuple[FieldSpec, ...]] = (
        FieldSpec(
            "account_name",
            placeholder="Account Name",
            description="The account name associated with the OTP",
            rules=(required("AccountName is required."),),
        ),
        FieldSpec(
            "issuer",
            placeholder="Issuer",
            description="The issuer of the OTP",
            rules=(required("Issuer is required."),),
        ),
        FieldSpec(
            "secret",
            placeholder="Secret",
            description="The secret key for the OTP",
            rules=(required("Secret is required."),),
        ),
        FieldSpec(
            "otp_type",
            value_type=OTPType,
            input_type=InputType.DROPDOWN,
            placeholder="OTPType",
            description="The type of OTP (TOTP or HOTP)",
        ),
        FieldSpec(
            "algorithm",
            value_type=Algorithm,
            input_type=InputType.DROPDOWN,
            placeholder="Algorithm",
            description="The algorithm used for the OTP",
        ),
        FieldSpec(
            "digits",
            value_type=int,
            input_type=InputType.INTEGER,
            placeholder="Digits",
            description="The number of digits in the OTP",
            rules=(in_range(1, INT_MAX, "Digits must be greater than 0."),),
        ),
        FieldSpec(
            "period",
            value_type=int,
            input_type=InputType.DROPDOWN,
            placeholder="Period",
            description="The period for the OTP",
            rules=(in_range(1, INT_MAX, "Period must be greater than 0."),),
            options=("15", "30", "60"),
        ),
        FieldSpec(
            "counter",
            value_type=int,
            input_type=InputType.INTEGER,
            placeholder="Counter",
            description="The counter for HOTP",
            rules=(in_range(0, INT_MAX, "Counter must be non-negative for HOTP."),),
        ),
    )

    @classmethod
    def split_payload(cls, text: str) -> List[Tuple[str, str]]:
        parts = urlsplit(text.strip())
        if parts.scheme.lower() != OTP_SCHEME or not parts.netloc:
            raise MalformedInput(f"Not an otpauth URI: {text!r}")

        params: List[Tuple[str, str]] = [("otp_type", parts.netloc)]

        label = parts.path.lstrip("/")
        if label:
            issuer, sep, account = label.partition(":")
            if sep:
                params.append(("issuer", uri_decode(issuer)))
                params.append(("account_name", uri_decode(account)))
            else:
                params.append(("account_name", uri_decode(label)))

        # Query-Parameter haben Vorrang vor dem Label
        params.extend(parse_qsl(parts.query, keep_blank_values=True))
        return params

    def build(self) -> str:
        issuer = uri_encode(self.issuer or "")
        account = encode_account_name(self.account_name)
        secret = normalize_secret(self.secret or "")

        uri = (
            f"{OTP_SCHEME}://{self.otp_type.name.lower()}/{issuer}:{account}"
            f"?secret={secret}"
            f"&issuer={issuer}"
            f"&algorithm={self.algorithm.name.upper()}"
            f"&digits={self.digits}"
            f"&period={self.period}"
        )
        if self.otp_type is OTPType.HOTP:
            uri += f"&counter={self.counter}"
        return uri
