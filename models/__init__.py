# =============================================================================
# 📦 models/__init__.py
# -----------------------------------------------------------------------------
# Alle Payload-Typen an einer Stelle
# =============================================================================

from .base import BasePayload
from .otp_payload import OTPPayload, OTPType, Algorithm
from .wifi_payload import WifiPayload, WifiSecurity
from .email_payload import EmailPayload
from .phone_payload import PhonePayload
from .sms_payload import SMSPayload
from .url_payload import UrlPayload
from .text_payload import TextPayload

__all__ = [
    "BasePayload",
    "OTPPayload",
    "OTPType",
    "Algorithm",
    "WifiPayload",
    "WifiSecurity",
    "EmailPayload",
    "PhonePayload",
    "SMSPayload",
    "UrlPayload",
    "TextPayload",
]
