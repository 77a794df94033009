from __future__ import annotations

import pytest

from models import EmailPayload, PhonePayload, SMSPayload, TextPayload, UrlPayload
from utils.payload_errors import MalformedInput, ValidationFailure


# ---------------------------------------------------------------------------
# E-Mail
# ---------------------------------------------------------------------------
def test_email_encode_with_subject_and_body():
    email = EmailPayload(email="info@example.com", subject="Hallo Welt", body="Zeile 1\nZeile 2")
    assert email.encode() == "mailto:info@example.com?subject=Hallo%20Welt&body=Zeile%201%0AZeile%202"


def test_email_encode_without_optional_parts():
    assert EmailPayload(email="info@example.com").encode() == "mailto:info@example.com"


def test_email_round_trip():
    original = EmailPayload(email="info@example.com", subject="Re: A & B", body="x=1")
    assert EmailPayload.parse(original.encode()) == original


def test_email_requires_valid_address():
    with pytest.raises(ValidationFailure) as exc_info:
        EmailPayload(email="not an address").encode()
    assert exc_info.value.violations == ["Email must be a valid e-mail address."]

    with pytest.raises(ValidationFailure) as exc_info:
        EmailPayload().encode()
    assert exc_info.value.violations == ["Email is required."]


def test_email_parse_rejects_other_schemes():
    with pytest.raises(MalformedInput):
        EmailPayload.parse("tel:+4912345")


# ---------------------------------------------------------------------------
# Telefon & SMS
# ---------------------------------------------------------------------------
def test_phone_encode_and_parse():
    phone = PhonePayload(phone="+49 (0)170 1234567")
    assert phone.encode() == "tel:+49 (0)170 1234567"
    assert PhonePayload.parse(phone.encode()) == phone


def test_phone_rejects_letters():
    with pytest.raises(ValidationFailure):
        PhonePayload(phone="call me").encode()


def test_sms_encode_and_parse():
    sms = SMSPayload(phone="+491701234567", message="Bin gleich da: 5 min")
    assert sms.encode() == "SMSTO:+491701234567:Bin gleich da: 5 min"
    assert SMSPayload.parse(sms.encode()) == sms


def test_sms_parse_accepts_sms_uri():
    sms = SMSPayload.parse("sms:+491701234567?body=Hallo%20du")
    assert sms.phone == "+491701234567"
    assert sms.message == "Hallo du"


def test_sms_parse_rejects_unknown_prefix():
    with pytest.raises(MalformedInput):
        SMSPayload.parse("MMSTO:123:x")


# ---------------------------------------------------------------------------
# URL & Text
# ---------------------------------------------------------------------------
def test_url_is_normalized_to_https():
    assert UrlPayload(url="example.com/path").encode() == "https://example.com/path"
    assert UrlPayload(url="http://example.com").encode() == "http://example.com"


def test_url_validation():
    with pytest.raises(ValidationFailure) as exc_info:
        UrlPayload(url="https://").encode()
    assert exc_info.value.violations == ["URL must be a valid http(s) address."]


def test_url_parse():
    assert UrlPayload.parse("https://example.com/?a=1").url == "https://example.com/?a=1"
    with pytest.raises(MalformedInput):
        UrlPayload.parse("ftp://example.com")


def test_text_is_verbatim():
    text = TextPayload(text="WIFI:looks like wifi but is text")
    assert text.encode() == "WIFI:looks like wifi but is text"
    assert TextPayload.parse(text.encode()) == text

    with pytest.raises(ValidationFailure):
        TextPayload(text="").encode()
