from __future__ import annotations

import logging

import pytest

from models import OTPPayload, WifiSecurity
from utils.payload_errors import MalformedInput, UnknownPayloadType, ValidationFailure
from utils.qr_config import QR_MAX_BYTES, get_qr_defaults, get_settings
from utils.qr_engine import (
    build_payload,
    check_payload,
    create_payload,
    describe_payload,
    list_payload_types,
    read_payload,
)


def test_list_payload_types():
    assert list_payload_types() == ["otp", "wifi", "email", "phone", "sms", "url", "text"]


def test_create_payload_applies_defaults_and_data():
    wifi = create_payload("wifi", {"ssid": "Net", "security": "wep"})
    assert wifi.ssid == "Net"
    assert wifi.security is WifiSecurity.WEP


def test_default_issuer_from_environment(monkeypatch):
    monkeypatch.setenv("DEFAULT_OTP_ISSUER", "Ouhud QR")
    assert get_qr_defaults("otp")["issuer"] == "Ouhud QR"

    otp = create_payload("otp", {"account_name": "alice", "secret": "JBSWY3DP"})
    assert isinstance(otp, OTPPayload)
    assert otp.issuer == "Ouhud QR"


def test_unknown_defaults_are_empty():
    assert get_qr_defaults("text") == {}


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("MAX_PAYLOAD_LENGTH", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = get_settings()
    assert settings.max_payload_length == QR_MAX_BYTES
    assert settings.log_level == "DEBUG"


def test_invalid_integer_setting(monkeypatch):
    monkeypatch.setenv("MAX_PAYLOAD_LENGTH", "viel")
    with pytest.raises(ValueError):
        get_settings()


def test_build_payload_logs_success(caplog):
    with caplog.at_level(logging.INFO, logger="utils.qr_engine"):
        result = build_payload("wifi", {"ssid": "foo;bar\\baz", "password": "abc"})

    assert result == {"type": "wifi", "payload": 'WIFI:S:\\"foo\\;bar\\baz\\";T:WPA;P:abc;;'}
    assert "Payload erfolgreich erstellt" in caplog.text


def test_build_payload_logs_and_reraises_validation(caplog):
    with caplog.at_level(logging.WARNING, logger="utils.qr_engine"):
        with pytest.raises(ValidationFailure):
            build_payload("otp", {"account_name": "alice", "issuer": "ACME"})

    assert "Secret is required." in caplog.text


def test_build_payload_warns_on_oversized_payload(monkeypatch, caplog):
    monkeypatch.setenv("MAX_PAYLOAD_LENGTH", "10")
    with caplog.at_level(logging.WARNING, logger="utils.qr_engine"):
        build_payload("text", {"text": "x" * 20})
    assert "größer als 10 Bytes" in caplog.text


def test_check_payload_returns_all_errors(monkeypatch):
    monkeypatch.delenv("DEFAULT_OTP_ISSUER", raising=False)
    assert check_payload("otp", {"digits": "0"}) == [
        "AccountName is required.",
        "Issuer is required.",
        "Secret is required.",
        "Digits must be greater than 0.",
    ]
    assert check_payload("wifi", {"ssid": "Net"}) == []


def test_describe_payload_serializes_fields():
    fields = describe_payload("wifi")
    assert [f["name"] for f in fields] == ["ssid", "hidden_ssid", "password", "security"]
    assert fields[0]["validation_rules"] == [{"rule": "required", "error_message": "SSID is required."}]
    assert fields[3]["type"] == "Dropdown"
    assert fields[3]["dropdown_options"] == ["WPA", "WEP", "WPA2EAP", "nopass"]


def test_read_payload_detects_type():
    result = read_payload("otpauth://hotp/ACME:bob?secret=JBSWY3DP&counter=3")
    assert result["type"] == "otp"
    assert result["data"]["otp_type"] == "HOTP"
    assert result["data"]["counter"] == 3
    assert result["data"]["issuer"] == "ACME"


def test_read_payload_rejects_oversized_input(monkeypatch):
    monkeypatch.setenv("MAX_PAYLOAD_LENGTH", "5")
    with pytest.raises(MalformedInput):
        read_payload("Hallo Welt")


def test_unknown_type_is_reported():
    with pytest.raises(UnknownPayloadType):
        build_payload("vcard", {})
