import pytest


@pytest.mark.asyncio
async def test_list_types(client):
    response = await client.get("/api/v1/types")
    assert response.status_code == 200
    assert response.json()["items"] == ["otp", "wifi", "email", "phone", "sms", "url", "text"]


@pytest.mark.asyncio
async def test_get_fields(client):
    response = await client.get("/api/v1/types/OTP/fields")
    assert response.status_code == 200

    body = response.json()
    assert body["type"] == "otp"
    names = [f["name"] for f in body["fields"]]
    assert names[:3] == ["account_name", "issuer", "secret"]


@pytest.mark.asyncio
async def test_get_fields_unknown_type(client):
    response = await client.get("/api/v1/types/vcard/fields")
    assert response.status_code == 404
    assert response.json()["detail"] == "Unsupported qr type: vcard"


@pytest.mark.asyncio
async def test_encode_wifi(client):
    response = await client.post(
        "/api/v1/types/wifi/encode",
        json={"data": {"ssid": "foo;bar\\baz", "password": "abc", "security": "WPA"}},
    )
    assert response.status_code == 200
    assert response.json() == {"type": "wifi", "payload": 'WIFI:S:\\"foo\\;bar\\baz\\";T:WPA;P:abc;;'}


@pytest.mark.asyncio
async def test_encode_validation_errors(client, monkeypatch):
    monkeypatch.delenv("DEFAULT_OTP_ISSUER", raising=False)
    response = await client.post(
        "/api/v1/types/otp/encode",
        json={"data": {"account_name": "alice", "period": 0}},
    )
    assert response.status_code == 422

    body = response.json()
    assert body["errors"] == ["Issuer is required.", "Secret is required.", "Period must be greater than 0."]
    assert body["detail"] == "Issuer is required. Secret is required. Period must be greater than 0."


@pytest.mark.asyncio
async def test_encode_binding_error(client):
    response = await client.post(
        "/api/v1/types/otp/encode",
        json={"data": {"algorithm": "MD5"}},
    )
    assert response.status_code == 400
    assert "MD5" in response.json()["detail"]


@pytest.mark.asyncio
async def test_validate_endpoint(client):
    response = await client.post("/api/v1/types/wifi/validate", json={"data": {}})
    assert response.status_code == 200
    assert response.json() == {"valid": False, "errors": ["SSID is required."]}

    response = await client.post("/api/v1/types/wifi/validate", json={"data": {"ssid": "Net"}})
    assert response.json() == {"valid": True, "errors": []}


@pytest.mark.asyncio
async def test_parse_endpoint(client):
    response = await client.post(
        "/api/v1/parse",
        json={"payload": "otpauth://totp/ACME:john%20doe?secret=MFRGG===&issuer=ACME&digits=8"},
    )
    assert response.status_code == 200

    body = response.json()
    assert body["type"] == "otp"
    assert body["data"]["account_name"] == "john doe"
    assert body["data"]["secret"] == "MFRGG==="
    assert body["data"]["digits"] == 8
    assert body["data"]["algorithm"] == "SHA1"


@pytest.mark.asyncio
async def test_parse_endpoint_malformed(client):
    response = await client.post("/api/v1/parse", json={"payload": "mailto-broken", "type": "email"})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"
