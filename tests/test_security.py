from portfolio_site.app.core.security import (
    create_access_token,
    decode_access_token,
    verify_admin_credentials,
)


def test_token_round_trip():
    token = create_access_token({"sub": "admin"})
    payload = decode_access_token(token)
    assert payload["sub"] == "admin"
    assert "exp" in payload


def test_tampered_token_is_rejected():
    header, payload, signature = create_access_token({"sub": "admin"}).split(".")
    forged = create_access_token({"sub": "someone"}).split(".")[1]
    assert decode_access_token(f"{header}.{forged}.{signature}") is None
    assert decode_access_token("garbage") is None


def test_expired_token_is_rejected():
    assert decode_access_token(create_access_token({"sub": "admin"}, expires_delta=-60)) is None


def test_verify_admin_credentials():
    assert verify_admin_credentials("admin", "s3cret")
    assert not verify_admin_credentials("admin", "nope")
    assert not verify_admin_credentials("root", "s3cret")
