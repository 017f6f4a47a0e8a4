from app.security import get_password_hash, verify_password, sign_session_id, unsign_session_id


def test_password_hash_round_trip():
    hashed = get_password_hash("pw123")
    assert hashed != "pw123"
    assert verify_password("pw123", hashed)
    assert not verify_password("pw124", hashed)


def test_same_password_hashes_differently():
    assert get_password_hash("pw123") != get_password_hash("pw123")


def test_signed_session_id():
    cookie = sign_session_id("abc")
    assert cookie != "abc"
    assert unsign_session_id(cookie) == "abc"


def test_tampered_or_expired_cookie_is_rejected():
    cookie = sign_session_id("abc")
    header, _, sig = cookie.split(".")
    other_payload = sign_session_id("xyz").split(".")[1]
    assert unsign_session_id(".".join([header, other_payload, sig])) is None
    assert unsign_session_id(sign_session_id("abc", max_age=-10)) is None
    assert unsign_session_id("") is None
    assert unsign_session_id(None) is None
