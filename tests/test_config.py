import pytest

from folio.config import Settings


def test_missing_jwt_secret_is_fatal(monkeypatch):
    monkeypatch.delenv("JWT_SECRET", raising=False)
    with pytest.raises(ValueError, match="JWT_SECRET"):
        Settings()


def test_missing_database_url_is_fatal(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    with pytest.raises(ValueError, match="DATABASE_URL"):
        Settings()


def test_invalid_bcrypt_rounds_falls_back(monkeypatch):
    monkeypatch.setenv("BCRYPT_ROUNDS", "many")
    assert Settings().BCRYPT_ROUNDS == 10


def test_token_lifetime_is_fixed():
    assert Settings.ACCESS_TOKEN_EXPIRE_DAYS == 7
