from fastapi.testclient import TestClient
from jose.exceptions import ExpiredSignatureError
from liftlog.main import app
from liftlog.db import SessionLocal
from liftlog.repositories.user_repo import IdentityRepository, UserRepository
from liftlog.security import create_access_token, decode_token, hash_password
import uuid

client = TestClient(app)
PWD = "StrongPassw0rd!"
def unique(): return f"{uuid.uuid4().hex[:10]}@ex.com"

def login_token(email):
    client.post("/auth/register", json={"email": email, "name": "Y", "password": PWD})
    return client.post("/auth/login", json={"email": email, "password": PWD}).json()["access_token"]

def test_token_expired():
    email = unique()
    login_token(email)
    with SessionLocal() as db:
        identity_id = IdentityRepository(db).get_by_email(email).id

    # craft an already-expired token for the same identity
    expired = create_access_token(str(identity_id), expires_minutes=-1)

    r = client.get("/auth/me", headers={"Authorization": f"Bearer {expired}"})
    assert r.status_code == 401
    assert r.json()["detail"] == "Token expired"

def test_expired_token_rejected_on_workouts(monkeypatch):
    token = login_token(unique())

    def fake_decode(_): raise ExpiredSignatureError()

    # deps.auth imports decode_token at import-time
    import liftlog.deps.auth as deps_auth
    monkeypatch.setattr(deps_auth, "decode_token", fake_decode)

    r = client.get("/workouts", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 401, r.text
    assert r.json()["detail"] == "Token expired"

def test_garbage_token_rejected():
    r = client.get("/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert r.status_code == 401
    assert r.json()["detail"] == "Not authenticated"

def test_token_for_unknown_identity_rejected():
    r = client.get("/auth/me", headers={"Authorization": f"Bearer {create_access_token('99999999')}"})
    assert r.status_code == 401

def test_token_carries_only_standard_claims():
    claims = decode_token(create_access_token("42"))
    assert set(claims) == {"sub", "iat", "exp"}
    assert claims["sub"] == "42"

def test_requires_auth():
    assert client.get("/workouts").status_code == 401
    assert client.get("/exercises").status_code == 401
    assert client.get("/progress").status_code == 401

def test_profile_created_lazily_on_first_login():
    email = unique()
    # identity exists at the auth provider, but no profile row yet
    with SessionLocal() as db:
        identity = IdentityRepository(db).create(email=email, password_hash=hash_password(PWD))
        assert UserRepository(db).get_by_identity(identity.id) is None

    r = client.post("/auth/login", json={"email": email, "password": PWD})
    assert r.status_code == 200
    me = client.get("/auth/me", headers={"Authorization": f"Bearer {r.json()['access_token']}"}).json()
    assert me["email"] == email
    assert me["name"] == email.split("@")[0]
