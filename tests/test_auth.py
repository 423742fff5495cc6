import pytest

from services.security import (
     JWTError,
     create_access_token,
     decode_access_token,
     hash_password,
     verify_password,
)


class TestLogin:

     def test_valid_credentials_return_token(self, client, settings):
          r = client.post("/login", json={"email": "owner@example.com", "password": "password123"})
          assert r.status_code == 200
          claims = decode_access_token(r.json()["token"], settings.jwt_secret)
          assert claims["id"] == 1
          assert claims["role"] == "owner"
          assert "exp" in claims

     def test_wrong_password(self, client):
          r = client.post("/login", json={"email": "owner@example.com", "password": "wrong"})
          assert r.status_code == 401
          assert r.json() == {"error": "Invalid credentials"}

     def test_unknown_email_gets_same_answer(self, client):
          r = client.post("/login", json={"email": "nobody@example.com", "password": "password123"})
          assert r.status_code == 401
          assert r.json() == {"error": "Invalid credentials"}

     def test_created_user_can_log_in(self, client):
          client.post("/users", json={"email": "fresh@example.com", "password": "letmein", "role": "tenant"})
          r = client.post("/login", json={"email": "fresh@example.com", "password": "letmein"})
          assert r.status_code == 200


class TestCurrentUser:

     def test_me_with_token(self, client, auth_headers):
          r = client.get("/me", headers=auth_headers)
          assert r.status_code == 200
          assert r.json()["email"] == "owner@example.com"
          assert "password" not in r.json()

     def test_me_without_token(self, client):
          r = client.get("/me")
          assert r.status_code == 401
          assert r.json() == {"error": "Missing token"}

     def test_me_with_bad_token(self, client):
          r = client.get("/me", headers={"Authorization": "Bearer not-a-token"})
          assert r.status_code == 403

     def test_token_signed_with_other_secret(self, client):
          token = create_access_token({"id": 1, "role": "owner"}, "some-other-secret")
          r = client.get("/me", headers={"Authorization": f"Bearer {token}"})
          assert r.status_code == 403

     def test_record_endpoints_need_no_token(self, client):
          assert client.get("/properties").status_code == 200
          assert client.get("/reports").status_code == 200


class TestSecurityHelpers:

     def test_hash_and_verify(self):
          hashed = hash_password("s3cret")
          assert hashed != "s3cret"
          assert verify_password("s3cret", hashed)
          assert not verify_password("other", hashed)

     def test_verify_against_plain_text_value(self):
          assert not verify_password("s3cret", "s3cret")

     def test_expired_token_rejected(self):
          token = create_access_token({"id": 1}, "k", expires_minutes=-1)
          with pytest.raises(JWTError, match="expired"):
               decode_access_token(token, "k")
