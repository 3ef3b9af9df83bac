"""
End-to-end API tests through FastAPI's TestClient (in-memory SQLite).

Run: pytest tests/integration/test_api.py -v
"""

import pytest
from sqlalchemy import delete
from sqlmodel import Session

from models.account import Account, AccountProfile

SIGN_UP = {"email": "a@b.com", "password": "secret1", "passwordConfirm": "secret1", "name": "A"}


def sign_up(client, **overrides):
    return client.post("/auth/sign-up", json={**SIGN_UP, **overrides})


def sign_in(client, email="a@b.com", password="secret1"):
    return client.post("/auth/sign-in", json={"email": email, "password": password})


def auth_headers(client, email="a@b.com", password="secret1"):
    token = sign_in(client, email, password).json()["token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def headers(client):
    sign_up(client)
    return auth_headers(client)


@pytest.fixture
def other_headers(client):
    sign_up(client, email="c@d.com", name="C")
    return auth_headers(client, email="c@d.com")


class TestHealth:

    def test_ping(self, client):
        assert client.get("/ping").json() == {"message": "pong"}

    def test_health(self, client):
        assert client.get("/health").json()["status"] == "healthy"


class TestAuthFlow:

    def test_concrete_scenario(self, client):
        response = sign_up(client)
        assert response.status_code == 201
        body = response.json()
        assert body["accountInfo"]["role"] == "APPLICANT"
        assert body["accountInfo"]["email"] == "a@b.com"
        assert "password" not in body["accountInfo"]
        assert "passwordHash" not in body["accountInfo"]

        duplicate = sign_up(client)
        assert duplicate.status_code == 409
        assert set(duplicate.json()) == {"message"}

        wrong = sign_in(client, password="wrong")
        assert wrong.status_code == 401

        ok = sign_in(client)
        assert ok.status_code == 200
        token = ok.json()["token"]
        headers = {"Authorization": f"Bearer {token}"}

        created = client.post("/resumes", json={"title": "T", "content": "0123456789"}, headers=headers)
        assert created.status_code == 201
        assert created.json()["resume"]["status"] == "APPLY"

        short = client.post("/resumes", json={"title": "T", "content": "123456789"}, headers=headers)
        assert short.status_code == 400

    def test_unknown_email_and_wrong_password_identical(self, client):
        sign_up(client)
        unknown = sign_in(client, email="nobody@b.com")
        wrong = sign_in(client, password="wrong")
        assert unknown.status_code == wrong.status_code == 401
        assert unknown.json() == wrong.json()

    def test_missing_fields(self, client):
        response = client.post("/auth/sign-up", json={"email": "a@b.com"})
        assert response.status_code == 400
        assert "message" in response.json()

    def test_password_over_72_bytes_rejected(self, client):
        response = sign_up(client, password="x" * 80, passwordConfirm="x" * 80)
        assert response.status_code == 400
        assert response.json() == {"message": "Password must be at most 72 bytes."}

    def test_sign_in_missing_email(self, client):
        response = client.post("/auth/sign-in", json={"password": "secret1"})
        assert response.status_code == 400

    def test_who_am_i(self, client, headers):
        response = client.get("/users/me", headers=headers)
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["email"] == "a@b.com"
        assert data["name"] == "A"
        assert data["role"] == "APPLICANT"
        assert "createdAt" in data and "updatedAt" in data


class TestGuard:

    def test_missing_token(self, client):
        response = client.get("/resumes")
        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_garbage_token(self, client):
        response = client.get("/resumes", headers={"Authorization": "Bearer garbage"})
        assert response.status_code == 401

    def test_non_bearer_scheme(self, client):
        response = client.get("/users/me", headers={"Authorization": "Basic abc"})
        assert response.status_code == 401

    def test_deleted_account_token_stops_working(self, client, headers, engine):
        assert client.get("/users/me", headers=headers).status_code == 200

        with Session(engine) as db:
            db.exec(delete(AccountProfile))
            db.exec(delete(Account))
            db.commit()

        assert client.get("/users/me", headers=headers).status_code == 401
        assert client.get("/resumes", headers=headers).status_code == 401

    def test_failures_are_generic(self, client):
        missing = client.get("/resumes").json()
        garbage = client.get("/resumes", headers={"Authorization": "Bearer x.y.z"}).json()
        assert missing == garbage


class TestResumes:

    def _create(self, client, headers, title="T", content="0123456789"):
        return client.post("/resumes", json={"title": title, "content": content}, headers=headers).json()["resume"]

    def test_crud(self, client, headers):
        resume = self._create(client, headers)
        resume_id = resume["resumeId"]
        assert resume["createdAt"] == resume["updatedAt"]

        detail = client.get(f"/resumes/{resume_id}", headers=headers)
        assert detail.status_code == 200
        assert detail.json()["data"]["name"] == "A"

        updated = client.patch(f"/resumes/{resume_id}", json={"title": "New"}, headers=headers)
        assert updated.status_code == 200
        assert updated.json()["resume"]["title"] == "New"
        assert updated.json()["resume"]["content"] == "0123456789"

        deleted = client.delete(f"/resumes/{resume_id}", headers=headers)
        assert deleted.status_code == 200
        assert deleted.json()["resumeId"] == resume_id

        assert client.get(f"/resumes/{resume_id}", headers=headers).status_code == 404

    def test_list_sorting(self, client, headers):
        ids = [self._create(client, headers, title=f"r{i}")["resumeId"] for i in range(3)]

        default = [r["resumeId"] for r in client.get("/resumes", headers=headers).json()["data"]]
        ascending = [r["resumeId"] for r in client.get("/resumes?sort=ASC", headers=headers).json()["data"]]
        unknown = [r["resumeId"] for r in client.get("/resumes?sort=sideways", headers=headers).json()["data"]]

        assert default == list(reversed(ids))
        assert ascending == ids
        assert unknown == default

    def test_empty_list(self, client, headers):
        response = client.get("/resumes", headers=headers)
        assert response.status_code == 200
        assert response.json()["data"] == []

    def test_nothing_to_update(self, client, headers):
        resume_id = self._create(client, headers)["resumeId"]
        response = client.patch(f"/resumes/{resume_id}", json={}, headers=headers)
        assert response.status_code == 400

    @pytest.mark.parametrize("method", ["get", "patch", "delete"])
    def test_foreign_resume_is_not_found(self, client, headers, other_headers, method):
        resume_id = self._create(client, headers)["resumeId"]
        kwargs = {"json": {"title": "x"}} if method == "patch" else {}

        foreign = client.request(method.upper(), f"/resumes/{resume_id}", headers=other_headers, **kwargs)
        missing = client.request(method.upper(), "/resumes/9999", headers=other_headers, **kwargs)

        assert foreign.status_code == missing.status_code == 404
        assert foreign.json() == missing.json()
        assert client.get(f"/resumes/{resume_id}", headers=headers).status_code == 200

    def test_list_excludes_other_accounts(self, client, headers, other_headers):
        self._create(client, headers)
        assert client.get("/resumes", headers=other_headers).json()["data"] == []

    @pytest.mark.parametrize("method", ["get", "patch", "delete"])
    def test_out_of_range_id_is_not_found(self, client, headers, method):
        kwargs = {"json": {"title": "x"}} if method == "patch" else {}

        oversized = client.request(method.upper(), "/resumes/99999999999999999999", headers=headers, **kwargs)
        missing = client.request(method.upper(), "/resumes/9999", headers=headers, **kwargs)

        assert oversized.status_code == missing.status_code == 404
        assert oversized.json() == missing.json()
