"""Unit tests for the family self-service and family directory routers."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.api.v1.errors import app_error_handler
from app.api.v1.routers import family_auth, family_units
from app.domain.auth.family_service import FamilyAuthResult, FamilyAuthService
from app.domain.auth.tokens import FAMILY_ROLE, TokenClaims, issue_token
from app.services.api_rate_limiter import limiter
from app.utils.app_errors import AppError

FAMILY_ID = "665f1c2e9b1e8a00abcdef12"
SUMMARY = {
    "id": FAMILY_ID,
    "family_name": "Kollamparambil",
    "head_of_family": "Thomas",
    "phone": "9876543210",
}


def bearer(role: str) -> dict[str, str]:
    token = issue_token(TokenClaims(id=FAMILY_ID, role=role, phone="9876543210"))
    return {"Authorization": f"Bearer {token}"}


def family_record(**overrides) -> MagicMock:
    data = {**SUMMARY, "members": [{"member_id": "m1", "name": "Anna", "mobile": "9123456789"}]}
    data.update(overrides)
    family = MagicMock()
    family.phone = data["phone"]
    family.to_out.return_value = data
    return family


@pytest.fixture
def mock_family_service() -> AsyncMock:
    return AsyncMock(spec=FamilyAuthService)


@pytest.fixture
def client(mock_family_service: AsyncMock) -> TestClient:
    app = FastAPI()
    app.state.limiter = limiter
    app.dependency_overrides[family_auth.get_family_service] = lambda: mock_family_service
    app.add_exception_handler(AppError, app_error_handler)  # type: ignore[arg-type]
    app.include_router(family_auth.router)
    app.include_router(family_units.router)
    return TestClient(app)


class TestFamilyAuth:
    def test_register(self, client: TestClient, mock_family_service: AsyncMock):
        mock_family_service.register.return_value = FamilyAuthResult(token="jwt", family=SUMMARY)

        response = client.post(
            "/family-auth/register",
            json={
                "family_name": "Kollamparambil",
                "head_of_family": "Thomas",
                "phone": "9876543210",
                "password": "pw123456",
            },
        )

        assert response.status_code == 201
        assert response.json()["results"]["family"]["family_name"] == "Kollamparambil"
        params = mock_family_service.register.await_args.args[0]
        assert params.parish_unit == "General"

    def test_login(self, client: TestClient, mock_family_service: AsyncMock):
        mock_family_service.login.return_value = FamilyAuthResult(token="jwt", family=SUMMARY)

        response = client.post(
            "/family-auth/login", json={"phone": "9876543210", "password": "pw123456"}
        )

        assert response.status_code == 200
        assert response.json()["results"]["token"] == "jwt"
        mock_family_service.login.assert_awaited_once_with("9876543210", "pw123456")

    def test_me_requires_family_token(self, client: TestClient, mock_family_service: AsyncMock):
        assert client.get("/family-auth/me").status_code == 401
        assert client.get("/family-auth/me", headers=bearer("admin")).status_code == 403
        mock_family_service.get_family.assert_not_awaited()

    def test_me_returns_own_record(self, client: TestClient, mock_family_service: AsyncMock):
        mock_family_service.get_family.return_value = family_record()

        response = client.get("/family-auth/me", headers=bearer(FAMILY_ROLE))

        assert response.status_code == 200
        assert response.json()["results"]["phone"] == "9876543210"
        mock_family_service.get_family.assert_awaited_once_with(FAMILY_ID)

    def test_remove_member(
        self,
        client: TestClient,
        mock_family_service: AsyncMock,
        monkeypatch: pytest.MonkeyPatch,
    ):
        unit = family_record()
        mock_family_service.get_family.return_value = unit
        remove_member = AsyncMock(return_value=family_record(members=[]))
        monkeypatch.setattr(family_auth.family_domain, "remove_member", remove_member)

        response = client.delete("/family-auth/me/members/m1", headers=bearer(FAMILY_ROLE))

        assert response.status_code == 200
        assert response.json()["results"]["members"] == []
        remove_member.assert_awaited_once_with(unit, "m1")


class TestFamilyDirectory:
    def test_public_list_is_masked(self, client: TestClient, monkeypatch: pytest.MonkeyPatch):
        list_families = AsyncMock(return_value=[family_record()])
        monkeypatch.setattr(family_units.family_domain, "list_families", list_families)

        response = client.get("/family-units", params={"parish_unit": "St. Joseph"})

        assert response.status_code == 200
        family = response.json()["results"][0]
        assert family["phone"] == "987****210"
        assert family["members"][0]["mobile"] == "912****789"
        list_families.assert_awaited_once_with("St. Joseph")

    def test_stats_requires_admin(self, client: TestClient, monkeypatch: pytest.MonkeyPatch):
        family_stats = AsyncMock(return_value={"total_families": 3})
        monkeypatch.setattr(family_units.family_domain, "family_stats", family_stats)

        assert client.get("/family-units/stats", headers=bearer(FAMILY_ROLE)).status_code == 403

        response = client.get("/family-units/stats", headers=bearer("admin"))
        assert response.status_code == 200
        assert response.json()["results"]["total_families"] == 3
