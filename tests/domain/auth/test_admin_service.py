"""Tests for AdminService against MongoDB."""

import pytest

from app.domain.auth.admin_service import AdminCreateParams, AdminProfileParams, AdminService
from app.domain.auth.passwords import verify_password
from app.domain.auth.tokens import decode_token
from app.schemas import Admin, AdminRole
from app.utils.app_errors import AppError, AppErrorCode


async def create_admin(service: AdminService, username: str = "office") -> Admin:
    return await service.register(
        AdminCreateParams(username=username, email=f"{username}@parish.org", password="secret123")
    )


@pytest.mark.usefixtures("clear_collections")
class TestAdminService:
    async def test_register_and_login(self, beanie_db):
        service = AdminService()
        admin = await create_admin(service)

        result = await service.login("office", "secret123")

        claims = decode_token(result.token)
        assert claims is not None
        assert claims.id == str(admin.id)
        assert claims.role == AdminRole.ADMIN.value
        assert result.user["username"] == "office"
        assert "password_hash" not in result.user

        saved = await Admin.get(admin.id)
        assert saved is not None
        assert saved.last_login is not None

    async def test_login_wrong_password(self, beanie_db):
        service = AdminService()
        await create_admin(service)

        with pytest.raises(AppError) as exc_info:
            await service.login("office", "wrong-password")

        assert exc_info.value.errcode == AppErrorCode.E_BAD_CREDENTIALS.value
        assert exc_info.value.status_code == 401

    async def test_login_missing_fields(self, beanie_db):
        with pytest.raises(AppError) as exc_info:
            await AdminService().login("", "")

        assert exc_info.value.status_code == 400

    async def test_duplicate_username_rejected(self, beanie_db):
        service = AdminService()
        await create_admin(service)

        with pytest.raises(AppError) as exc_info:
            await create_admin(service)

        assert exc_info.value.errmesg == "Username or email already exists"

    async def test_update_password_requires_current(self, beanie_db):
        service = AdminService()
        admin = await create_admin(service)

        with pytest.raises(AppError):
            await service.update_profile(
                str(admin.id),
                AdminProfileParams(current_password="nope", new_password="newsecret"),
            )

        updated = await service.update_profile(
            str(admin.id),
            AdminProfileParams(current_password="secret123", new_password="newsecret"),
        )
        assert verify_password(updated.password_hash, "newsecret")

    async def test_delete_admin(self, beanie_db):
        service = AdminService()
        admin = await create_admin(service)

        await service.delete_admin(str(admin.id))

        assert await service.list_admins() == []
        with pytest.raises(AppError) as exc_info:
            await service.delete_admin(str(admin.id))
        assert exc_info.value.errmesg == "Admin not found"
