"""Admin account operations."""

from beanie import PydanticObjectId
from beanie.operators import Or
from loguru import logger
from pydantic import BaseModel

from app.domain.utils.clock import utc_now
from app.schemas import Admin, AdminPermission, AdminRole
from app.utils.app_errors import AppError, AppErrorCode, HttpStatusCode

from .passwords import hash_password, verify_password
from .tokens import TokenClaims, issue_token


class AdminLoginResult(BaseModel):
    token: str
    user: dict


class AdminCreateParams(BaseModel):
    username: str
    email: str
    password: str
    role: AdminRole = AdminRole.ADMIN
    permissions: list[AdminPermission] = []


class AdminProfileParams(BaseModel):
    username: str | None = None
    email: str | None = None
    current_password: str | None = None
    new_password: str | None = None


def _invalid_credentials() -> AppError:
    return AppError(
        errcode=AppErrorCode.E_BAD_CREDENTIALS,
        errmesg="Invalid credentials",
        status_code=HttpStatusCode.UNAUTHORIZED,
    )


def _not_found() -> AppError:
    return AppError(
        errcode=AppErrorCode.E_NOT_FOUND,
        errmesg="Admin not found",
        status_code=HttpStatusCode.NOT_FOUND,
    )


async def _find_admin(admin_id: str) -> Admin | None:
    if not PydanticObjectId.is_valid(admin_id):
        return None
    return await Admin.get(PydanticObjectId(admin_id))


class AdminService:
    async def login(self, username: str, password: str) -> AdminLoginResult:
        if not username or not password:
            raise AppError(
                errcode=AppErrorCode.E_INVALID_PARAMS,
                errmesg="Username and password are required",
                status_code=HttpStatusCode.BAD_REQUEST,
            )

        admin = await Admin.find_one(Admin.username == username, Admin.is_active == True)  # noqa: E712
        if not admin or not verify_password(admin.password_hash, password):
            logger.info(f"Failed admin login for '{username}'")
            raise _invalid_credentials()

        admin.last_login = utc_now()
        await admin.save()

        token = issue_token(
            TokenClaims(
                id=str(admin.id),
                username=admin.username,
                email=admin.email,
                role=admin.role.value,
            )
        )
        return AdminLoginResult(token=token, user=admin.public_profile())

    async def get_active_admin(self, admin_id: str) -> Admin:
        admin = await _find_admin(admin_id)
        if not admin or not admin.is_active:
            raise AppError(
                errcode=AppErrorCode.E_BAD_TOKEN,
                errmesg="Invalid token",
                status_code=HttpStatusCode.UNAUTHORIZED,
            )
        return admin

    async def register(self, params: AdminCreateParams) -> Admin:
        existing = await Admin.find_one(
            Or(Admin.username == params.username, Admin.email == params.email)
        )
        if existing:
            raise AppError(
                errcode=AppErrorCode.E_ALREADY_EXISTS,
                errmesg="Username or email already exists",
                status_code=HttpStatusCode.BAD_REQUEST,
            )

        admin = Admin(
            username=params.username,
            email=params.email,
            password_hash=hash_password(params.password),
            role=params.role,
            permissions=params.permissions,
        )
        await admin.insert()
        logger.info(f"Admin {admin.username} created with role {admin.role}")
        return admin

    async def update_profile(self, admin_id: str, params: AdminProfileParams) -> Admin:
        admin = await self.get_active_admin(admin_id)

        if params.username and params.username != admin.username:
            if await Admin.find_one(Admin.username == params.username):
                raise AppError(
                    errcode=AppErrorCode.E_ALREADY_EXISTS,
                    errmesg="Username already exists",
                    status_code=HttpStatusCode.BAD_REQUEST,
                )
            admin.username = params.username

        if params.email:
            admin.email = params.email

        if params.current_password and params.new_password:
            if not verify_password(admin.password_hash, params.current_password):
                raise AppError(
                    errcode=AppErrorCode.E_BAD_CREDENTIALS,
                    errmesg="Current password is incorrect",
                    status_code=HttpStatusCode.BAD_REQUEST,
                )
            admin.password_hash = hash_password(params.new_password)

        admin.updated_at = utc_now()
        await admin.save()
        return admin

    async def list_admins(self) -> list[Admin]:
        return await Admin.find_all().sort(-Admin.created_at).to_list()  # type: ignore[operator]

    async def delete_admin(self, admin_id: str) -> None:
        admin = await _find_admin(admin_id)
        if not admin:
            raise _not_found()
        await admin.delete()
        logger.info(f"Admin {admin.username} deleted")
