from fastapi import APIRouter, Depends, Request

from app.api.v1.dependency import CurrentAdmin, SuperAdmin
from app.api.v1.schemas.auth import (
    AdminLoginIn,
    AdminLoginOut,
    AdminProfileIn,
    AdminRegisterIn,
    AdminUserOut,
)
from app.api.v1.schemas.base import ApiOut, MessageOut
from app.domain.auth.admin_service import AdminCreateParams, AdminProfileParams, AdminService
from app.domain.parish.dashboard import DashboardStats, get_dashboard_stats
from app.services.api_rate_limiter import login_rate_limit

router = APIRouter(prefix="/admin", tags=["Admin"])

# Singleton instance
_admin_service = AdminService()


def get_admin_service() -> AdminService:
    """Get the singleton AdminService instance."""
    return _admin_service


@router.post("/login")
@login_rate_limit()
async def login(
    request: Request,
    params: AdminLoginIn,
    service: AdminService = Depends(get_admin_service),
) -> ApiOut[AdminLoginOut]:
    result = await service.login(params.username, params.password)
    return ApiOut[AdminLoginOut](
        results=AdminLoginOut(token=result.token, user=AdminUserOut(**result.user))
    )


@router.get("/verify")
async def verify(
    admin: CurrentAdmin,
    service: AdminService = Depends(get_admin_service),
) -> ApiOut[AdminUserOut]:
    """Check that the token still belongs to an active admin."""
    account = await service.get_active_admin(admin.id)
    return ApiOut[AdminUserOut](results=AdminUserOut(**account.public_profile()))


@router.put("/profile")
async def update_profile(
    params: AdminProfileIn,
    admin: CurrentAdmin,
    service: AdminService = Depends(get_admin_service),
) -> ApiOut[AdminUserOut]:
    account = await service.update_profile(
        admin.id, AdminProfileParams(**params.model_dump())
    )
    return ApiOut[AdminUserOut](results=AdminUserOut(**account.public_profile()))


@router.post("/register", status_code=201)
async def register(
    params: AdminRegisterIn,
    admin: SuperAdmin,
    service: AdminService = Depends(get_admin_service),
) -> ApiOut[AdminUserOut]:
    account = await service.register(AdminCreateParams(**params.model_dump()))
    return ApiOut[AdminUserOut](results=AdminUserOut(**account.public_profile()))


@router.get("/users")
async def list_users(
    admin: SuperAdmin,
    service: AdminService = Depends(get_admin_service),
) -> ApiOut[list[AdminUserOut]]:
    accounts = await service.list_admins()
    return ApiOut[list[AdminUserOut]](
        results=[AdminUserOut(**a.public_profile()) for a in accounts]
    )


@router.delete("/users/{admin_id}")
async def delete_user(
    admin_id: str,
    admin: SuperAdmin,
    service: AdminService = Depends(get_admin_service),
) -> ApiOut[MessageOut]:
    await service.delete_admin(admin_id)
    return ApiOut[MessageOut](results=MessageOut(message="Admin deleted successfully"))


@router.get("/dashboard")
async def dashboard(admin: CurrentAdmin) -> ApiOut[DashboardStats]:
    return ApiOut[DashboardStats](results=await get_dashboard_stats())
