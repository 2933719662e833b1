from pydantic import BaseModel, Field

from app.schemas import AdminPermission, AdminRole


class AdminLoginIn(BaseModel):
    username: str = ""
    password: str = ""


class AdminUserOut(BaseModel):
    id: str
    username: str
    email: str
    role: AdminRole
    permissions: list[AdminPermission] = []


class AdminLoginOut(BaseModel):
    token: str
    user: AdminUserOut


class AdminRegisterIn(BaseModel):
    username: str = Field(min_length=3)
    email: str
    password: str = Field(min_length=6)
    role: AdminRole = AdminRole.ADMIN
    permissions: list[AdminPermission] = []


class AdminProfileIn(BaseModel):
    username: str | None = None
    email: str | None = None
    current_password: str | None = None
    new_password: str | None = Field(default=None, min_length=6)


class FamilyRegisterIn(BaseModel):
    family_name: str
    head_of_family: str
    phone: str
    password: str
    address: str = ""
    parish_unit: str = "General"


class FamilyLoginIn(BaseModel):
    phone: str
    password: str


class FamilySummaryOut(BaseModel):
    id: str
    family_name: str
    head_of_family: str
    phone: str


class FamilyAuthOut(BaseModel):
    token: str
    family: FamilySummaryOut
