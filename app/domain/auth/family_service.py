"""Family self-registration and login."""

from beanie import PydanticObjectId
from loguru import logger
from pydantic import BaseModel

from app.domain.utils.idgen import new_register_no
from app.schemas import FamilyUnit
from app.utils.app_errors import AppError, AppErrorCode, HttpStatusCode

from .passwords import MIN_PASSWORD_LENGTH, hash_password, verify_password
from .tokens import FAMILY_ROLE, TokenClaims, issue_token


class FamilyRegisterParams(BaseModel):
    family_name: str
    head_of_family: str
    phone: str
    password: str
    address: str = ""
    parish_unit: str = "General"


class FamilyAuthResult(BaseModel):
    token: str
    family: dict


def _summary(family: FamilyUnit) -> dict:
    return {
        "id": str(family.id),
        "family_name": family.family_name,
        "head_of_family": family.head_of_family,
        "phone": family.phone,
    }


def _token_for(family: FamilyUnit) -> str:
    return issue_token(TokenClaims(id=str(family.id), phone=family.phone, role=FAMILY_ROLE))


class FamilyAuthService:
    async def register(self, params: FamilyRegisterParams) -> FamilyAuthResult:
        if len(params.password) < MIN_PASSWORD_LENGTH:
            raise AppError(
                errcode=AppErrorCode.E_INVALID_PARAMS,
                errmesg=f"Password must be at least {MIN_PASSWORD_LENGTH} characters",
                status_code=HttpStatusCode.BAD_REQUEST,
            )
        if await FamilyUnit.find_one(FamilyUnit.phone == params.phone):
            raise AppError(
                errcode=AppErrorCode.E_ALREADY_EXISTS,
                errmesg="Family with this phone number already registered.",
                status_code=HttpStatusCode.BAD_REQUEST,
            )

        family = FamilyUnit(
            register_no=new_register_no(),
            family_name=params.family_name,
            head_of_family=params.head_of_family,
            phone=params.phone,
            address=params.address,
            parish_unit=params.parish_unit or "General",
            password_hash=hash_password(params.password),
        )
        await family.insert()
        logger.info(f"Family {family.register_no} registered")
        return FamilyAuthResult(token=_token_for(family), family=_summary(family))

    async def login(self, phone: str, password: str) -> FamilyAuthResult:
        family = await FamilyUnit.find_one(FamilyUnit.phone == phone)
        if not family or not family.active or not verify_password(family.password_hash, password):
            raise AppError(
                errcode=AppErrorCode.E_BAD_CREDENTIALS,
                errmesg="Invalid credentials",
                status_code=HttpStatusCode.UNAUTHORIZED,
            )
        return FamilyAuthResult(token=_token_for(family), family=_summary(family))

    async def get_family(self, family_id: str) -> FamilyUnit:
        family = (
            await FamilyUnit.get(PydanticObjectId(family_id))
            if PydanticObjectId.is_valid(family_id)
            else None
        )
        if not family:
            raise AppError(
                errcode=AppErrorCode.E_NOT_FOUND,
                errmesg="Family not found",
                status_code=HttpStatusCode.NOT_FOUND,
            )
        return family
