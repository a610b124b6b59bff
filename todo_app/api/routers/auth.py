"""
Auth Router
Implements: Single Responsibility Principle (SRP)

This router handles account and session endpoints:
- Registration
- Login / logout
- Caller identity echo
"""
from fastapi import APIRouter, Depends
from pydantic import BaseModel
from ...core.services.auth_service import AuthService
from ...core.domain.identity import Identity
from ...core.exceptions import TodoAppError
from ..dependencies import get_auth_service, get_caller_identity
from ..errors import to_http_exception

import logging
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


# ========== Schemas ==========
class RegisterRequest(BaseModel):
    """Schema for registering a new account"""
    username: str
    password: str


class LoginRequest(BaseModel):
    """Schema for logging in"""
    username: str
    password: str


class OkResponse(BaseModel):
    ok: bool = True


class CallerResponse(BaseModel):
    identity: str


# ========== Endpoints ==========
@router.post("/register", response_model=OkResponse)
async def register(
    data: RegisterRequest,
    service: AuthService = Depends(get_auth_service)
):
    """
    Register a new account

    Raises:
        HTTPException 409: If the username already exists
    """
    try:
        await service.register(data.username, data.password)
    except TodoAppError as e:
        raise to_http_exception(e)
    return OkResponse()


@router.post("/login", response_model=OkResponse)
async def login(
    data: LoginRequest,
    identity: Identity = Depends(get_caller_identity),
    service: AuthService = Depends(get_auth_service)
):
    """
    Log in and bind the calling identity's session

    Raises:
        HTTPException 401: Unknown username or wrong password
    """
    try:
        await service.login(identity, data.username, data.password)
    except TodoAppError as e:
        logger.warning(f"[AUTH] Failed login for {data.username!r} from {identity}")
        raise to_http_exception(e)
    return OkResponse()


@router.post("/logout", response_model=OkResponse)
async def logout(
    identity: Identity = Depends(get_caller_identity),
    service: AuthService = Depends(get_auth_service)
):
    """
    End the calling identity's session

    Raises:
        HTTPException 401: If not logged in
    """
    try:
        await service.logout(identity)
    except TodoAppError as e:
        raise to_http_exception(e)
    return OkResponse()


@router.get("/caller", response_model=CallerResponse)
async def get_caller(
    identity: Identity = Depends(get_caller_identity),
    service: AuthService = Depends(get_auth_service)
):
    """Return the calling identity"""
    caller = await service.get_caller(identity)
    return CallerResponse(identity=str(caller))
