"""
Authentication Endpoints
/api/v1/auth/* routes
"""
from fastapi import APIRouter, Depends

from presentation.api.v1.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from presentation.api.v1.container import get_auth_service
from application.services.auth.interfaces import IAuthService


router = APIRouter()


@router.post("/register", response_model=AuthResponse)
async def register(
    request: RegisterRequest,
    auth_service: IAuthService = Depends(get_auth_service)
):
    """Create an account and return it with a token"""
    result = await auth_service.register(request.email, request.name, request.password)
    return AuthResponse.from_result(result)


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    auth_service: IAuthService = Depends(get_auth_service)
):
    result = await auth_service.login(request.email, request.password)
    return AuthResponse.from_result(result)
