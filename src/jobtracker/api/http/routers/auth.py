"""Account endpoints backed by the external identity provider."""

from fastapi import APIRouter, Depends, HTTPException, Response, status

from src.jobtracker.api.http.deps import get_auth_service, get_bearer_token
from src.jobtracker.api.http.schemas import LoginRequest, RegisterRequest
from src.jobtracker.core.errors import ProviderError
from src.jobtracker.core.services import AuthResult, AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(
    body: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> dict[str, str]:
    await auth_service.register(body.email, body.password, body.full_name)
    return {"message": "Registration successful"}


@router.post("/login", response_model=AuthResult)
async def login(
    body: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> AuthResult:
    try:
        return await auth_service.login(body.email, body.password)
    except ProviderError as exc:
        raise HTTPException(status_code=401, detail="Invalid email or password") from exc


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    token: str = Depends(get_bearer_token),
    auth_service: AuthService = Depends(get_auth_service),
) -> Response:
    await auth_service.logout(token)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
