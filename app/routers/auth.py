from fastapi import APIRouter

from app.core.security import verify_admin_password
from app.schemas.auth import PasswordCheck, PasswordCheckResult

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post("/validate", response_model=PasswordCheckResult)
def validate_password(payload: PasswordCheck):
    return PasswordCheckResult(valid=verify_admin_password(payload.password))


__all__ = ["router"]
