from typing import Optional

from pydantic import BaseModel


class PasswordCheck(BaseModel):
    password: Optional[str] = None


class PasswordCheckResult(BaseModel):
    valid: bool
