from typing import Optional

from pydantic import BaseModel


class LoginRequest(BaseModel):
    password: Optional[str] = None


class LoginResponse(BaseModel):
    token: str
