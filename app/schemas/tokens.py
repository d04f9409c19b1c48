# app/schemas/tokens.py
from pydantic import BaseModel

class LoginResponse(BaseModel):
    user_id: int
    full_name: str
    email: str
    role: str
    token: str
    token_type: str = "bearer"

class TokenClaims(BaseModel):
    """Identity recovered from a verified bearer token"""
    id: int
    email: str
    name: str
    role: str
