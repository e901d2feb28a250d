from pydantic import BaseModel, EmailStr


# ─── Request Schemas ──────────────────────────────────────────────────────────
class LoginRequest(BaseModel):
    email:    EmailStr
    password: str


# ─── Response Schemas ─────────────────────────────────────────────────────────
class UserOut(BaseModel):
    id:    int
    email: str
    name:  str
    role:  str
    model_config = {"from_attributes": True}
