"""
Pydantic schemas for user accounts and login.
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict

from models.enums import UserRole


class UserCreate(BaseModel):
     """Request body for POST /users. The password is hashed before it is stored."""
     email: str = Field(..., min_length=3, max_length=255)
     password: str = Field(..., min_length=1, max_length=72)
     role: UserRole

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "email": "owner@example.com",
                    "password": "s3cret",
                    "role": "owner",
               }
          }
     )


class UserResponse(BaseModel):
     """User as returned by the API; the password hash is never included."""
     id: int
     email: str
     role: UserRole
     created_at: Optional[datetime] = None

     model_config = ConfigDict(from_attributes=True)


class LoginRequest(BaseModel):
     email: str
     password: str


class TokenResponse(BaseModel):
     token: str
