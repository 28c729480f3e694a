"""
User API Schemas - Pydantic models for request/response
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, SecretStr, field_validator

from src.service.ticketing.domain.enum.user_type import UserType


# bcrypt only hashes the first 72 bytes and rejects longer input
BCRYPT_MAX_BYTES = 72


class CreateUserRequest(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'name': 'Jane Customer',
                'email': 'jane@example.com',
                'type': 'customer',
                'password': 'P@ssw0rd',
            }
        }
    )

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    type: UserType = UserType.CUSTOMER
    password: SecretStr = Field(
        ...,
        min_length=8,
        max_length=BCRYPT_MAX_BYTES,
        description='Password must be 8-72 characters and at most 72 bytes (bcrypt limit)',
    )

    @field_validator('password')
    @classmethod
    def password_fits_bcrypt(cls, v: SecretStr) -> SecretStr:
        if len(v.get_secret_value().encode('utf-8')) > BCRYPT_MAX_BYTES:
            raise ValueError(f'password must be at most {BCRYPT_MAX_BYTES} bytes')
        return v


class LoginRequest(BaseModel):
    email: EmailStr
    password: SecretStr = Field(..., min_length=1)


class TokenResponse(BaseModel):
    token: str


class CreatedUserResponse(BaseModel):
    id: int
    name: str
    email: str


class UserResponse(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'id': 1,
                'name': 'Jane Customer',
                'email': 'jane@example.com',
                'type': 'customer',
                'created_at': '2025-01-10T10:30:00+00:00',
            }
        }
    )

    id: int
    name: str
    email: str
    type: UserType
    created_at: Optional[datetime] = None
