"""
JWT issuance and verification for bearer-token authentication

Tokens are stateless: the claims carry everything needed to rebuild the
requesting UserEntity, so authenticated requests do not hit the database.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

from src.platform.config.core_setting import Settings
from src.platform.exception.exceptions import AuthenticationError
from src.service.ticketing.domain.entity.user_entity import UserEntity
from src.service.ticketing.domain.enum.user_type import UserType


REQUIRED_CLAIMS = ('id', 'name', 'email', 'type', 'exp', 'iat')


class JwtAuth:
    def __init__(self, settings: Settings) -> None:
        self.secret = settings.SECRET_KEY.get_secret_value()
        self.algorithm = settings.ALGORITHM
        self.token_expire_minutes = settings.ACCESS_TOKEN_EXPIRE_MINUTES

    def create_jwt_token(self, user_entity: UserEntity, *, now: Optional[datetime] = None) -> str:
        issued_at = now or datetime.now(timezone.utc)
        payload: Dict[str, Any] = {
            'id': user_entity.id,
            'name': user_entity.name,
            'email': user_entity.email,
            'type': user_entity.type.value,
            'created_at': user_entity.created_at.isoformat() if user_entity.created_at else None,
            'iat': issued_at,
            'exp': issued_at + timedelta(minutes=self.token_expire_minutes),
        }

        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode_jwt_token(self, token: str) -> Dict[str, Any]:
        try:
            return jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={'require': list(REQUIRED_CLAIMS)},
            )
        except jwt.ExpiredSignatureError as e:
            raise AuthenticationError('Token expired') from e
        except jwt.PyJWTError as e:
            raise AuthenticationError('Invalid token') from e

    def get_current_user_info_from_jwt(self, token: Optional[str]) -> UserEntity:
        if not token:
            raise AuthenticationError('Not authenticated')

        payload = self.decode_jwt_token(token)

        try:
            created_at = payload.get('created_at')
            return UserEntity(
                id=int(payload['id']),
                name=payload['name'],
                email=payload['email'],
                type=UserType(payload['type']),
                created_at=datetime.fromisoformat(created_at) if created_at else None,
            )
        except (TypeError, ValueError) as e:
            raise AuthenticationError('Invalid token') from e
