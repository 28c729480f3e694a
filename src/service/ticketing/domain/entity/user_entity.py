from datetime import datetime
from typing import Optional

import attrs
from pydantic import SecretStr

from src.platform.exception.exceptions import (
    InvalidTargetError,
    LoginError,
    NotFoundError,
)
from src.service.ticketing.app.interface.i_password_hasher import IPasswordHasher
from src.service.ticketing.domain.enum.user_type import UserType


BAD_CREDENTIALS = 'Incorrect email or password'


@attrs.define
class UserEntity:
    email: str = ''
    name: str = ''
    hashed_password: str = attrs.field(default='', repr=False)  # Hide from repr for security
    id: Optional[int] = None
    type: UserType = UserType.CUSTOMER
    created_at: Optional[datetime] = None

    @property
    def is_admin(self) -> bool:
        return self.type == UserType.ADMIN

    def set_password(self, plain_password: str, password_hasher: IPasswordHasher) -> None:
        self.hashed_password = password_hasher.hash_password(
            plain_password=SecretStr(plain_password)
        )

    def validate_assignable(self) -> None:
        if self.is_admin:
            raise InvalidTargetError('You can’t assign a ticket to an admin.')

    @staticmethod
    def validate_user_exists(user_entity: Optional['UserEntity']) -> 'UserEntity':
        if not user_entity:
            raise LoginError('Not Found', errors=[BAD_CREDENTIALS])
        return user_entity

    @staticmethod
    def validate_found(user_entity: Optional['UserEntity'], user_id: int) -> 'UserEntity':
        if not user_entity:
            raise NotFoundError(f'User with id:{user_id} not found.')
        return user_entity
