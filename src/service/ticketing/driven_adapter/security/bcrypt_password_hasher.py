import bcrypt
from pydantic import SecretStr

from src.platform.exception.exceptions import ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_password_hasher import IPasswordHasher


BCRYPT_MAX_BYTES = 72


class BcryptPasswordHasher(IPasswordHasher):
    """bcrypt-backed hasher; salts are generated per hash and stored inline."""

    def __init__(self, rounds: int = 12) -> None:
        self.rounds = rounds

    @Logger.io
    def hash_password(self, *, plain_password: SecretStr) -> str:
        password_bytes = plain_password.get_secret_value().encode('utf-8')
        if len(password_bytes) > BCRYPT_MAX_BYTES:
            raise ValidationError(
                'Password is too long.',
                errors_validation=[
                    {'password': f'password must be at most {BCRYPT_MAX_BYTES} bytes'}
                ],
            )
        hashed = bcrypt.hashpw(password_bytes, bcrypt.gensalt(rounds=self.rounds))
        return hashed.decode('utf-8')

    @Logger.io
    def verify_password(self, *, plain_password: SecretStr, hashed_password: str) -> bool:
        password_bytes = plain_password.get_secret_value().encode('utf-8')
        if len(password_bytes) > BCRYPT_MAX_BYTES:
            return False
        try:
            return bcrypt.checkpw(password_bytes, hashed_password.encode('utf-8'))
        except ValueError:
            # stored value is not a bcrypt hash
            return False
