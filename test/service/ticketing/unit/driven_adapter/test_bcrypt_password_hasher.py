import pytest
from pydantic import SecretStr

from src.platform.exception.exceptions import ValidationError
from src.service.ticketing.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)


@pytest.fixture
def hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher(rounds=4)


@pytest.mark.unit
class TestBcryptPasswordHasher:
    def test_hash_then_verify(self, hasher):
        hashed = hasher.hash_password(plain_password=SecretStr('P@ssw0rd'))

        assert hashed.startswith('$2')
        assert hasher.verify_password(plain_password=SecretStr('P@ssw0rd'), hashed_password=hashed)
        assert not hasher.verify_password(plain_password=SecretStr('wrong'), hashed_password=hashed)

    def test_72_bytes_is_accepted(self, hasher):
        password = SecretStr('x' * 72)

        hashed = hasher.hash_password(plain_password=password)

        assert hasher.verify_password(plain_password=password, hashed_password=hashed)

    @pytest.mark.parametrize('password', ['x' * 73, 'é' * 37])
    def test_over_72_bytes_is_rejected(self, hasher, password):
        with pytest.raises(ValidationError) as exc_info:
            hasher.hash_password(plain_password=SecretStr(password))

        assert exc_info.value.errors_validation == [
            {'password': 'password must be at most 72 bytes'}
        ]

    def test_verify_over_72_bytes_is_false(self, hasher):
        hashed = hasher.hash_password(plain_password=SecretStr('x' * 72))

        assert not hasher.verify_password(
            plain_password=SecretStr('x' * 73), hashed_password=hashed
        )

    def test_verify_against_non_bcrypt_value_is_false(self, hasher):
        assert not hasher.verify_password(
            plain_password=SecretStr('P@ssw0rd'), hashed_password='not-a-hash'
        )
