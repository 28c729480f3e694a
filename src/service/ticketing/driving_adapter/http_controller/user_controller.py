from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.command.create_user_use_case import CreateUserUseCase
from src.service.ticketing.app.query.user_query_use_case import UserQueryUseCase
from src.service.ticketing.domain.entity.user_entity import UserEntity
from src.service.ticketing.driving_adapter.http_controller.auth.jwt_auth import JwtAuth
from src.service.ticketing.driving_adapter.http_controller.schema.common_schema import (
    SuccessResponse,
)
from src.service.ticketing.driving_adapter.http_controller.schema.user_schema import (
    CreatedUserResponse,
    CreateUserRequest,
    UserResponse,
)


# === API Router ===

router = APIRouter()

bearer_scheme = HTTPBearer(auto_error=False)


@inject
async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> UserEntity:
    """
    Resolve the requester from the bearer token (stateless, no DB query).

    Missing, malformed or expired tokens raise AuthenticationError (401).
    """
    token = credentials.credentials if credentials else None
    return jwt_auth.get_current_user_info_from_jwt(token)


@router.post(
    '',
    response_model=SuccessResponse[CreatedUserResponse],
    status_code=status.HTTP_201_CREATED,
)
@Logger.io
async def create_user(
    request: CreateUserRequest,
    use_case: CreateUserUseCase = Depends(CreateUserUseCase.depends),
) -> SuccessResponse[CreatedUserResponse]:
    user_entity = await use_case.execute(
        name=request.name,
        email=str(request.email),
        password=request.password.get_secret_value(),
        type=request.type,
    )

    return SuccessResponse(
        message='User successfully saved.',
        data=CreatedUserResponse(
            id=user_entity.id or 0, name=user_entity.name, email=user_entity.email
        ),
    )


@router.get('/{id}', response_model=SuccessResponse[UserResponse])
@Logger.io
async def get_user(
    id: int,
    current_user: UserEntity = Depends(get_current_user),
    use_case: UserQueryUseCase = Depends(UserQueryUseCase.depends),
) -> SuccessResponse[UserResponse]:
    user_entity = await use_case.get_user_by_id(id)

    return SuccessResponse(
        message='User found',
        data=UserResponse(
            id=user_entity.id or 0,
            name=user_entity.name,
            email=user_entity.email,
            type=user_entity.type,
            created_at=user_entity.created_at,
        ),
    )
