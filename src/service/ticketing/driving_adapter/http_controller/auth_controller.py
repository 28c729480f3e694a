from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.query.user_query_use_case import UserQueryUseCase
from src.service.ticketing.driving_adapter.http_controller.auth.jwt_auth import JwtAuth
from src.service.ticketing.driving_adapter.http_controller.schema.common_schema import (
    SuccessResponse,
)
from src.service.ticketing.driving_adapter.http_controller.schema.user_schema import (
    LoginRequest,
    TokenResponse,
)


router = APIRouter()


@router.post('/login', response_model=SuccessResponse[TokenResponse])
@Logger.io
@inject
async def login(
    request: LoginRequest,
    use_case: UserQueryUseCase = Depends(UserQueryUseCase.depends),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> SuccessResponse[TokenResponse]:
    user_entity = await use_case.authenticate(
        email=str(request.email), password=request.password.get_secret_value()
    )

    return SuccessResponse(
        message='Token successfully created.',
        data=TokenResponse(token=jwt_auth.create_jwt_token(user_entity)),
    )
