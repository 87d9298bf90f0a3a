from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.platform.config.di import Container
from src.platform.exception.exceptions import AuthenticationError
from src.service.hotel_booking.app.interface.i_session_query_repo import ISessionQueryRepo
from src.service.hotel_booking.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


bearer_scheme = HTTPBearer(auto_error=False)


@inject
async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
    session_query_repo: ISessionQueryRepo = Depends(Provide[Container.session_query_repo]),
) -> int:
    if not credentials:
        raise AuthenticationError('Not authenticated')

    return await jwt_auth.authenticate(
        token=credentials.credentials, session_query_repo=session_query_repo
    )
