"""
Bearer token authentication: JWT signature check plus a live session row.
"""

from datetime import datetime, timedelta, timezone
from typing import Dict

import jwt

from src.platform.config.core_setting import Settings
from src.platform.exception.exceptions import AuthenticationError
from src.service.hotel_booking.app.interface.i_session_query_repo import ISessionQueryRepo


class JwtAuth:
    def __init__(self, settings: Settings) -> None:
        self.secret = settings.SECRET_KEY.get_secret_value()
        self.algorithm = settings.ALGORITHM
        self.token_expire_minutes = settings.ACCESS_TOKEN_EXPIRE_MINUTES

    def create_jwt_token(self, *, user_id: int) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            'sub': str(user_id),
            'exp': now + timedelta(minutes=self.token_expire_minutes),
            'iat': now,
            'userId': user_id,
        }

        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode_jwt_token(self, token: str) -> Dict:
        try:
            return jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.PyJWTError:
            raise AuthenticationError('Invalid token')

    async def authenticate(self, *, token: str, session_query_repo: ISessionQueryRepo) -> int:
        """Return the user id behind a bearer token, or raise AuthenticationError."""
        payload = self.decode_jwt_token(token)

        user_id = payload.get('userId')
        if not isinstance(user_id, int):
            raise AuthenticationError('Invalid token')

        session = await session_query_repo.get_by_token(token=token)
        if not session or session.user_id != user_id:
            raise AuthenticationError('Session not found')

        return user_id
