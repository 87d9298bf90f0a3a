from typing import Any, Callable, Coroutine

from fastapi.exceptions import RequestValidationError
from fastapi.routing import APIRoute
from starlette.exceptions import HTTPException
from starlette.requests import Request
from starlette.responses import Response

from src.platform.exception.exceptions import CustomBaseError, NotFoundError
from src.platform.logging.loguru_io import Logger


NOT_FOUND_DETAIL = 'Not Found'


class NotFoundFallbackRoute(APIRoute):
    """
    Route class for the booking endpoints.

    Domain errors keep their own status. Anything else raised while handling
    the request (a malformed body or path, a driver error, a bug) answers 404.
    """

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        original_route_handler = super().get_route_handler()

        async def route_handler(request: Request) -> Response:
            try:
                return await original_route_handler(request)
            except (CustomBaseError, HTTPException):
                raise
            except RequestValidationError as exc:
                Logger.base.info(
                    f'Rejected {request.method} {request.url.path}: {exc.errors()}'
                )
                raise NotFoundError(NOT_FOUND_DETAIL) from exc
            except Exception as exc:
                if not getattr(exc, '_has_logged', False):
                    Logger.base.opt(exception=exc).error(
                        f'Unhandled {type(exc).__name__} on {request.method} {request.url.path}'
                    )
                raise NotFoundError(NOT_FOUND_DETAIL) from exc

        return route_handler
