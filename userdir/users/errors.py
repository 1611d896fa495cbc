"""Translation of directory errors into HTTP responses.

Every error body has the shape ``{"message": ...}``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from userdir.common import ErrorKind, InvalidPayloadError, UserDirectoryError

LOGGER = logging.getLogger(__name__)

ERROR_STATUS_MAP: dict[ErrorKind, int] = {
    ErrorKind.DUPLICATE_EMAIL: status.HTTP_409_CONFLICT,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorKind.VALIDATION_FAILURE: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_PAYLOAD: status.HTTP_400_BAD_REQUEST,
}


def error_response(error: UserDirectoryError) -> JSONResponse:
    """Map a directory error to a JSON response.

    :param error: The error to map
    :return: JSONResponse with the status code of the error's kind
    """
    return JSONResponse(
        status_code=ERROR_STATUS_MAP[error.kind],
        content={"message": error.message},
    )


async def _directory_error_handler(
    request: Request,
    exc: UserDirectoryError,
) -> JSONResponse:
    LOGGER.info(
        "%s %s failed: %s (%s)",
        request.method,
        request.url.path,
        exc.kind.name,
        exc.message,
    )
    return error_response(exc)


async def _request_validation_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    LOGGER.info("BadRequest: %s %s: %s", request.method, request.url.path, exc)
    return error_response(InvalidPayloadError())


def register_error_handlers(app: FastAPI) -> None:
    """Install the directory's exception handlers on ``app``."""
    app.add_exception_handler(UserDirectoryError, _directory_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
