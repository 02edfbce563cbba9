"""Interface layer error handling.

Maps domain errors to HTTP responses.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from gitusers.domain.error import (
    AmbiguousIdentityError,
    InvalidInputError,
    NotFoundError,
    ProviderLookupFailedError,
    StoreUnavailableError,
)


async def _invalid_input(request: Request, exc: InvalidInputError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": str(exc)},
    )


async def _ambiguous_identity(
    request: Request, exc: AmbiguousIdentityError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={
            "detail": str(exc),
            "stage": exc.stage,
            "key": exc.key,
            "candidates": exc.candidates,
        },
    )


async def _not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": str(exc)},
    )


async def _store_unavailable(
    request: Request, exc: StoreUnavailableError
) -> JSONResponse:
    logfire.error("Identity store failure", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": str(exc)},
    )


async def _provider_lookup_failed(
    request: Request, exc: ProviderLookupFailedError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"detail": str(exc), "kind": exc.kind, "login": exc.login},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register handlers turning domain errors into HTTP responses.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(InvalidInputError, _invalid_input)
    app.add_exception_handler(AmbiguousIdentityError, _ambiguous_identity)
    app.add_exception_handler(NotFoundError, _not_found)
    app.add_exception_handler(StoreUnavailableError, _store_unavailable)
    app.add_exception_handler(ProviderLookupFailedError, _provider_lookup_failed)
