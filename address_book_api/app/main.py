"""
Main entrypoint for the Address Book API.

This module assembles the FastAPI application, sets up logging,
registers the error handlers and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn address_book_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .core.config import settings
from .core.errors import (
    AddressBookError,
    DuplicateContactError,
    DuplicateNameError,
    NotFoundError,
    ValidationError,
)
from .core.logging_config import setup_logging
from .core.state import build_system
from .api.v1.router import router as v1_router
from .schemas.contact import translate_error
from .services.address_book_system import AddressBookSystem

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ValidationError: 422,
    DuplicateContactError: status.HTTP_409_CONFLICT,
    DuplicateNameError: status.HTTP_409_CONFLICT,
    NotFoundError: status.HTTP_404_NOT_FOUND,
}


def status_for(exc: AddressBookError) -> int:
    for error_type, code in ERROR_STATUS.items():
        if isinstance(exc, error_type):
            return code
    return status.HTTP_400_BAD_REQUEST


def create_app(system: Optional[AddressBookSystem] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    system : Optional[AddressBookSystem]
        The system served by this application.  When omitted, a new
        one is built containing the books named in
        ``settings.default_address_books``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that the setup below can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.system = system if system is not None else build_system(settings.default_book_names())

    @app.exception_handler(AddressBookError)
    async def address_book_error_handler(request: Request, exc: AddressBookError) -> JSONResponse:
        logger.info("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=status_for(exc), content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        error = translate_error(exc)
        logger.info("%s %s rejected: %s", request.method, request.url.path, error.message)
        return JSONResponse(status_code=status_for(error), content=error.to_dict())

    app.include_router(v1_router, prefix="/api/v1")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
