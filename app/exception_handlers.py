from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import logging

from app.exceptions import CaminanteError

logger = logging.getLogger(__name__)


async def caminante_error_handler(request: Request, exc: CaminanteError):
    if exc.status_code >= 500:
        logger.error(
            "Domain error | path=%s | method=%s | %s",
            request.url.path,
            request.method,
            exc.message,
        )
    else:
        logger.info(
            "Request rejected | path=%s | status=%s | %s",
            request.url.path,
            exc.status_code,
            exc.message,
        )
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError):
    # Solo se devuelven ubicación y mensaje de cada campo inválido
    errors = [
        {"field": ".".join(str(part) for part in error["loc"]), "error": error["msg"]}
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Faltan datos o son inválidos", "errors": errors},
    )


# Global unhandled exception handler -> logs ERROR
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(
        "Unhandled error | path=%s | method=%s | client=%s",
        request.url.path,
        request.method,
        request.client.host if request.client else "unknown",
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Error interno"},
    )


EXCEPTION_HANDLERS = {
    CaminanteError: caminante_error_handler,
    RequestValidationError: validation_error_handler,
    Exception: unhandled_exception_handler,
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
