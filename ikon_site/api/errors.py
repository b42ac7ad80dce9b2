from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ikon_site.core.errors import InquiryValidationError, StorageError


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(InquiryValidationError)
    async def inquiry_validation_handler(request: Request, exc: InquiryValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Validation failed", "errors": exc.as_list()},
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # body missing or not JSON at all
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "message": "Validation failed",
                "errors": [{"field": "body", "message": "Expected a JSON object"}],
            },
        )

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError):
        # details already logged by the service
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal Server Error"},
        )
