# app/utils/responses.py
from fastapi import status
from fastapi.responses import JSONResponse

from app.schemas.response import ApiResponse, ErrorKind

STATUS_BY_ERROR_KIND = {
    ErrorKind.VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
}


def to_response(result: ApiResponse, success_status: int = status.HTTP_200_OK) -> JSONResponse:
    """Serialize a service envelope, picking the HTTP status from its error kind"""
    if result.success:
        status_code = success_status
    else:
        status_code = STATUS_BY_ERROR_KIND.get(result.error_kind, status.HTTP_400_BAD_REQUEST)
    return JSONResponse(status_code=status_code, content=result.model_dump(mode="json"))


def validation_failed(errors) -> JSONResponse:
    return to_response(ApiResponse.fail(ErrorKind.VALIDATION_FAILED, "Validation failed", errors))
