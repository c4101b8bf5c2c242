# app/core/error_messages.py
from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse


class ErrorResponses:
    UNAUTHORIZED = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized"
    )
    FORBIDDEN = HTTPException(
        status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden Access"
    )


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Render HTTP errors as {"message": ...} for the front end."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )
