from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def success_response(data: Any, message: str) -> JSONResponse:
    return JSONResponse(jsonable_encoder({
        "success": True,
        "data": data,
        "message": message,
    }))


def error_response(error: str, status_code: int = 400) -> JSONResponse:
    return JSONResponse({
        "success": False,
        "error": error,
    }, status_code=status_code)
