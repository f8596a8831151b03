from fastapi.responses import JSONResponse

from ..errors import ApiError

# Documented error shapes, shared by every route declaration.
ERROR_RESPONSES = {
    400: {"description": "Missing or invalid fields"},
    404: {"description": "Not found"},
    409: {"description": "Email already registered"},
    500: {"description": "Internal Server Error"},
}


def error_response(error: ApiError) -> JSONResponse:
    return JSONResponse(status_code=error.status_code, content=error.to_body())
