from typing import Any, List, Optional

from fastapi.responses import JSONResponse


def error_response(status_code: int, message: str, error: Optional[str] = None,
                   errors: Optional[List[Any]] = None) -> JSONResponse:
    """Uniform failure body: {success: false, message, error?, errors?}"""
    content = {"success": False, "message": message}
    if error is not None:
        content["error"] = error
    if errors is not None:
        content["errors"] = errors
    return JSONResponse(status_code=status_code, content=content)
