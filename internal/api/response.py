"""Error envelope shared by the API routes."""

from datetime import datetime, timezone
from typing import Any, Dict

from fastapi.responses import JSONResponse  # type: ignore


def new_error_body(error: BaseException, context: str) -> Dict[str, Any]:
    return {
        "error": str(error) or type(error).__name__,
        "context": context,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


def new_error_resp(error: BaseException, context: str, status_code: int = 500) -> JSONResponse:
    """Build the `{error, context, timestamp}` response."""
    return JSONResponse(status_code=status_code, content=new_error_body(error, context))


__all__ = ["new_error_body", "new_error_resp"]
