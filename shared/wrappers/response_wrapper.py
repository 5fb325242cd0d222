import json
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from fastapi.responses import JSONResponse, Response

from shared.core.schemas import JsonOutResult
from shared.utils.app_status_code import AppStatusCode

SKIPPED_PREFIXES = ("/openapi", "/docs", "/redoc")


class JsonResponseMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next: Callable):
        # Skip OpenAPI/Swagger endpoints
        if request.url.path.startswith(SKIPPED_PREFIXES):
            return await call_next(request)

        response = await call_next(request)

        # Only wrap successful JSON responses
        if not (200 <= response.status_code < 400 and "application/json" in response.headers.get("content-type", "")):
            return response

        body_bytes = b""
        async for chunk in response.body_iterator:
            body_bytes += chunk

        headers = {k: v for k, v in response.headers.items()
                   if k.lower() != "content-length"}

        try:
            data = json.loads(body_bytes.decode("utf-8"))
        except ValueError:
            # non-JSON, return as-is
            return Response(content=body_bytes, status_code=response.status_code, headers=headers)

        # Skip if already wrapped
        if isinstance(data, dict) and {"status", "status_code", "message"}.issubset(data.keys()):
            wrapped = data
        else:
            wrapped = JsonOutResult(
                data=data,
                status="Success",
                status_code=AppStatusCode.DATA_RETRIEVED_SUCCESSFULLY,
                message="Data retrieved successfully"
            ).model_dump()

        return JSONResponse(content=wrapped, status_code=response.status_code, headers=headers)
