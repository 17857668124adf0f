import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from outage_proxy.config import settings
from outage_proxy.exceptions import OutageProxyError
from outage_proxy.responses import PrettyJSONResponse
from outage_proxy.schemas.outage import ErrorResponse

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


app = FastAPI(
    title="BC Hydro Outage Proxy",
    description="Filters the BC Hydro outage feed to outages affecting a coordinate",
    version="1.0.0",
)


def _error(status_code: int, message: str) -> PrettyJSONResponse:
    return PrettyJSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


# Registered before CORSMiddleware so it runs inside it and 500s keep CORS headers
@app.middleware("http")
async def unhandled_error_middleware(request: Request, call_next):
    try:
        return await call_next(request)
    except Exception as exc:
        logger.exception("Unhandled error serving %s", request.url.path)
        return _error(500, str(exc) or exc.__class__.__name__)


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["Content-Type"],
)


@app.exception_handler(OutageProxyError)
async def outage_proxy_error_handler(request: Request, exc: OutageProxyError):
    if exc.status_code >= 500:
        logger.error("Request failed: %s", exc.message)
    return _error(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return _error(400, "Invalid request parameters")


from outage_proxy.routers import outage  # noqa: E402

app.include_router(outage.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
