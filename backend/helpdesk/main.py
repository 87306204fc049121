import logging
import time

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlmodel import SQLModel

import helpdesk.models  # noqa: F401  (registers the tables on SQLModel.metadata)
from helpdesk.api.routes.auth import router as auth_router
from helpdesk.api.routes.directory import router as directory_router
from helpdesk.api.routes.metrics import router as metrics_router
from helpdesk.api.routes.stats import router as stats_router
from helpdesk.api.routes.tickets import router as tickets_router
from helpdesk.core.config import settings
from helpdesk.core.errors import HelpdeskError
from helpdesk.core.log_config import configure_logging
from helpdesk.db import session as db_session
from helpdesk.metrics.prometheus import api_request_latency_seconds

configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Helpdesk API",
    version="1.0.0",
    description="IT helpdesk ticketing: submit, browse, filter and comment on support tickets",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def on_startup():
    SQLModel.metadata.create_all(db_session.engine)


@app.exception_handler(HelpdeskError)
async def helpdesk_error_handler(request: Request, exc: HelpdeskError):
    logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def _route_label(request: Request) -> str:
    # templated path keeps one series per endpoint, not per ticket id
    route = request.scope.get("route")
    return getattr(route, "path", None) or request.url.path


@app.middleware("http")
async def metrics_middleware(request: Request, call_next):
    start = time.perf_counter()
    response: Response
    status = "unknown"
    try:
        response = await call_next(request)
        status = str(response.status_code)
        return response
    finally:
        dt = time.perf_counter() - start
        api_request_latency_seconds.labels(
            route=_route_label(request),
            method=request.method,
            status=status,
        ).observe(dt)


@app.get("/health")
def health():
    return {"status": "ok"}


app.include_router(auth_router)
app.include_router(directory_router)
app.include_router(tickets_router)
app.include_router(stats_router)
app.include_router(metrics_router)
