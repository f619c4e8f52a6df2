from contextlib import asynccontextmanager
from datetime import datetime
import logging
import os

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn

from config import settings
from crud.api.v1.endpoints import inventory
from database import connection_manager
from exceptions import ErrorKind, InventoryError
from pages import inventory as inventory_pages
from pages.templates import render_error

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

API_PREFIX = "/api/"

STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.CONNECTION: 503,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    connection_manager.close()


app = FastAPI(title="Inventory Manager", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _is_api(request: Request) -> bool:
    return request.url.path.startswith(API_PREFIX)


def _retry_path(request: Request) -> str:
    return request.url.path if request.method == "GET" else "/"


@app.middleware("http")
async def exception_handling(request, call_next):
    try:
        return await call_next(request)
    except Exception:
        logger.exception("error processing %s %s", request.method, request.url.path)
        if _is_api(request):
            return JSONResponse(status_code=500, content={"detail": "Internal server error occurred"})
        return HTMLResponse(render_error("Internal server error occurred", _retry_path(request)), status_code=500)


@app.exception_handler(InventoryError)
async def inventory_error_handler(request: Request, exc: InventoryError):
    status_code = STATUS_BY_KIND.get(exc.kind, 500)
    if _is_api(request):
        return JSONResponse(status_code=status_code, content={"detail": exc.message, "kind": exc.kind.value})
    return HTMLResponse(render_error(exc.message, _retry_path(request)), status_code=status_code)


@app.exception_handler(StarletteHTTPException)
async def page_http_exception_handler(request: Request, exc: StarletteHTTPException):
    if _is_api(request):
        return await http_exception_handler(request, exc)
    return HTMLResponse(render_error(str(exc.detail), "/"), status_code=exc.status_code)


app.include_router(inventory.router, prefix="/api/v1/inventory", tags=["inventory"])
app.include_router(inventory_pages.router, tags=["pages"])


@app.get("/health", tags=["system"])
def health_check():
    return {"status": "ok", "database": connection_manager.state.value, "timestamp": datetime.now().isoformat()}


if __name__ == '__main__':
    port = int(os.environ.get("PORT", 8000))

    uvicorn.run("main:app", host="0.0.0.0", port=port, reload=False)
