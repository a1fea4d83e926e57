from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from task_breaker.api.routes import router
from task_breaker.ui.routes import router as ui_router
from task_breaker.core.logging import get_logger
from task_breaker.db.session import init_db

log = get_logger("main")

app = FastAPI(title="Task Breaker API", version="0.1.0")
app.include_router(router, prefix="/api")
app.include_router(ui_router)


@app.exception_handler(StarletteHTTPException)
async def http_error(request: Request, exc: StarletteHTTPException):
    return JSONResponse({"error": exc.detail}, status_code=exc.status_code, headers=getattr(exc, "headers", None))

@app.exception_handler(RequestValidationError)
async def validation_error(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    msg = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    return JSONResponse({"error": f"Invalid request: {msg}"}, status_code=400)

@app.exception_handler(Exception)
async def unhandled_error(request: Request, exc: Exception):
    log.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse({"error": "Internal Server Error"}, status_code=500)


@app.get("/healthz")
async def healthz():
    return {"ok": True}

@app.on_event("startup")
async def on_startup():
    await init_db()
