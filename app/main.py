from fastapi import FastAPI, Request, Response
from fastapi.middleware import Middleware
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from app.config import settings
from app.errors import StorageFailure
from app.i18n import pick_lang
from app.routers import (
    api_public,
    blog,
    services,
    site,
)
from app.ui import common_ctx, templates
import logging, os
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.middleware.context import ContextInjectorMiddleware

os.makedirs(settings.LOG_DIR, exist_ok=True)
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[
        logging.FileHandler(os.path.join(settings.LOG_DIR, "app.log"), encoding="utf-8"),
        logging.StreamHandler(),
    ],
)
logger = logging.getLogger("celyxmed")

STATIC_DIR = os.path.join(os.path.dirname(__file__), "static")

app = FastAPI(
    title=settings.APP_NAME,
    middleware=[
        Middleware(ContextInjectorMiddleware),
    ],
)


app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")


@app.middleware("http")
async def lang_middleware(request: Request, call_next):
    lang = pick_lang(request)
    request.state.lang = lang
    response: Response = await call_next(request)
    if request.query_params.get("lang") == lang:
        response.set_cookie("lang", lang, max_age=60 * 60 * 24 * 365, samesite="lax")
    return response


def _wants_json(request: Request) -> bool:
    return request.url.path.startswith("/api/")


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if _wants_json(request):
        return JSONResponse({"detail": exc.detail}, status_code=exc.status_code)
    if exc.status_code == 404:
        return templates.TemplateResponse(
            request, "site/404.html", common_ctx(request), status_code=404
        )
    return HTMLResponse(str(exc.detail), status_code=exc.status_code)


@app.exception_handler(StorageFailure)
async def storage_failure_handler(request: Request, exc: StorageFailure):
    logger.error("Storage failure on %s: %s", request.url.path, exc)
    if _wants_json(request):
        return JSONResponse({"detail": "Content temporarily unavailable"}, status_code=503)
    return templates.TemplateResponse(
        request, "site/404.html", common_ctx(request), status_code=503
    )


@app.get("/health")
def health():
    logger.info("Health check hit")
    return {"ok": True}


@app.get("/set-lang/{code}")
async def set_lang(code: str, request: Request):
    lang = code if code in settings.supported_langs else settings.DEFAULT_LANG
    referer = request.headers.get("referer") or f"/{lang}"
    response = Response(status_code=302)
    response.headers["Location"] = referer
    response.set_cookie("lang", lang, max_age=60 * 60 * 24 * 365, samesite="lax")
    return response


app.include_router(api_public.router, prefix="/api")
app.include_router(services.router)
app.include_router(blog.router)
app.include_router(site.router)
