# app/ui.py
import os

from fastapi.templating import Jinja2Templates

from app.config import settings

TEMPLATE_DIR = os.path.join(os.path.dirname(__file__), "templates")

templates = Jinja2Templates(directory=TEMPLATE_DIR)
templates.env.globals["settings"] = settings


def active_lang(request):
    return getattr(request.state, "lang", settings.DEFAULT_LANG)


def common_ctx(request, extra: dict | None = None):
    base = {
        "request": request,
        "lang": active_lang(request),
        "languages": getattr(request.state, "languages", []),
        "header_menu": getattr(request.state, "header_menu", []),
        "footer_menu": getattr(request.state, "footer_menu", []),
    }
    if extra:
        base.update(extra)
    return base
