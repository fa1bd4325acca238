import logging

from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.base import BaseHTTPMiddleware

from app.config import settings
from app.db import SessionLocal
from app.services.languages import active_languages
from app.services.menu import get_menu_tree

logger = logging.getLogger(__name__)

SKIP_PREFIXES = ("/api/", "/static/", "/health")


class ContextInjectorMiddleware(BaseHTTPMiddleware):
    """Loads menus and the language switcher for server-rendered pages."""

    async def dispatch(self, request, call_next):
        lang = getattr(request.state, "lang", settings.DEFAULT_LANG)
        request.state.lang = lang
        request.state.languages = []
        request.state.header_menu = []
        request.state.footer_menu = []
        if request.url.path.startswith(SKIP_PREFIXES):
            return await call_next(request)

        db = SessionLocal()
        try:
            request.state.languages = [
                {"code": l.code, "label": l.menu_label or l.code.upper(), "flag": l.flag_code}
                for l in active_languages(db)
            ]
            request.state.header_menu = get_menu_tree(
                db, lang, "header", current_path=request.url.path
            )
            request.state.footer_menu = get_menu_tree(
                db, lang, "footer", current_path=request.url.path
            )
        except SQLAlchemyError:
            # pages still render without navigation when the database is down
            logger.exception("Could not load layout context")
        finally:
            db.close()

        return await call_next(request)
