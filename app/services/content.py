# app/services/content.py
import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from app.errors import ContentNotFound, StorageFailure
from app.models.service import Service
from app.services.content_view import adapt
from app.services.languages import default_language_code, language_codes
from app.services.page_cache import last_good
from app.services.resolver import SqlContentStore, resolve_content

logger = logging.getLogger(__name__)


def locale_settings(db: Session) -> tuple[set[str], str]:
    """Active language codes and the default code."""
    try:
        return language_codes(db), default_language_code(db)
    except SQLAlchemyError as exc:
        raise StorageFailure("locale_settings") from exc


def load_content_view(
    db: Session, store: SqlContentStore, kind: str, slug: str, locale: str
) -> dict:
    """Resolve and flatten one content item, remembering it as last-known-good."""
    codes, default_locale = locale_settings(db)
    if locale not in codes:
        raise ContentNotFound(slug, locale)
    try:
        view = adapt(resolve_content(store, slug, locale, default_locale))
    except ContentNotFound:
        # unpublished or deleted content must not come back from the cache
        last_good.discard(kind, slug, locale)
        raise
    last_good.put(kind, slug, locale, view)
    return view


def cached_content_view(kind: str, slug: str, locale: str) -> dict | None:
    view = last_good.get(kind, slug, locale)
    if view is not None:
        logger.warning("Serving cached %s %r (%s) after storage failure", kind, slug, locale)
    return view


def service_cards(db: Session, lang: str, default_lang: str) -> list[dict]:
    """Published services for listings, titled in ``lang`` or the default language."""
    services = (
        db.execute(
            select(Service)
            .options(selectinload(Service.translations))
            .where(Service.published == True)
            .order_by(Service.created_at.desc(), Service.id.desc())
        )
        .scalars()
        .all()
    )
    cards = []
    for service in services:
        tr = service.get_translation(lang) or service.get_translation(default_lang)
        if tr is None:
            continue
        cards.append(
            {
                "id": service.id,
                "slug": tr.slug,
                "title": tr.title,
                "description": tr.description or "",
                "image_url": service.hero_image_url,
                "url": f"/{lang}/hizmetler/{tr.slug}",
            }
        )
    return cards
