from xml.sax.saxutils import escape

from fastapi import APIRouter, HTTPException, Request, Depends
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse
from sqlalchemy import select

from app.models.blog import Blog, BlogTranslation
from app.models.service import Service, ServiceTranslation
from app.db import get_db
from app.config import settings
from sqlalchemy.orm import Session
from app.services.content import locale_settings, service_cards
from app.services.faqs import localized_faqs
from app.ui import active_lang, common_ctx, templates

router = APIRouter()


@router.get("/sitemap.xml", response_class=PlainTextResponse)
async def sitemap(request: Request, db: Session = Depends(get_db)):
    services = db.execute(
        select(ServiceTranslation.language_code, ServiceTranslation.slug)
        .join(Service, Service.id == ServiceTranslation.service_id)
        .where(Service.published == True)
        .order_by(ServiceTranslation.language_code, ServiceTranslation.slug)
    ).all()
    posts = db.execute(
        select(BlogTranslation.language_code, BlogTranslation.slug)
        .join(Blog, Blog.id == BlogTranslation.blog_id)
        .where(Blog.is_published == True)
        .order_by(BlogTranslation.language_code, BlogTranslation.slug)
    ).all()
    base = settings.BASE_URL.rstrip("/")
    locs = [f"{base}/"]
    locs += [f"{base}/{lang}/hizmetler/{slug}" for lang, slug in services]
    locs += [f"{base}/{lang}/blog/{slug}" for lang, slug in posts]
    urls = [f"<url><loc>{escape(loc)}</loc></url>" for loc in locs]
    body = (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">\n'
        + "\n".join(urls)
        + "\n</urlset>"
    )
    return PlainTextResponse(body, media_type="application/xml")


@router.get("/")
async def root(request: Request):
    return RedirectResponse(f"/{active_lang(request)}", status_code=302)


@router.get("/{locale}", response_class=HTMLResponse)
async def home(locale: str, request: Request, db: Session = Depends(get_db)):
    codes, default_lang = locale_settings(db)
    if locale not in codes:
        raise HTTPException(404)
    request.state.lang = locale

    return templates.TemplateResponse(
        request,
        "site/home.html",
        common_ctx(
            request,
            {
                "services": service_cards(db, locale, default_lang),
                "faqs": localized_faqs(db, locale, default_lang),
            },
        ),
    )
