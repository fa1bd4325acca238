import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse
from sqlalchemy.orm import Session

from app.db import get_db
from app.errors import ContentNotFound, StorageFailure
from app.services.content import cached_content_view, load_content_view
from app.services.stores import BlogStore
from app.ui import common_ctx, templates

router = APIRouter(tags=["blog"])
logger = logging.getLogger(__name__)


@router.get("/api/blogs/{locale}/{slug}")
async def blog_detail_api(locale: str, slug: str, db: Session = Depends(get_db)):
    try:
        return load_content_view(db, BlogStore(db), "blog", slug, locale)
    except ContentNotFound:
        raise HTTPException(status_code=404)
    except StorageFailure:
        logger.exception("Blog lookup failed for %s/%s", locale, slug)
        cached = cached_content_view("blog", slug, locale)
        if cached is None:
            raise HTTPException(status_code=503, detail="Content temporarily unavailable")
        return JSONResponse(cached, headers={"X-Content-Source": "cache"})


@router.get("/{locale}/blog/{slug}", response_class=HTMLResponse)
async def blog_detail(locale: str, slug: str, request: Request, db: Session = Depends(get_db)):
    request.state.lang = locale
    try:
        post = load_content_view(db, BlogStore(db), "blog", slug, locale)
    except ContentNotFound:
        raise HTTPException(status_code=404)
    except StorageFailure:
        logger.exception("Blog page failed for %s/%s", locale, slug)
        post = cached_content_view("blog", slug, locale)
        if post is None:
            return templates.TemplateResponse(
                request, "site/404.html", common_ctx(request), status_code=503
            )

    return templates.TemplateResponse(
        request, "site/blog_detail.html", common_ctx(request, {"post": post})
    )
