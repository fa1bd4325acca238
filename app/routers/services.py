import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse
from sqlalchemy.orm import Session

from app.db import get_db
from app.errors import ContentNotFound, StorageFailure
from app.services.content import cached_content_view, load_content_view
from app.services.stores import ServiceStore
from app.ui import common_ctx, templates

router = APIRouter(tags=["services"])
logger = logging.getLogger(__name__)


@router.get("/api/services/{slug}")
async def service_detail_api(
    slug: str, locale: str | None = None, db: Session = Depends(get_db)
):
    if not locale:
        return JSONResponse({"detail": "locale parameter is required"}, status_code=400)
    try:
        return load_content_view(db, ServiceStore(db), "service", slug, locale)
    except ContentNotFound:
        raise HTTPException(status_code=404)
    except StorageFailure:
        logger.exception("Service lookup failed for %s/%s", locale, slug)
        cached = cached_content_view("service", slug, locale)
        if cached is None:
            raise HTTPException(status_code=503, detail="Content temporarily unavailable")
        return JSONResponse(cached, headers={"X-Content-Source": "cache"})


@router.get("/{locale}/hizmetler/{slug}", response_class=HTMLResponse)
async def service_detail(
    locale: str, slug: str, request: Request, db: Session = Depends(get_db)
):
    request.state.lang = locale
    try:
        service = load_content_view(db, ServiceStore(db), "service", slug, locale)
    except ContentNotFound:
        raise HTTPException(status_code=404)
    except StorageFailure:
        logger.exception("Service page failed for %s/%s", locale, slug)
        service = cached_content_view("service", slug, locale)
        if service is None:
            return templates.TemplateResponse(
                request, "site/404.html", common_ctx(request), status_code=503
            )

    return templates.TemplateResponse(
        request,
        "site/service_detail.html",
        common_ctx(
            request,
            {
                "service": service,
                "sections": service["sections"],
            },
        ),
    )
