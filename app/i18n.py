from fastapi import Request

from app.config import settings


def pick_lang(request: Request, default_lang: str | None = None) -> str:
    """Language for the request: URL prefix, then ``?lang=``, then the cookie."""
    langs = set(settings.supported_langs)
    prefix = request.url.path.strip("/").split("/", 1)[0]
    if prefix in langs:
        return prefix
    q = request.query_params.get("lang")
    if q in langs:
        return q
    cookie = request.cookies.get("lang")
    if cookie in langs:
        return cookie
    return default_lang or settings.DEFAULT_LANG
