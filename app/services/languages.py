from sqlalchemy import select
from sqlalchemy.orm import Session

from app.config import settings
from app.models.language import Language


def active_languages(db: Session) -> list[Language]:
    return list(
        db.execute(
            select(Language).where(Language.is_active == True).order_by(Language.code.asc())
        ).scalars()
    )


def default_language_code(db: Session) -> str:
    code = db.execute(
        select(Language.code).where(Language.is_default == True).order_by(Language.id.asc())
    ).scalars().first()
    return code or settings.DEFAULT_LANG


def language_codes(db: Session) -> set[str]:
    codes = {lang.code for lang in active_languages(db)}
    return codes or set(settings.supported_langs)
