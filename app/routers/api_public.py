import logging

from fastapi import APIRouter, Depends, Form, HTTPException
from email_validator import validate_email, EmailNotValidError
from sqlalchemy.orm import Session

from ..db import get_db
from ..services.faqs import localized_faqs
from ..services.languages import active_languages, default_language_code
from ..services.mailer import contact_message, send_mail
from ..services.menu import get_menu_tree

router = APIRouter()
logger = logging.getLogger(__name__)

MENU_POSITIONS = {"header", "footer"}


@router.get("/languages")
async def languages(db: Session = Depends(get_db)):
    return [
        {
            "code": lang.code,
            "name": lang.name,
            "menu_label": lang.menu_label,
            "flag_code": lang.flag_code,
            "is_default": lang.is_default,
        }
        for lang in active_languages(db)
    ]


@router.get("/home/faqs")
async def home_faqs(lang: str | None = None, db: Session = Depends(get_db)):
    default_lang = default_language_code(db)
    return localized_faqs(db, lang or default_lang, default_lang)


@router.get("/menus/{position}")
async def menu(position: str, lang: str | None = None, db: Session = Depends(get_db)):
    if position not in MENU_POSITIONS:
        raise HTTPException(status_code=404)
    return get_menu_tree(db, lang or default_language_code(db), position)


@router.post("/contact")
async def contact_submit(name: str = Form(...), email: str = Form(...), phone: str = Form(''),
                         subject: str = Form(''), message: str = Form(...)):
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError as e:
        return {"ok": False, "error": str(e)}
    try:
        send_mail(subject or "Website Contact", contact_message(name, email, phone, message),
                  reply_to=email)
    except OSError:
        logger.exception("Contact mail delivery failed")
        return {"ok": False, "error": "Message could not be delivered"}
    return {"ok": True}
