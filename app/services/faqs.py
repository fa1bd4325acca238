from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from app.models.faq import Faq


def localized_faqs(db: Session, lang: str, default_lang: str) -> list[dict]:
    """Published home-page FAQs in ``lang``.

    An entry without a ``lang`` translation uses the default-language one;
    entries still missing a question or an answer are left out.
    """
    faqs = (
        db.execute(
            select(Faq)
            .options(selectinload(Faq.translations))
            .where(Faq.is_published == True)
            .order_by(Faq.order.asc(), Faq.id.asc())
        )
        .scalars()
        .all()
    )

    result = []
    for faq in faqs:
        translation = faq.get_translation(lang)
        if translation is None and default_lang != lang:
            translation = faq.get_translation(default_lang)
        question = translation.question if translation else ""
        answer = translation.answer if translation else ""
        if not question or not answer:
            continue
        result.append(
            {
                "id": faq.id,
                "order": faq.order,
                "question": question,
                "answer": answer,
            }
        )
    return result
