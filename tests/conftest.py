import os
import tempfile

_TMP = tempfile.mkdtemp(prefix="celyxmed-tests-")
os.environ.setdefault("DATABASE_URL", f"sqlite:///{os.path.join(_TMP, 'import.db')}")
os.environ["LOG_DIR"] = os.path.join(_TMP, "logs")
os.environ["MAIL_HOST"] = ""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine

from app.db import Base, SessionLocal
from app.main import app
from app.models import (
    Blog,
    BlogTranslation,
    Faq,
    FaqTranslation,
    Language,
    MenuItem,
    MenuItemTranslation,
    Service,
    ServiceFaq,
    ServiceImage,
    ServiceTocItem,
    ServiceTranslation,
    ServiceWhyItem,
    ServiceWhyItemTranslation,
)
from app.services.page_cache import last_good


@pytest.fixture()
def engine(tmp_path):
    engine = create_engine(
        f"sqlite:///{tmp_path / 'test.db'}", connect_args={"check_same_thread": False}
    )
    Base.metadata.create_all(bind=engine)
    SessionLocal.configure(bind=engine)
    last_good.clear()
    yield engine
    last_good.clear()
    engine.dispose()


@pytest.fixture()
def db(engine):
    session = SessionLocal()
    session.add_all(
        [
            Language(code="tr", name="Türkçe", menu_label="TR", flag_code="tr", is_default=True),
            Language(code="en", name="English", menu_label="EN", flag_code="gb"),
        ]
    )
    session.commit()
    yield session
    session.close()


@pytest.fixture()
def client(db):
    return TestClient(app)


def add_service(db, published=True, module_states=None, translations=()):
    service = Service(published=published, module_states=module_states)
    for lang, slug, title in translations:
        service.translations.append(
            ServiceTranslation(language_code=lang, slug=slug, title=title)
        )
    db.add(service)
    db.commit()
    return service


@pytest.fixture()
def content(db):
    """A small catalogue used across the API tests.

    * anne-estetigi: published, Turkish only, toc hidden, gallery out of order
    * burun-estetigi / rhinoplasty: published in both languages
    * gizli / hidden: unpublished
    * only-english: published, English only
    """
    anne = add_service(
        db,
        module_states={
            "toc": {"isActive": False},
            "faqSection": {"isActive": True, "isVisible": True},
        },
        translations=[("tr", "anne-estetigi", "Anne Estetiği")],
    )
    anne.hero_image_url = "/static/img/anne.jpg"
    anne.images.extend(
        [
            ServiceImage(kind="gallery", src="/g/2.jpg", alt="iki", order=2),
            ServiceImage(kind="gallery", src="/g/0.jpg", alt="sıfır", order=0),
            ServiceImage(kind="gallery", src="/g/1.jpg", alt="bir", order=1),
            ServiceImage(kind="marquee", src="/m/0.jpg", alt="", order=0),
        ]
    )
    tr = anne.translations[0]
    tr.toc_title = "İçindekiler"
    tr.toc_items.append(ServiceTocItem(text="Giriş", order=0))
    tr.faqs.extend(
        [
            ServiceFaq(question="Ne kadar sürer?", answer="Üç saat.", order=1),
            ServiceFaq(question="Ağrılı mı?", answer="Hayır.", order=0),
        ]
    )
    translated = ServiceWhyItem(number="01", order=1)
    translated.translations.append(
        ServiceWhyItemTranslation(language_code="tr", title="Deneyim", description="20 yıl")
    )
    untranslated = ServiceWhyItem(number="02", order=0)
    anne.why_items.extend([translated, untranslated])
    db.commit()

    burun = add_service(
        db,
        translations=[
            ("tr", "burun-estetigi", "Burun Estetiği"),
            ("en", "rhinoplasty", "Rhinoplasty"),
        ],
    )
    hidden = add_service(
        db,
        published=False,
        translations=[("tr", "gizli", "Gizli"), ("en", "hidden", "Hidden")],
    )
    english_only = add_service(
        db, translations=[("en", "only-english", "Only English")]
    )

    blog = Blog(is_published=True, cover_image_url="/b/cover.jpg")
    blog.translations.append(
        BlogTranslation(
            language_code="tr",
            slug="ilk-yazi",
            title="İlk Yazı",
            content="<p>Merhaba</p>",
            toc_items=[{"text": "İkinci", "order": 1}, {"text": "Birinci", "order": 0}],
        )
    )
    db.add(blog)
    db.commit()

    return {
        "anne": anne,
        "burun": burun,
        "hidden": hidden,
        "english_only": english_only,
        "blog": blog,
    }


@pytest.fixture()
def faqs(db):
    both = Faq(order=0)
    both.translations.extend(
        [
            FaqTranslation(language_code="tr", question="Nerede?", answer="İstanbul."),
            FaqTranslation(language_code="en", question="Where?", answer="Istanbul."),
        ]
    )
    turkish = Faq(order=1)
    turkish.translations.append(
        FaqTranslation(language_code="tr", question="Ne zaman?", answer="Her gün.")
    )
    unpublished = Faq(order=2, is_published=False)
    unpublished.translations.append(
        FaqTranslation(language_code="en", question="Secret?", answer="Yes.")
    )
    blank = Faq(order=3)
    blank.translations.append(FaqTranslation(language_code="en", question="", answer="x"))
    db.add_all([both, turkish, unpublished, blank])
    db.commit()


@pytest.fixture()
def menus(db, content):
    service_item = MenuItem(
        position="header", item_type="service", service_id=content["burun"].id, sort_order=1
    )
    service_item.translations.extend(
        [
            MenuItemTranslation(language_code="tr", label="Burun"),
            MenuItemTranslation(language_code="en", label="Nose"),
        ]
    )
    turkish_link = MenuItem(position="header", item_type="link", url="/tr/iletisim", sort_order=2)
    turkish_link.translations.append(MenuItemTranslation(language_code="tr", label="İletişim"))
    footer = MenuItem(position="footer", item_type="link", url="/gizlilik", sort_order=0)
    footer.translations.append(MenuItemTranslation(language_code="en", label="Privacy"))
    db.add_all([service_item, turkish_link, footer])
    db.commit()
