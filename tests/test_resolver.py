import pytest
from sqlalchemy.exc import OperationalError

from app.errors import ContentNotFound, StorageFailure
from app.services.resolver import SqlContentStore, resolve_content
from app.services.stores import SERVICE_TEXT_FIELDS, BlogStore, ServiceStore


def test_exact_match(db, content):
    resolved = resolve_content(ServiceStore(db), "rhinoplasty", "en", "tr")
    stored = next(tr for tr in content["burun"].translations if tr.language_code == "en")
    assert resolved.item_id == content["burun"].id
    assert resolved.slug == "rhinoplasty"
    assert resolved.locale == "en"
    assert resolved.is_fallback is False
    assert resolved.fields == {name: getattr(stored, name) for name in SERVICE_TEXT_FIELDS}
    assert resolved.fields["title"] == "Rhinoplasty"


def test_falls_back_to_default_language(db, content):
    resolved = resolve_content(ServiceStore(db), "anne-estetigi", "en", "tr")
    assert resolved.item_id == content["anne"].id
    assert resolved.locale == "tr"
    assert resolved.requested_locale == "en"
    assert resolved.is_fallback is True
    assert resolved.fields["title"] == "Anne Estetiği"


def test_foreign_slug_resolves_to_default_translation(db, content):
    resolved = resolve_content(ServiceStore(db), "rhinoplasty", "tr", "tr")
    assert resolved.slug == "burun-estetigi"
    assert resolved.locale == "tr"
    assert resolved.is_fallback is False


def test_unpublished_is_not_found_in_any_language(db, content):
    store = ServiceStore(db)
    with pytest.raises(ContentNotFound):
        resolve_content(store, "hidden", "en", "tr")
    with pytest.raises(ContentNotFound):
        resolve_content(store, "gizli", "en", "tr")
    with pytest.raises(ContentNotFound):
        resolve_content(store, "gizli", "tr", "tr")


def test_unknown_slug_is_not_found(db, content):
    with pytest.raises(ContentNotFound):
        resolve_content(ServiceStore(db), "x", "de", "tr")


def test_no_default_translation_is_not_found(db, content):
    with pytest.raises(ContentNotFound):
        resolve_content(ServiceStore(db), "only-english", "tr", "tr")


def test_service_build_loads_children(db, content):
    resolved = resolve_content(ServiceStore(db), "anne-estetigi", "tr", "tr")
    assert len(resolved.assets["gallery_images"]) == 3
    assert len(resolved.assets["marquee_images"]) == 1
    assert resolved.assets["cta_avatars"] == []
    assert sorted(f["order"] for f in resolved.collections["faqs"]) == [0, 1]
    why = {d.fields["number"]: d for d in resolved.definitions["why_items"]}
    assert why["01"].translation == {"title": "Deneyim", "description": "20 yıl"}
    assert why["02"].translation is None
    assert resolved.module_states["tocSection"] == {"isActive": False, "isVisible": False}
    assert resolved.module_states["faq"] == {"isActive": True, "isVisible": True}


def test_blog_fallback(db, content):
    resolved = resolve_content(BlogStore(db), "ilk-yazi", "en", "tr")
    assert resolved.is_fallback is True
    assert resolved.fields["title"] == "İlk Yazı"
    assert resolved.item_fields["cover_image_url"] == "/b/cover.jpg"


class _BrokenSession:
    def execute(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("database is down"))


def test_storage_errors_are_not_reported_as_not_found():
    with pytest.raises(StorageFailure) as excinfo:
        resolve_content(ServiceStore(_BrokenSession()), "anne-estetigi", "en", "tr")
    assert isinstance(excinfo.value.__cause__, OperationalError)
    assert excinfo.value.operation == "find_translation_by_slug_and_locale"


def test_base_store_cannot_be_used_directly(db):
    with pytest.raises(TypeError):
        SqlContentStore(db)
