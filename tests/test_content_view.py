import copy

from app.services.content_view import adapt, join_definition, sorted_by_order
from app.services.resolver import DefinitionRecord, ResolvedContent


def _resolved(**overrides):
    values = dict(
        item_id=7,
        slug="anne-estetigi",
        locale="tr",
        requested_locale="en",
        is_fallback=True,
        fields={"title": "Anne Estetiği", "description": None},
        item_fields={"hero_image_url": "/h.jpg"},
        assets={
            "gallery_images": [
                {"id": 1, "src": "/2.jpg", "alt": "", "order": 2},
                {"id": 2, "src": "/0.jpg", "alt": "", "order": 0},
                {"id": 3, "src": "/1.jpg", "alt": "", "order": 1},
            ]
        },
        collections={"faqs": [{"id": 1, "question": "q", "answer": "a", "order": 0}]},
        definitions={
            "why_items": [
                DefinitionRecord(
                    fields={"id": 1, "number": "01", "order": 1},
                    translation={"title": "Deneyim", "description": "20 yıl"},
                    text_defaults={"title": "", "description": ""},
                ),
                DefinitionRecord(
                    fields={"id": 2, "number": "02", "order": 0},
                    translation=None,
                    text_defaults={"title": "", "description": ""},
                ),
            ],
            "pricing_packages": [
                DefinitionRecord(
                    fields={"id": 5, "is_featured": True, "order": 0},
                    translation=None,
                    text_defaults={"title": "", "price": "", "features": []},
                )
            ],
        },
        module_states={"toc": {"isActive": False}, "tocSection": {"isActive": False}},
    )
    values.update(overrides)
    return ResolvedContent(**values)


def test_sorted_by_order_is_stable_and_treats_missing_as_zero():
    records = [{"k": "a", "order": 1}, {"k": "b"}, {"k": "c", "order": 0}, {"k": "d", "order": 1}]
    assert [r["k"] for r in sorted_by_order(records)] == ["b", "c", "a", "d"]


def test_missing_translation_gets_empty_text_but_keeps_structure():
    record = join_definition(
        DefinitionRecord(
            fields={"id": 3, "image_url": "/r.jpg", "image_alt": "alt", "order": 4},
            translation=None,
            text_defaults={"title": "", "description": ""},
        )
    )
    assert record == {
        "id": 3,
        "image_url": "/r.jpg",
        "image_alt": "alt",
        "order": 4,
        "title": "",
        "description": "",
    }


def test_null_translated_value_falls_back_to_default():
    record = join_definition(
        DefinitionRecord(
            fields={"id": 1},
            translation={"text": "Harika", "treatment": None},
            text_defaults={"text": "", "treatment": ""},
        )
    )
    assert record["text"] == "Harika"
    assert record["treatment"] == ""


def test_adapt_flattens_and_orders():
    view = adapt(_resolved())
    assert view["id"] == 7
    assert view["locale"] == "tr"
    assert view["requested_locale"] == "en"
    assert view["is_fallback"] is True
    assert view["title"] == "Anne Estetiği"
    assert view["hero_image_url"] == "/h.jpg"
    assert [img["order"] for img in view["gallery_images"]] == [0, 1, 2]
    assert [w["number"] for w in view["why_items"]] == ["02", "01"]
    assert view["why_items"][0]["title"] == ""
    assert view["why_items"][1]["title"] == "Deneyim"
    assert view["pricing_packages"][0]["features"] == []


def test_adapt_reports_section_visibility():
    sections = adapt(_resolved())["sections"]
    assert sections["toc"] is False
    assert sections["faq"] is True
    assert len(sections) == 13


def test_adapt_does_not_touch_its_input():
    resolved = _resolved()
    snapshot = copy.deepcopy(resolved)
    view = adapt(resolved)
    view["gallery_images"][0]["src"] = "changed"
    view["pricing_packages"][0]["features"].append("x")
    assert resolved == snapshot
