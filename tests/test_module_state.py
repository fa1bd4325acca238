import copy

import pytest

from app.services.module_state import (
    SECTION_KEY_PAIRS,
    Section,
    is_section_visible,
    normalize_module_states,
    section_visibility,
)

HIDDEN = {"isActive": False, "isVisible": False}


def test_none_and_empty_give_empty_mapping():
    assert normalize_module_states(None) == {}
    assert normalize_module_states({}) == {}


def test_every_section_has_short_and_long_key():
    assert len(SECTION_KEY_PAIRS) == 13
    assert ("toc", "tocSection") in SECTION_KEY_PAIRS
    assert ("faq", "faqSection") in SECTION_KEY_PAIRS
    assert Section.PRICING.long_key == "pricingSection"


def test_conflicting_keys_both_become_hidden():
    raw = {"toc": {"isActive": True, "isVisible": True}, "tocSection": {"isVisible": False}}
    result = normalize_module_states(raw)
    assert result["toc"] == HIDDEN
    assert result["tocSection"] == HIDDEN


def test_agreeing_visible_keys_are_left_alone():
    raw = {"cta": {"isActive": True}, "ctaSection": {"isActive": True, "isVisible": True}}
    result = normalize_module_states(raw)
    assert result["cta"] == {"isActive": True}
    assert result["ctaSection"] == {"isActive": True, "isVisible": True}


def test_missing_long_key_is_synthesized():
    result = normalize_module_states({"why": {"isActive": True, "isVisible": True}})
    assert result["whySection"] == result["why"] == {"isActive": True, "isVisible": True}


def test_missing_short_key_is_synthesized_hidden():
    result = normalize_module_states({"gallerySection": {"isActive": False}})
    assert result["gallery"] == HIDDEN
    assert result["gallerySection"] == HIDDEN


def test_synthesized_entries_are_independent_copies():
    result = normalize_module_states({"steps": {"isActive": True}})
    result["steps"]["isActive"] = False
    assert result["stepsSection"] == {"isActive": True}


def test_normalizing_twice_changes_nothing():
    raw = {
        "toc": {"isActive": False},
        "introSection": {"isVisible": True},
        "pricing": {"isActive": True},
        "pricingSection": {"isVisible": False},
        "faq": {"isActive": 0, "isVisible": "yes"},
    }
    once = normalize_module_states(raw)
    assert normalize_module_states(once) == once


def test_input_is_not_mutated():
    raw = {"toc": {"isActive": False}, "extra": {"isActive": True}}
    snapshot = copy.deepcopy(raw)
    normalize_module_states(raw)
    assert raw == snapshot


def test_unknown_keys_are_kept():
    result = normalize_module_states({"heroBanner": {"isActive": True}})
    assert result == {"heroBanner": {"isActive": True}}


def test_truthy_values_are_coerced_and_none_is_absent():
    result = normalize_module_states({"marquee": {"isActive": 1, "isVisible": None}})
    assert result["marquee"] == {"isActive": True}
    assert result["marqueeSection"] == {"isActive": True}

    result = normalize_module_states({"marquee": {"isActive": "", "isVisible": 1}})
    assert result["marquee"] == HIDDEN


def test_non_mapping_entries_are_dropped():
    result = normalize_module_states({"toc": "off", "faqSection": None})
    assert result == {}


@pytest.mark.parametrize("raw", [["toc"], "toc", 1, True])
def test_malformed_states_read_as_empty(raw):
    assert normalize_module_states(raw) == {}
    assert set(section_visibility(raw).values()) == {True}
    assert is_section_visible(raw, Section.TOC) is True


def test_observer_sees_each_adjustment():
    calls = []
    normalize_module_states(
        {"toc": {"isActive": False}, "faqSection": {}, "cta": {}, "ctaSection": {}},
        observer=lambda short, long, action: calls.append((short, long, action)),
    )
    assert ("toc", "tocSection", "synthesized_long") in calls
    assert ("faq", "faqSection", "synthesized_short") in calls
    assert all(short != "cta" for short, _, _ in calls)


def test_sections_without_entry_are_visible():
    visibility = section_visibility({"toc": {"isActive": False}})
    assert visibility[Section.TOC] is False
    assert all(visibility[s] for s in Section if s is not Section.TOC)
    assert set(section_visibility(None).values()) == {True}


def test_visibility_reads_long_key_when_short_key_is_missing():
    states = {"expertsSection": {"isVisible": False}}
    assert is_section_visible(states, Section.EXPERTS) is False
    assert is_section_visible(states, Section.FAQ) is True
