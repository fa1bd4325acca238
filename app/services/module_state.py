"""Per-section visibility flags for service pages.

Older admin screens stored a section's flags under its short key (``toc``),
newer ones under the long key (``tocSection``), and stored rows may carry
either spelling or both. ``normalize_module_states`` reconciles the two when
rows are read; everything after that works with ``Section`` members only.
"""

import enum
import logging
from typing import Any, Callable, Mapping

logger = logging.getLogger(__name__)

FLAG_KEYS = ("isActive", "isVisible")


class Section(str, enum.Enum):
    TOC = "toc"
    INTRO = "intro"
    MARQUEE = "marquee"
    OVERVIEW = "overview"
    WHY = "why"
    GALLERY = "gallery"
    TESTIMONIALS = "testimonials"
    STEPS = "steps"
    RECOVERY = "recovery"
    CTA = "cta"
    PRICING = "pricing"
    EXPERTS = "experts"
    FAQ = "faq"

    @property
    def long_key(self) -> str:
        return f"{self.value}Section"


SECTION_KEY_PAIRS = tuple((section.value, section.long_key) for section in Section)

Observer = Callable[[str, str, str], None]


def _hidden_state() -> dict[str, bool]:
    return {"isActive": False, "isVisible": False}


def _clean_entry(value: Any) -> dict[str, bool] | None:
    """Return the flags of one entry as real booleans, or None when absent.

    Present non-boolean flag values are coerced with ``bool()``; ``None`` counts
    as a missing flag.
    """
    if not isinstance(value, Mapping):
        return None
    entry = {}
    for flag in FLAG_KEYS:
        if value.get(flag) is not None:
            entry[flag] = bool(value[flag])
    return entry


def _is_hidden(entry: Mapping[str, bool]) -> bool:
    return entry.get("isVisible") is False or entry.get("isActive") is False


def normalize_module_states(
    module_states: Mapping[str, Any] | None,
    observer: Observer | None = None,
) -> dict[str, dict[str, bool]]:
    """Make both spellings of every known section agree.

    * both keys present and either one hidden: both become fully hidden;
      otherwise both are kept as given (a missing flag is not read as true)
    * one key present: the other is written as a copy of it, fully hidden
      when the present key is hidden
    * neither present: the section stays absent

    Keys outside the known pairs are kept and anything other than a mapping
    reads as no states at all. The input is not modified.
    ``observer(short_key, long_key, action)`` is called for every adjustment.
    """
    if not isinstance(module_states, Mapping) or not module_states:
        return {}

    normalized: dict[str, dict[str, bool]] = {}
    for key, value in module_states.items():
        entry = _clean_entry(value)
        if entry is not None:
            normalized[key] = entry

    for short_key, long_key in SECTION_KEY_PAIRS:
        short_entry = normalized.get(short_key)
        long_entry = normalized.get(long_key)

        if short_entry is not None and long_entry is not None:
            if _is_hidden(short_entry) or _is_hidden(long_entry):
                normalized[short_key] = _hidden_state()
                normalized[long_key] = _hidden_state()
                if observer:
                    observer(short_key, long_key, "hidden")
        elif short_entry is not None:
            if _is_hidden(short_entry):
                normalized[short_key] = _hidden_state()
            normalized[long_key] = dict(normalized[short_key])
            if observer:
                observer(short_key, long_key, "synthesized_long")
        elif long_entry is not None:
            if _is_hidden(long_entry):
                normalized[long_key] = _hidden_state()
            normalized[short_key] = dict(normalized[long_key])
            if observer:
                observer(short_key, long_key, "synthesized_short")

    return normalized


def section_visibility(module_states: Mapping[str, Any] | None) -> dict[Section, bool]:
    """Visibility of every section; a section without an entry is visible."""
    states = module_states if isinstance(module_states, Mapping) else {}
    visibility = {}
    for section in Section:
        entry = _clean_entry(states.get(section.value))
        if entry is None:
            entry = _clean_entry(states.get(section.long_key))
        visibility[section] = entry is None or not _is_hidden(entry)
    return visibility


def is_section_visible(module_states: Mapping[str, Any] | None, section: Section) -> bool:
    return section_visibility(module_states)[section]


def log_adjustment(short_key: str, long_key: str, action: str) -> None:
    logger.debug("module state %s/%s: %s", short_key, long_key, action)
