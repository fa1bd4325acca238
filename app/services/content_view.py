"""Flatten resolved content into the plain shape templates and the API use."""

from typing import Any, Iterable, Mapping

from app.services.module_state import section_visibility
from app.services.resolver import DefinitionRecord, ResolvedContent


def _copy_default(value):
    return list(value) if isinstance(value, (list, tuple)) else value


def sorted_by_order(records: Iterable[Mapping[str, Any]]) -> list[dict[str, Any]]:
    # sorted() is stable, so equal orders keep their relative position
    return [dict(r) for r in sorted(records, key=lambda r: r.get("order") or 0)]


def join_definition(definition: DefinitionRecord) -> dict[str, Any]:
    record = dict(definition.fields)
    translation = definition.translation or {}
    for name, default in definition.text_defaults.items():
        value = translation.get(name)
        record[name] = _copy_default(default) if value is None else _copy_default(value)
    return record


def adapt(resolved: ResolvedContent) -> dict[str, Any]:
    view: dict[str, Any] = {
        "id": resolved.item_id,
        "slug": resolved.slug,
        "locale": resolved.locale,
        "requested_locale": resolved.requested_locale,
        "is_fallback": resolved.is_fallback,
    }
    view.update(resolved.fields)
    view.update(resolved.item_fields)
    for name, records in resolved.assets.items():
        view[name] = sorted_by_order(records)
    for name, records in resolved.collections.items():
        view[name] = sorted_by_order(records)
    for name, definitions in resolved.definitions.items():
        view[name] = sorted_by_order(join_definition(d) for d in definitions)
    view["sections"] = {
        section.value: visible
        for section, visible in section_visibility(resolved.module_states).items()
    }
    return view
