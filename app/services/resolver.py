"""Locale-aware lookup of publishable content by slug.

Slugs are unique per language only, so ``/en/hizmetler/anne-estetigi`` can
point at an English translation or, when the item was never translated to
English, at the default-language text of the same item.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.errors import ContentNotFound, StorageFailure

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DefinitionRecord:
    """One definition row joined with its translation for the resolved locale."""

    fields: dict[str, Any]
    translation: dict[str, Any] | None
    text_defaults: dict[str, Any]


@dataclass(frozen=True)
class ResolvedContent:
    item_id: int
    slug: str
    locale: str
    requested_locale: str
    is_fallback: bool = False
    fields: dict[str, Any] = field(default_factory=dict)
    item_fields: dict[str, Any] = field(default_factory=dict)
    assets: dict[str, list[dict[str, Any]]] = field(default_factory=dict)
    collections: dict[str, list[dict[str, Any]]] = field(default_factory=dict)
    definitions: dict[str, list[DefinitionRecord]] = field(default_factory=dict)
    module_states: dict[str, dict[str, bool]] = field(default_factory=dict)


def row_to_dict(row, columns) -> dict[str, Any]:
    return {name: getattr(row, name) for name in columns}


class SqlContentStore(ABC):
    """Read-only lookups over a ``*Translation`` table.

    Subclasses set the model attributes and implement ``published_flag``
    and ``build``. Database errors surface as ``StorageFailure``.
    """

    translation_model = None
    item_fk = "item_id"

    def __init__(self, db: Session):
        self.db = db

    def _load_options(self):
        return ()

    def _first(self, operation: str, stmt):
        try:
            return self.db.execute(stmt.options(*self._load_options())).scalars().first()
        except SQLAlchemyError as exc:
            raise StorageFailure(operation) from exc

    def find_translation_by_slug_and_locale(self, slug: str, locale: str):
        model = self.translation_model
        stmt = select(model).where(model.slug == slug, model.language_code == locale)
        return self._first("find_translation_by_slug_and_locale", stmt)

    def find_any_translation_by_slug(self, slug: str):
        # The first row by primary key wins when several items share a slug
        # across languages; callers must not rely on which one that is.
        model = self.translation_model
        stmt = select(model).where(model.slug == slug).order_by(model.id.asc())
        return self._first("find_any_translation_by_slug", stmt)

    def count_items_with_slug(self, slug: str) -> int:
        model = self.translation_model
        fk = getattr(model, self.item_fk)
        try:
            return len(set(self.db.execute(select(fk).where(model.slug == slug)).scalars()))
        except SQLAlchemyError as exc:
            raise StorageFailure("count_items_with_slug") from exc

    def find_translation_by_item_and_locale(self, item_id: int, locale: str):
        model = self.translation_model
        fk = getattr(model, self.item_fk)
        stmt = select(model).where(fk == item_id, model.language_code == locale)
        return self._first("find_translation_by_item_and_locale", stmt)

    def item_id(self, translation) -> int:
        return getattr(translation, self.item_fk)

    @abstractmethod
    def published_flag(self, translation) -> bool:
        ...

    @abstractmethod
    def build(self, translation, requested_locale: str) -> ResolvedContent:
        ...

    def is_published(self, translation) -> bool:
        try:
            return bool(self.published_flag(translation))
        except SQLAlchemyError as exc:
            raise StorageFailure("is_published") from exc

    def load(self, translation, requested_locale: str) -> ResolvedContent:
        try:
            return self.build(translation, requested_locale)
        except SQLAlchemyError as exc:
            raise StorageFailure("load") from exc


def resolve_content(
    store: SqlContentStore,
    slug: str,
    requested_locale: str,
    default_locale: str,
) -> ResolvedContent:
    """Find the content to show for ``slug`` under ``requested_locale``.

    Raises ``ContentNotFound`` when nothing publishable exists, including when
    the requested translation exists but its item is unpublished; that case
    never falls back to another language. ``StorageFailure`` propagates.
    """
    translation = store.find_translation_by_slug_and_locale(slug, requested_locale)
    if translation is not None:
        if not store.is_published(translation):
            raise ContentNotFound(slug, requested_locale)
        return store.load(translation, requested_locale)

    any_translation = store.find_any_translation_by_slug(slug)
    if any_translation is None:
        raise ContentNotFound(slug, requested_locale)

    if store.count_items_with_slug(slug) > 1:
        logger.warning(
            "slug %r is used by more than one content item; falling back via item %s",
            slug,
            store.item_id(any_translation),
        )

    fallback = store.find_translation_by_item_and_locale(
        store.item_id(any_translation), default_locale
    )
    if fallback is None or not store.is_published(fallback):
        raise ContentNotFound(slug, requested_locale)

    logger.info(
        "serving %s content for slug %r requested in %s",
        default_locale,
        slug,
        requested_locale,
    )
    return store.load(fallback, requested_locale)
