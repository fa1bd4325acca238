from sqlalchemy import select
from sqlalchemy.orm import selectinload

from app.models.blog import Blog
from app.models.menu import MenuItem
from app.models.service import Service


def _is_path_active(url: str | None, current_path: str | None) -> bool:
    if not url or not current_path:
        return False
    normalized_item = url if url == "/" else url.rstrip("/")
    normalized_current = current_path if current_path == "/" else current_path.rstrip("/")
    return normalized_current == normalized_item or (
        normalized_item != "/" and normalized_current.startswith(normalized_item + "/")
    )


def _slug_in(entity, lang: str) -> str | None:
    if entity is None:
        return None
    tr = next((t for t in entity.translations if t.language_code == lang), None)
    return tr.slug if tr else None


def _item_href(item: MenuItem, lang: str) -> str:
    if item.item_type == "service":
        slug = _slug_in(item.service, lang)
        return f"/{lang}/hizmetler/{slug}" if slug else "#"
    if item.item_type == "blog":
        slug = _slug_in(item.blog, lang)
        return f"/{lang}/blog/{slug}" if slug else "#"
    return item.url or "#"


def get_menu_tree(
    db,
    lang: str,
    position: str = "header",
    current_path: str | None = None,
):
    items = (
        db.execute(
            select(MenuItem)
            .options(
                selectinload(MenuItem.translations),
                selectinload(MenuItem.service).selectinload(Service.translations),
                selectinload(MenuItem.blog).selectinload(Blog.translations),
            )
            .where(
                MenuItem.position.in_([position, "both"]), MenuItem.is_active == True
            )
            .order_by(
                MenuItem.sort_order.asc(),
                MenuItem.id.asc(),
            )
        )
        .scalars()
        .all()
    )

    # map children
    by_parent = {}
    for it in items:
        by_parent.setdefault(it.parent_id, []).append(it)

    def build(node):
        translation = node.get_translation(lang)
        if translation is None:
            # untranslated items are hidden in that language, together with their children
            return None
        children = [c for c in (build(ch) for ch in by_parent.get(node.id, [])) if c]
        href = _item_href(node, lang)
        active = _is_path_active(href, current_path) or any(
            ch["active"] for ch in children
        )
        return {
            "id": node.id,
            "label": translation.label,
            "url": href,
            "open_in_new_tab": node.open_in_new_tab,
            "target": "_blank" if node.open_in_new_tab else "_self",
            "icon": node.icon,
            "children": children,
            "active": active,
        }

    roots = [it for it in items if it.parent_id is None]
    return [node for node in (build(r) for r in roots) if node]
