"""service section definitions, blog, faq and menu tables

Revision ID: 0002_service_sections_blog_faq_menu
Revises: 0001_languages_and_services
Create Date: 2025-03-18 14:30:00

"""

from alembic import op
import sqlalchemy as sa


def _has_table(name: str) -> bool:
    bind = op.get_bind()
    inspector = sa.inspect(bind)
    return name in inspector.get_table_names()


revision = "0002_service_sections_blog_faq_menu"
down_revision = "0001_languages_and_services"
branch_labels = None
depends_on = None

# definition table -> (structural columns, translated columns)
SECTION_TABLES = {
    "service_overview_tab": (
        [
            sa.Column("value", sa.String(length=100), nullable=False),
            sa.Column("image_path", sa.String(length=255), nullable=True),
            sa.Column("image_alt", sa.String(length=255), nullable=True),
        ],
        [
            sa.Column("trigger_text", sa.String(length=255), nullable=False, server_default=""),
            sa.Column("title", sa.String(length=255), nullable=False, server_default=""),
            sa.Column("content", sa.Text(), nullable=False),
            sa.Column("button_text", sa.String(length=100), nullable=False, server_default=""),
            sa.Column("button_link", sa.String(length=255), nullable=True),
        ],
    ),
    "service_why_item": (
        [sa.Column("number", sa.String(length=10), nullable=False)],
        [
            sa.Column("title", sa.String(length=255), nullable=False, server_default=""),
            sa.Column("description", sa.Text(), nullable=False),
        ],
    ),
    "service_testimonial": (
        [
            sa.Column("stars", sa.Integer(), nullable=False, server_default="5"),
            sa.Column("image_url", sa.String(length=255), nullable=True),
        ],
        [
            sa.Column("text", sa.Text(), nullable=False),
            sa.Column("author", sa.String(length=255), nullable=False, server_default=""),
            sa.Column("treatment", sa.String(length=255), nullable=True),
        ],
    ),
    "service_recovery_item": (
        [
            sa.Column("image_url", sa.String(length=255), nullable=False),
            sa.Column("image_alt", sa.String(length=255), nullable=False, server_default=""),
        ],
        [
            sa.Column("title", sa.String(length=255), nullable=False, server_default=""),
            sa.Column("description", sa.Text(), nullable=False),
        ],
    ),
    "service_expert_item": (
        [
            sa.Column("image_url", sa.String(length=255), nullable=False),
            sa.Column("image_alt", sa.String(length=255), nullable=False, server_default=""),
        ],
        [
            sa.Column("name", sa.String(length=255), nullable=False, server_default=""),
            sa.Column("title", sa.String(length=255), nullable=False, server_default=""),
            sa.Column("description", sa.Text(), nullable=False),
            sa.Column("cta_text", sa.String(length=100), nullable=True),
        ],
    ),
    "service_pricing_package": (
        [
            sa.Column(
                "is_featured", sa.Boolean(), nullable=False, server_default=sa.sql.expression.false()
            )
        ],
        [
            sa.Column("title", sa.String(length=255), nullable=False, server_default=""),
            sa.Column("price", sa.String(length=100), nullable=False, server_default=""),
            sa.Column("features", sa.JSON(), nullable=True),
        ],
    ),
}


def upgrade() -> None:
    for name, (columns, translated) in SECTION_TABLES.items():
        if not _has_table(name):
            op.create_table(
                name,
                sa.Column("id", sa.Integer(), primary_key=True),
                sa.Column("service_id", sa.Integer(), nullable=False),
                *columns,
                sa.Column("order", sa.Integer(), nullable=False, server_default="0"),
                sa.ForeignKeyConstraint(["service_id"], ["service.id"], ondelete="CASCADE"),
            )
            op.create_index(f"ix_{name}_service_id", name, ["service_id"])
        tr_name = f"{name}_tr"
        if not _has_table(tr_name):
            op.create_table(
                tr_name,
                sa.Column("id", sa.Integer(), primary_key=True),
                sa.Column("definition_id", sa.Integer(), nullable=False),
                sa.Column("language_code", sa.String(length=10), nullable=False),
                *translated,
                sa.ForeignKeyConstraint(["definition_id"], [f"{name}.id"], ondelete="CASCADE"),
                sa.UniqueConstraint("definition_id", "language_code", name=f"uq_{tr_name}"),
            )
            op.create_index(f"ix_{tr_name}_definition_id", tr_name, ["definition_id"])

    if not _has_table("blog"):
        op.create_table(
            "blog",
            sa.Column("id", sa.Integer(), primary_key=True),
            sa.Column("cover_image_url", sa.String(length=255), nullable=True),
            sa.Column("is_published", sa.Boolean(), nullable=False, server_default=sa.sql.expression.false()),
            sa.Column("published_at", sa.DateTime(timezone=True), nullable=True),
            sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
            sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        )

    if not _has_table("blog_tr"):
        op.create_table(
            "blog_tr",
            sa.Column("id", sa.Integer(), primary_key=True),
            sa.Column("blog_id", sa.Integer(), nullable=False),
            sa.Column("language_code", sa.String(length=10), nullable=False),
            sa.Column("slug", sa.String(length=255), nullable=False),
            sa.Column("title", sa.String(length=255), nullable=False),
            sa.Column("full_description", sa.Text(), nullable=True),
            sa.Column("content", sa.Text(), nullable=True),
            sa.Column("toc_items", sa.JSON(), nullable=True),
            sa.ForeignKeyConstraint(["blog_id"], ["blog.id"], ondelete="CASCADE"),
            sa.UniqueConstraint("slug", "language_code", name="uq_blog_tr_slug_lang"),
            sa.UniqueConstraint("blog_id", "language_code", name="uq_blog_tr_blog_lang"),
        )
        op.create_index("ix_blog_tr_blog_id", "blog_tr", ["blog_id"])
        op.create_index("ix_blog_tr_language_code", "blog_tr", ["language_code"])
        op.create_index("ix_blog_tr_slug", "blog_tr", ["slug"])

    if not _has_table("faq"):
        op.create_table(
            "faq",
            sa.Column("id", sa.Integer(), primary_key=True),
            sa.Column("order", sa.Integer(), nullable=False, server_default="0"),
            sa.Column("is_published", sa.Boolean(), nullable=False, server_default=sa.sql.expression.true()),
        )

    if not _has_table("faq_tr"):
        op.create_table(
            "faq_tr",
            sa.Column("id", sa.Integer(), primary_key=True),
            sa.Column("faq_id", sa.Integer(), nullable=False),
            sa.Column("language_code", sa.String(length=10), nullable=False),
            sa.Column("question", sa.Text(), nullable=False),
            sa.Column("answer", sa.Text(), nullable=False),
            sa.ForeignKeyConstraint(["faq_id"], ["faq.id"], ondelete="CASCADE"),
            sa.UniqueConstraint("faq_id", "language_code", name="uq_faq_tr"),
        )
        op.create_index("ix_faq_tr_faq_id", "faq_tr", ["faq_id"])

    if not _has_table("menu_item"):
        op.create_table(
            "menu_item",
            sa.Column("id", sa.Integer(), primary_key=True),
            sa.Column("parent_id", sa.Integer(), nullable=True),
            sa.Column("position", sa.String(length=20), nullable=False, server_default="header"),
            sa.Column("item_type", sa.String(length=20), nullable=False, server_default="link"),
            sa.Column("url", sa.String(length=255), nullable=True),
            sa.Column("service_id", sa.Integer(), nullable=True),
            sa.Column("blog_id", sa.Integer(), nullable=True),
            sa.Column("open_in_new_tab", sa.Boolean(), nullable=False, server_default=sa.sql.expression.false()),
            sa.Column("sort_order", sa.Integer(), nullable=False, server_default="0"),
            sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.sql.expression.true()),
            sa.Column("icon", sa.String(length=64), nullable=True),
            sa.ForeignKeyConstraint(["parent_id"], ["menu_item.id"], ondelete="CASCADE"),
            sa.ForeignKeyConstraint(["service_id"], ["service.id"], ondelete="SET NULL"),
            sa.ForeignKeyConstraint(["blog_id"], ["blog.id"], ondelete="SET NULL"),
        )

    if not _has_table("menu_item_tr"):
        op.create_table(
            "menu_item_tr",
            sa.Column("id", sa.Integer(), primary_key=True),
            sa.Column("menu_item_id", sa.Integer(), nullable=False),
            sa.Column("language_code", sa.String(length=10), nullable=False),
            sa.Column("label", sa.String(length=100), nullable=False),
            sa.ForeignKeyConstraint(["menu_item_id"], ["menu_item.id"], ondelete="CASCADE"),
            sa.UniqueConstraint("menu_item_id", "language_code", name="uq_menu_item_tr"),
        )
        op.create_index("ix_menu_item_tr_menu_item_id", "menu_item_tr", ["menu_item_id"])


def downgrade() -> None:
    for name in ("menu_item_tr", "menu_item", "faq_tr", "faq", "blog_tr", "blog"):
        if _has_table(name):
            op.drop_table(name)
    for name in reversed(list(SECTION_TABLES)):
        for table in (f"{name}_tr", name):
            if _has_table(table):
                op.drop_table(table)
