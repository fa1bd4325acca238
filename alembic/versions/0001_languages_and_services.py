"""languages, services and their per-language text

Revision ID: 0001_languages_and_services
Revises:
Create Date: 2025-03-10 09:00:00

"""

from alembic import op
import sqlalchemy as sa


def _has_table(name: str) -> bool:
    bind = op.get_bind()
    inspector = sa.inspect(bind)
    return name in inspector.get_table_names()


revision = "0001_languages_and_services"
down_revision = None
branch_labels = None
depends_on = None


def _translation_child(name: str, *columns: sa.Column) -> None:
    if _has_table(name):
        return
    op.create_table(
        name,
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("translation_id", sa.Integer(), nullable=False),
        *columns,
        sa.Column("order", sa.Integer(), nullable=False, server_default="0"),
        sa.ForeignKeyConstraint(["translation_id"], ["service_tr.id"], ondelete="CASCADE"),
    )
    op.create_index(f"ix_{name}_translation_id", name, ["translation_id"])


def upgrade() -> None:
    if not _has_table("language"):
        op.create_table(
            "language",
            sa.Column("id", sa.Integer(), primary_key=True),
            sa.Column("code", sa.String(length=10), nullable=False),
            sa.Column("name", sa.String(length=100), nullable=False),
            sa.Column("menu_label", sa.String(length=20), nullable=True),
            sa.Column("flag_code", sa.String(length=10), nullable=True),
            sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.sql.expression.true()),
            sa.Column("is_default", sa.Boolean(), nullable=False, server_default=sa.sql.expression.false()),
        )
        op.create_index("ix_language_code", "language", ["code"], unique=True)

    if not _has_table("service"):
        op.create_table(
            "service",
            sa.Column("id", sa.Integer(), primary_key=True),
            sa.Column("published", sa.Boolean(), nullable=False, server_default=sa.sql.expression.false()),
            sa.Column("hero_image_url", sa.String(length=255), nullable=True),
            sa.Column("hero_image_alt", sa.String(length=255), nullable=True),
            sa.Column("why_background_image_url", sa.String(length=255), nullable=True),
            sa.Column("cta_background_image_url", sa.String(length=255), nullable=True),
            sa.Column("cta_main_image_url", sa.String(length=255), nullable=True),
            sa.Column("cta_main_image_alt", sa.String(length=255), nullable=True),
            sa.Column("intro_video_id", sa.String(length=50), nullable=True),
            sa.Column("module_states", sa.JSON(), nullable=True),
            sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
            sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        )

    if not _has_table("service_image"):
        op.create_table(
            "service_image",
            sa.Column("id", sa.Integer(), primary_key=True),
            sa.Column("service_id", sa.Integer(), nullable=False),
            sa.Column("kind", sa.String(length=20), nullable=False),
            sa.Column("src", sa.String(length=255), nullable=False),
            sa.Column("alt", sa.String(length=255), nullable=False, server_default=""),
            sa.Column("order", sa.Integer(), nullable=False, server_default="0"),
            sa.ForeignKeyConstraint(["service_id"], ["service.id"], ondelete="CASCADE"),
        )
        op.create_index("ix_service_image_service_id", "service_image", ["service_id"])

    if not _has_table("service_tr"):
        text_columns = [
            sa.Column(name, sa.Text(), nullable=True)
            for name in (
                "description",
                "toc_author_info",
                "toc_cta_description",
                "intro_description",
                "overview_section_description",
                "gallery_section_description",
                "steps_section_description",
                "recovery_section_description",
                "cta_description",
                "pricing_section_description",
                "faq_section_description",
            )
        ]
        string_columns = [
            sa.Column(name, sa.String(length=length), nullable=True)
            for name, length in (
                ("breadcrumb", 255),
                ("toc_title", 255),
                ("intro_title", 255),
                ("intro_primary_button_text", 100),
                ("intro_primary_button_link", 255),
                ("intro_secondary_button_text", 100),
                ("intro_secondary_button_link", 255),
                ("overview_section_title", 255),
                ("why_section_title", 255),
                ("gallery_section_title", 255),
                ("testimonials_section_title", 255),
                ("steps_section_title", 255),
                ("recovery_section_title", 255),
                ("cta_tagline", 255),
                ("cta_title", 255),
                ("cta_button_text", 100),
                ("cta_button_link", 255),
                ("cta_avatar_text", 255),
                ("pricing_section_title", 255),
                ("experts_section_title", 255),
                ("experts_tagline", 255),
                ("faq_section_title", 255),
                ("meta_title", 255),
                ("meta_description", 255),
                ("meta_keywords", 255),
            )
        ]
        op.create_table(
            "service_tr",
            sa.Column("id", sa.Integer(), primary_key=True),
            sa.Column("service_id", sa.Integer(), nullable=False),
            sa.Column("language_code", sa.String(length=10), nullable=False),
            sa.Column("slug", sa.String(length=255), nullable=False),
            sa.Column("title", sa.String(length=255), nullable=False),
            *text_columns,
            *string_columns,
            sa.ForeignKeyConstraint(["service_id"], ["service.id"], ondelete="CASCADE"),
            sa.UniqueConstraint("slug", "language_code", name="uq_service_tr_slug_lang"),
            sa.UniqueConstraint("service_id", "language_code", name="uq_service_tr_service_lang"),
        )
        op.create_index("ix_service_tr_service_id", "service_tr", ["service_id"])
        op.create_index("ix_service_tr_language_code", "service_tr", ["language_code"])
        op.create_index("ix_service_tr_slug", "service_tr", ["slug"])

    _translation_child(
        "service_toc_item",
        sa.Column("text", sa.String(length=255), nullable=False),
        sa.Column("is_bold", sa.Boolean(), nullable=False, server_default=sa.sql.expression.false()),
        sa.Column("level", sa.Integer(), nullable=True),
    )
    _translation_child(
        "service_intro_link",
        sa.Column("target_id", sa.String(length=100), nullable=False),
        sa.Column("number", sa.String(length=10), nullable=False),
        sa.Column("text", sa.String(length=255), nullable=False),
    )
    _translation_child(
        "service_step",
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("link_text", sa.String(length=255), nullable=True),
    )
    _translation_child(
        "service_faq",
        sa.Column("question", sa.Text(), nullable=False),
        sa.Column("answer", sa.Text(), nullable=False),
    )


def downgrade() -> None:
    for name in (
        "service_faq",
        "service_step",
        "service_intro_link",
        "service_toc_item",
        "service_tr",
        "service_image",
        "service",
        "language",
    ):
        if _has_table(name):
            op.drop_table(name)
