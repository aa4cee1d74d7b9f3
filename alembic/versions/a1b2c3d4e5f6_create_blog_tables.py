"""create_blog_tables

Revision ID: a1b2c3d4e5f6
Revises:
Create Date: 2026-10-19

Initial schema: users, media, the category tree, tags, posts with their
category/tag links, per-locale post translations and their SEO records.
"""

from __future__ import annotations

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "a1b2c3d4e5f6"
down_revision: str | None = None
branch_labels = None
depends_on = None

post_status = sa.Enum("DRAFT", "PENDING", "PUBLISHED", "PRIVATE", name="poststatus")


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True, index=True),
        sa.Column("username", sa.String, index=True),
        sa.Column("email", sa.String, nullable=False, unique=True),
        sa.Column("hashed_password", sa.String, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )

    op.create_table(
        "media",
        sa.Column("id", sa.Integer, primary_key=True, index=True),
        sa.Column("url", sa.String, nullable=False),
        sa.Column("alt_text", sa.String, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )

    op.create_table(
        "categories",
        sa.Column("id", sa.Integer, primary_key=True, index=True),
        sa.Column("name", sa.String, nullable=False),
        sa.Column("slug", sa.String, nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column(
            "parent_id",
            sa.Integer,
            sa.ForeignKey("categories.id", ondelete="SET NULL"),
            nullable=True,
        ),
    )
    op.create_index("ix_categories_slug", "categories", ["slug"], unique=True)
    op.create_index("ix_categories_parent_id", "categories", ["parent_id"])

    op.create_table(
        "tags",
        sa.Column("id", sa.Integer, primary_key=True, index=True),
        sa.Column("name", sa.String, nullable=False),
        sa.Column("slug", sa.String, nullable=False),
    )
    op.create_index("ix_tags_slug", "tags", ["slug"], unique=True)

    op.create_table(
        "posts",
        sa.Column("id", sa.Integer, primary_key=True, index=True, autoincrement=True),
        sa.Column("title", sa.String, nullable=False),
        sa.Column("slug", sa.String, nullable=False),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column("excerpt", sa.Text, nullable=True),
        sa.Column("status", post_status, nullable=False, server_default="DRAFT"),
        sa.Column("published_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("author_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False),
        sa.Column(
            "featured_image_id",
            sa.Integer,
            sa.ForeignKey("media.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_posts_slug", "posts", ["slug"], unique=True)
    op.create_index("ix_posts_author_id", "posts", ["author_id"])
    op.create_index("idx_post_status_published_at", "posts", ["status", "published_at"])

    op.create_table(
        "post_categories",
        sa.Column("post_id", sa.Integer, sa.ForeignKey("posts.id", ondelete="CASCADE"), primary_key=True),
        sa.Column(
            "category_id",
            sa.Integer,
            sa.ForeignKey("categories.id", ondelete="CASCADE"),
            primary_key=True,
        ),
    )

    op.create_table(
        "post_tags",
        sa.Column("post_id", sa.Integer, sa.ForeignKey("posts.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("tag_id", sa.Integer, sa.ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True),
    )

    op.create_table(
        "post_translations",
        sa.Column("id", sa.Integer, primary_key=True, index=True),
        sa.Column(
            "post_id",
            sa.Integer,
            sa.ForeignKey("posts.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("locale", sa.String(16), nullable=False),
        sa.Column("title", sa.String, nullable=False),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column("excerpt", sa.Text, nullable=True),
        sa.Column("slug", sa.String, nullable=False, unique=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint("post_id", "locale", name="uq_post_translation_locale"),
    )
    op.create_index("ix_post_translations_post_id", "post_translations", ["post_id"])
    op.create_index("ix_post_translations_locale", "post_translations", ["locale"])
    op.create_index("idx_pt_locale_slug", "post_translations", ["locale", "slug"])

    op.create_table(
        "seo",
        sa.Column("id", sa.Integer, primary_key=True, index=True),
        sa.Column(
            "translation_id",
            sa.Integer,
            sa.ForeignKey("post_translations.id", ondelete="CASCADE"),
            nullable=False,
            unique=True,
        ),
        sa.Column("meta_title", sa.String, nullable=True),
        sa.Column("meta_description", sa.Text, nullable=True),
        sa.Column("canonical_url", sa.String, nullable=True),
        sa.Column("robots", sa.String, nullable=True),
        sa.Column("og_title", sa.String, nullable=True),
        sa.Column("og_description", sa.Text, nullable=True),
        sa.Column("og_type", sa.String, nullable=True),
        sa.Column("og_url", sa.String, nullable=True),
        sa.Column("og_image_url", sa.String, nullable=True),
        sa.Column("og_image_alt", sa.String, nullable=True),
        sa.Column("twitter_card", sa.String, nullable=True),
        sa.Column("twitter_site", sa.String, nullable=True),
        sa.Column("twitter_creator", sa.String, nullable=True),
        sa.Column("event_name", sa.String, nullable=True),
        sa.Column("event_description", sa.Text, nullable=True),
        sa.Column("event_start_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("event_end_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("event_url", sa.String, nullable=True),
        sa.Column("event_image_url", sa.String, nullable=True),
        sa.Column("event_location_name", sa.String, nullable=True),
        sa.Column("event_location_street", sa.String, nullable=True),
        sa.Column("event_location_city", sa.String, nullable=True),
        sa.Column("event_location_region", sa.String, nullable=True),
        sa.Column("event_location_postal", sa.String, nullable=True),
        sa.Column("event_location_country", sa.String, nullable=True),
    )


def downgrade() -> None:
    op.drop_table("seo")
    op.drop_index("idx_pt_locale_slug", table_name="post_translations")
    op.drop_index("ix_post_translations_locale", table_name="post_translations")
    op.drop_index("ix_post_translations_post_id", table_name="post_translations")
    op.drop_table("post_translations")
    op.drop_table("post_tags")
    op.drop_table("post_categories")
    op.drop_index("idx_post_status_published_at", table_name="posts")
    op.drop_index("ix_posts_author_id", table_name="posts")
    op.drop_index("ix_posts_slug", table_name="posts")
    op.drop_table("posts")
    post_status.drop(op.get_bind(), checkfirst=True)
    op.drop_index("ix_tags_slug", table_name="tags")
    op.drop_table("tags")
    op.drop_index("ix_categories_parent_id", table_name="categories")
    op.drop_index("ix_categories_slug", table_name="categories")
    op.drop_table("categories")
    op.drop_table("media")
    op.drop_table("users")
