"""SQLAlchemy table definitions - dialect-agnostic (works with SQLite and PostgreSQL)."""

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    text,
)

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", String, primary_key=True),
    Column("email", String(320), nullable=False, unique=True),
    Column("password_hash", String(255), nullable=False),
    Column("full_name", String(255), nullable=False),
    Column("avatar", Text, nullable=True),
    Column("role", String(32), nullable=False),  # Role name
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)

Index("idx_users_role", users_table.c.role)

# At most one SUPER_ADMIN row can exist.
Index(
    "uq_users_single_super_admin",
    users_table.c.role,
    unique=True,
    sqlite_where=text("role = 'SUPER_ADMIN'"),
    postgresql_where=text("role = 'SUPER_ADMIN'"),
)


# ============================================================================
# CATEGORIES TABLE
# ============================================================================
categories_table = Table(
    "categories",
    metadata,
    Column("id", String, primary_key=True),
    Column("name_uz", String(255), nullable=False),
    Column("name_ru", String(255), nullable=True),
    Column("slug", String(255), nullable=False, unique=True),
)


# ============================================================================
# NEWSPAPERS TABLE
# ============================================================================
newspapers_table = Table(
    "newspapers",
    metadata,
    Column("id", String, primary_key=True),
    Column("title", String(255), nullable=False),
    Column("issue_date", Date, nullable=False),
    Column("pdf_url", Text, nullable=False),
    Column("cover_image", Text, nullable=True),
    Column("created_at", DateTime(timezone=True), nullable=False),
)

Index("idx_newspapers_issue_date", newspapers_table.c.issue_date)


# ============================================================================
# ARTICLES TABLE
# ============================================================================
articles_table = Table(
    "articles",
    metadata,
    Column("id", String, primary_key=True),
    Column("title_uz", String(500), nullable=False),
    Column("title_ru", String(500), nullable=True),
    Column("content_uz", Text, nullable=False),
    Column("content_ru", Text, nullable=True),
    Column("slug", String(255), nullable=False, unique=True),
    Column("thumbnail", Text, nullable=True),
    Column("view_count", Integer, nullable=False, default=0),
    Column("is_published", Boolean, nullable=False, default=False),
    Column(
        "category_id",
        String,
        ForeignKey("categories.id", ondelete="RESTRICT"),
        nullable=False,
    ),
    Column("author_id", String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "newspaper_id",
        String,
        ForeignKey("newspapers.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)

Index("idx_articles_category_id", articles_table.c.category_id)
Index("idx_articles_author_id", articles_table.c.author_id)
Index("idx_articles_newspaper_id", articles_table.c.newspaper_id)
Index("idx_articles_created_at", articles_table.c.created_at)


# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", String, primary_key=True),
    Column("text", Text, nullable=False),
    Column("author_id", String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "article_id",
        String,
        ForeignKey("articles.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("created_at", DateTime(timezone=True), nullable=False),
)

Index("idx_comments_article_id", comments_table.c.article_id)


# ============================================================================
# ADVERTISEMENTS TABLE
# ============================================================================
advertisements_table = Table(
    "advertisements",
    metadata,
    Column("id", String, primary_key=True),
    Column("title", String(255), nullable=False),
    Column("image_url", Text, nullable=False),
    Column("link", Text, nullable=True),
    Column("is_active", Boolean, nullable=False, default=True),
    Column("expiry_date", DateTime(timezone=True), nullable=True),
    Column("created_at", DateTime(timezone=True), nullable=False),
)
