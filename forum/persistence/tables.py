"""SQLAlchemy table definitions for the forum.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Sequence,
    SmallInteger,
    String,
    Table,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column("nickname", String(255), nullable=False, unique=True),
    Column("fullname", String(255), nullable=False),
    Column("email", String(255), nullable=False),
    Column("about", Text, nullable=True),
)

# Nickname lookups are case-insensitive
Index("idx_users_nickname_lower", func.lower(users_table.c.nickname), unique=True)
Index("idx_users_email_lower", func.lower(users_table.c.email), unique=True)

# ============================================================================
# FORUMS TABLE
# ============================================================================
forums_table = Table(
    "forums",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column("slug", String(255), nullable=False, unique=True),
    Column("title", String(255), nullable=False),
    Column(
        "user",
        String(255),
        ForeignKey("users.nickname", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("posts", BigInteger, nullable=False, server_default="0"),
    Column("threads", Integer, nullable=False, server_default="0"),
)

Index("idx_forums_slug_lower", func.lower(forums_table.c.slug), unique=True)

# ============================================================================
# THREADS TABLE
# ============================================================================
threads_table = Table(
    "threads",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column("slug", String(255), nullable=True, unique=True),
    Column(
        "forum",
        String(255),
        ForeignKey("forums.slug", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "author",
        String(255),
        ForeignKey("users.nickname", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("title", String(255), nullable=False),
    Column("message", Text, nullable=False),
    Column("votes", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_threads_slug_lower", func.lower(threads_table.c.slug), unique=True)
Index("idx_threads_forum_created_at", threads_table.c.forum, threads_table.c.created_at)

# ============================================================================
# POSTS TABLE
# ============================================================================
# Ids are reserved from this sequence before a batch is inserted, so the
# path (which embeds the id) is written by the same INSERT as the row.
posts_id_seq = Sequence("posts_id_seq", metadata=metadata)

posts_table = Table(
    "posts",
    metadata,
    Column(
        "id",
        BigInteger,
        posts_id_seq,
        primary_key=True,
        server_default=posts_id_seq.next_value(),
    ),
    Column(
        "thread_id",
        BigInteger,
        ForeignKey("threads.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "forum",
        String(255),
        ForeignKey("forums.slug", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "author",
        String(255),
        ForeignKey("users.nickname", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("message", Text, nullable=False),
    Column(
        "parent_id",
        BigInteger,
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("is_edited", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    # Materialized path: ancestor ids from the top-level post down to this post
    Column("path", ARRAY(BigInteger), nullable=False),
    CheckConstraint("cardinality(path) >= 1", name="path_not_empty"),
)

Index("idx_posts_thread_id_id", posts_table.c.thread_id, posts_table.c.id)
Index("idx_posts_thread_id_path", posts_table.c.thread_id, posts_table.c.path)
Index("idx_posts_parent_id", posts_table.c.parent_id)
# Note: the (thread_id, (path[1])) expression index is created in the migration

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column(
        "nickname",
        String(255),
        ForeignKey("users.nickname", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "thread_id",
        BigInteger,
        ForeignKey("threads.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("voice", SmallInteger, nullable=False),
    CheckConstraint("voice IN (-1, 1)", name="voice_is_unit"),
    UniqueConstraint("nickname", "thread_id", name="unique_vote"),
)

Index("idx_votes_thread_id", votes_table.c.thread_id)
