"""initial_schema

Create the forum schema:
- Users (identified by nickname everywhere else)
- Forums (denormalized post/thread counters)
- Threads (vote tally kept on the row)
- Posts (materialized path as BIGINT[])
- Votes (one per user and thread)

Revision ID: 3f1c2a9d7b40
Revises:
Create Date: 2026-10-19 10:12:44.318201

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("nickname", sa.String(255), nullable=False),
        sa.Column("fullname", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("about", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("nickname", name="users_nickname_key"),
    )
    op.execute("CREATE UNIQUE INDEX idx_users_nickname_lower ON users (lower(nickname))")
    op.execute("CREATE UNIQUE INDEX idx_users_email_lower ON users (lower(email))")

    # ========================================================================
    # FORUMS table
    # ========================================================================
    op.create_table(
        "forums",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("slug", sa.String(255), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("user", sa.String(255), nullable=False),  # Owner nickname
        sa.Column("posts", sa.BigInteger(), nullable=False, server_default="0"),
        sa.Column("threads", sa.Integer(), nullable=False, server_default="0"),
        sa.ForeignKeyConstraint(["user"], ["users.nickname"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug", name="forums_slug_key"),
    )
    op.execute("CREATE UNIQUE INDEX idx_forums_slug_lower ON forums (lower(slug))")

    # ========================================================================
    # THREADS table
    # ========================================================================
    op.create_table(
        "threads",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("slug", sa.String(255), nullable=True),
        sa.Column("forum", sa.String(255), nullable=False),
        sa.Column("author", sa.String(255), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("votes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["forum"], ["forums.slug"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["author"], ["users.nickname"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug", name="threads_slug_key"),
    )
    op.execute("CREATE UNIQUE INDEX idx_threads_slug_lower ON threads (lower(slug))")
    op.create_index(
        "idx_threads_forum_created_at", "threads", ["forum", "created_at"]
    )

    # ========================================================================
    # POSTS table
    # ========================================================================
    # Ids are drawn from the sequence before the INSERT so that the path,
    # which ends in the post's own id, is written together with the row.
    op.execute("CREATE SEQUENCE posts_id_seq")
    op.create_table(
        "posts",
        sa.Column(
            "id",
            sa.BigInteger(),
            server_default=sa.text("nextval('posts_id_seq')"),
            nullable=False,
        ),
        sa.Column("thread_id", sa.BigInteger(), nullable=False),
        sa.Column("forum", sa.String(255), nullable=False),
        sa.Column("author", sa.String(255), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("parent_id", sa.BigInteger(), nullable=True),
        sa.Column("is_edited", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("path", postgresql.ARRAY(sa.BigInteger()), nullable=False),
        sa.ForeignKeyConstraint(["thread_id"], ["threads.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["forum"], ["forums.slug"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["author"], ["users.nickname"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["parent_id"], ["posts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("cardinality(path) >= 1", name="path_not_empty"),
    )
    op.execute("ALTER SEQUENCE posts_id_seq OWNED BY posts.id")
    op.create_index("idx_posts_thread_id_id", "posts", ["thread_id", "id"])
    op.create_index("idx_posts_thread_id_path", "posts", ["thread_id", "path"])
    op.create_index("idx_posts_parent_id", "posts", ["parent_id"])
    # Branch lookups for parent_tree pagination
    op.execute(
        "CREATE INDEX idx_posts_thread_id_branch ON posts (thread_id, (path[1]))"
    )

    # ========================================================================
    # VOTES table
    # ========================================================================
    op.create_table(
        "votes",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("nickname", sa.String(255), nullable=False),
        sa.Column("thread_id", sa.BigInteger(), nullable=False),
        sa.Column("voice", sa.SmallInteger(), nullable=False),
        sa.ForeignKeyConstraint(["nickname"], ["users.nickname"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["thread_id"], ["threads.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("nickname", "thread_id", name="unique_vote"),
        sa.CheckConstraint("voice IN (-1, 1)", name="voice_is_unit"),
    )
    op.create_index("idx_votes_thread_id", "votes", ["thread_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("votes")
    op.drop_table("posts")  # Drops the owned posts_id_seq as well
    op.drop_table("threads")
    op.drop_table("forums")
    op.drop_table("users")
