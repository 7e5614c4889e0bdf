"""SQLAlchemy table definitions for StackIt.

Core tables only; rows are mapped to the immutable domain models by hand
in ``stackit.persistence.mappers``. They match the schema created by the
Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# QUESTIONS TABLE
# ============================================================================
questions_table = Table(
    "questions",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("title", String(200), nullable=False),
    Column("description", Text, nullable=False),
    Column(
        "tags",
        postgresql.ARRAY(String(50)),
        nullable=False,
        server_default="{}",
    ),
    Column("author_id", UUID(as_uuid=True), nullable=False),
    Column("votes", Integer, nullable=False, server_default="0"),
    Column("views", Integer, nullable=False, server_default="0"),
    Column(
        "answer_ids",
        postgresql.ARRAY(UUID(as_uuid=True)),
        nullable=False,
        server_default="{}",
    ),
    Column("accepted_answer_id", UUID(as_uuid=True), nullable=True),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("views >= 0", name="questions_views_non_negative"),
    CheckConstraint(
        "coalesce(array_length(tags, 1), 0) <= 5", name="questions_max_five_tags"
    ),
)

Index("idx_questions_created_at", questions_table.c.created_at.desc())
Index("idx_questions_author_id", questions_table.c.author_id)
Index("idx_questions_tags", questions_table.c.tags, postgresql_using="gin")

# ============================================================================
# ANSWERS TABLE
# ============================================================================
answers_table = Table(
    "answers",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("content", Text, nullable=False),
    Column("author_id", UUID(as_uuid=True), nullable=False),
    Column(
        "question_id",
        UUID(as_uuid=True),
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("votes", Integer, nullable=False, server_default="0"),
    Column("is_accepted", Boolean, nullable=False, server_default="false"),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_answers_question_id", answers_table.c.question_id)
Index("idx_answers_author_id", answers_table.c.author_id)
