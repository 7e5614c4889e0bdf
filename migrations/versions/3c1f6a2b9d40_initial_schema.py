"""initial_schema

Create the StackIt schema:
- Questions (tags and answer references as arrays, soft delete)
- Answers (back-reference to their question, accepted flag)

Revision ID: 3c1f6a2b9d40
Revises:
Create Date: 2026-10-19 09:12:44.512310

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f6a2b9d40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "questions",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column(
            "tags",
            postgresql.ARRAY(sa.String(50)),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("author_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("votes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("views", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "answer_ids",
            postgresql.ARRAY(postgresql.UUID(as_uuid=True)),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("accepted_answer_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.CheckConstraint("views >= 0", name="questions_views_non_negative"),
        sa.CheckConstraint(
            "coalesce(array_length(tags, 1), 0) <= 5", name="questions_max_five_tags"
        ),
    )
    op.create_index(
        "idx_questions_created_at",
        "questions",
        [sa.text("created_at DESC")],
    )
    op.create_index("idx_questions_author_id", "questions", ["author_id"])
    # GIN index serves the tag overlap (&&) filter
    op.create_index(
        "idx_questions_tags", "questions", ["tags"], postgresql_using="gin"
    )

    op.create_table(
        "answers",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("author_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column(
            "question_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("questions.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("votes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_accepted", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
    )
    op.create_index("idx_answers_question_id", "answers", ["question_id"])
    op.create_index("idx_answers_author_id", "answers", ["author_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_answers_author_id", table_name="answers")
    op.drop_index("idx_answers_question_id", table_name="answers")
    op.drop_table("answers")

    op.drop_index("idx_questions_tags", table_name="questions")
    op.drop_index("idx_questions_author_id", table_name="questions")
    op.drop_index("idx_questions_created_at", table_name="questions")
    op.drop_table("questions")
