"""Initial schema: users, skills and requests

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

experience_level = sa.Enum("Beginner", "Intermediate", "Expert", name="experience_level")
request_status = sa.Enum("Pending", "Accepted", "Rejected", "Completed", name="request_status")


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("phone", sa.String(15), nullable=False),
        sa.Column("hashed_password", sa.String(255), nullable=False),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("profile_image", sa.String(500), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)
    op.create_index("ix_users_phone", "users", ["phone"], unique=True)

    op.create_table(
        "skills",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("user_id", sa.String(36), nullable=False),
        sa.Column("category", sa.String(100), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("experience_level", experience_level, nullable=False),
        sa.Column("availability", sa.JSON(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_skills_user_id", "skills", ["user_id"], unique=False)
    op.create_index("ix_skills_category", "skills", ["category"], unique=False)
    op.create_index("ix_skills_is_active", "skills", ["is_active"], unique=False)

    op.create_table(
        "requests",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("skill_id", sa.String(36), nullable=False),
        sa.Column("from_user_id", sa.String(36), nullable=False),
        sa.Column("to_user_id", sa.String(36), nullable=False),
        sa.Column("message", sa.Text(), nullable=True),
        sa.Column("status", request_status, nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["skill_id"], ["skills.id"]),
        sa.ForeignKeyConstraint(["from_user_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["to_user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_requests_skill_id", "requests", ["skill_id"], unique=False)
    op.create_index("ix_requests_from_user_id", "requests", ["from_user_id"], unique=False)
    op.create_index("ix_requests_to_user_id", "requests", ["to_user_id"], unique=False)
    op.create_index("ix_requests_status", "requests", ["status"], unique=False)
    op.create_index(
        "uq_requests_pending",
        "requests",
        ["skill_id", "from_user_id"],
        unique=True,
        sqlite_where=sa.text("status = 'Pending'"),
        postgresql_where=sa.text("status = 'Pending'"),
    )


def downgrade() -> None:
    op.drop_index("uq_requests_pending", "requests")
    op.drop_index("ix_requests_status", "requests")
    op.drop_index("ix_requests_to_user_id", "requests")
    op.drop_index("ix_requests_from_user_id", "requests")
    op.drop_index("ix_requests_skill_id", "requests")
    op.drop_table("requests")
    op.drop_index("ix_skills_is_active", "skills")
    op.drop_index("ix_skills_category", "skills")
    op.drop_index("ix_skills_user_id", "skills")
    op.drop_table("skills")
    op.drop_index("ix_users_phone", "users")
    op.drop_index("ix_users_email", "users")
    op.drop_table("users")
    request_status.drop(op.get_bind(), checkfirst=True)
    experience_level.drop(op.get_bind(), checkfirst=True)
