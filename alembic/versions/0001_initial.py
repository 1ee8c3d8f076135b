"""members, relationship types and relationships

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "0001_initial"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "members",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("first_name", sa.String(length=255), nullable=False),
        sa.Column("middle_name", sa.String(length=255), nullable=True),
        sa.Column("last_name", sa.String(length=255), nullable=False),
        sa.Column("date_of_birth", sa.Date(), nullable=False),
        sa.Column("is_alive", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("date_of_death", sa.Date(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.CheckConstraint(
            "(is_alive AND date_of_death IS NULL) OR (NOT is_alive AND date_of_death IS NOT NULL)",
            name="ck_members_death_matches_alive",
        ),
        sa.CheckConstraint(
            "date_of_death IS NULL OR date_of_death >= date_of_birth",
            name="ck_members_death_after_birth",
        ),
    )

    op.create_table(
        "relationship_types",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=100), nullable=False, unique=True),
    )

    op.create_table(
        "relationships",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("member_id_1", sa.Integer(), sa.ForeignKey("members.id"), nullable=False),
        sa.Column("member_id_2", sa.Integer(), sa.ForeignKey("members.id"), nullable=False),
        sa.Column(
            "relationship_type_id",
            sa.Integer(),
            sa.ForeignKey("relationship_types.id"),
            nullable=False,
        ),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.CheckConstraint("member_id_1 <> member_id_2", name="ck_relationships_distinct_members"),
    )
    op.create_index("ix_relationships_member_1", "relationships", ["member_id_1"])
    op.create_index("ix_relationships_member_2", "relationships", ["member_id_2"])


def downgrade() -> None:
    op.drop_index("ix_relationships_member_2", table_name="relationships")
    op.drop_index("ix_relationships_member_1", table_name="relationships")
    op.drop_table("relationships")
    op.drop_table("relationship_types")
    op.drop_table("members")
