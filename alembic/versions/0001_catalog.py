"""gift catalog, testimonials and analytics tables"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "0001_catalog"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "gifts",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("price", sa.Float(), nullable=False),
        sa.Column("category", sa.String(length=50), nullable=False),
        sa.Column("occasion", sa.String(length=50), nullable=True),
        sa.Column("relationship_stage", sa.String(length=50), nullable=True),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column("affiliate_url", sa.Text(), nullable=True),
        sa.Column("retailer", sa.Text(), nullable=True),
        sa.Column("delivery_days", sa.Integer(), server_default="0", nullable=False),
        sa.Column("success_rate", sa.Integer(), server_default="0", nullable=False),
        sa.Column("total_reviews", sa.Integer(), server_default="0", nullable=False),
        sa.Column("is_active", sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_gifts")),
    )
    op.create_index(op.f("ix_gifts_price"), "gifts", ["price"], unique=False)
    op.create_index(op.f("ix_gifts_category"), "gifts", ["category"], unique=False)
    op.create_index(op.f("ix_gifts_occasion"), "gifts", ["occasion"], unique=False)
    op.create_index(op.f("ix_gifts_success_rate"), "gifts", ["success_rate"], unique=False)
    op.create_index(op.f("ix_gifts_is_active"), "gifts", ["is_active"], unique=False)

    op.create_table(
        "testimonials",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("gift_id", sa.Integer(), nullable=False),
        sa.Column("reviewer_name", sa.Text(), nullable=False),
        sa.Column("relationship_length", sa.Text(), nullable=True),
        sa.Column("partner_rating", sa.Integer(), nullable=False),
        sa.Column("testimonial_text", sa.Text(), nullable=False),
        sa.Column("occasion", sa.String(length=50), nullable=True),
        sa.Column("helpful_votes", sa.Integer(), server_default="0", nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.CheckConstraint(
            "partner_rating >= 1 AND partner_rating <= 5",
            name=op.f("ck_testimonials_partner_rating_range"),
        ),
        sa.ForeignKeyConstraint(
            ["gift_id"],
            ["gifts.id"],
            name=op.f("fk_testimonials_gift_id_gifts"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_testimonials")),
    )
    op.create_index(op.f("ix_testimonials_gift_id"), "testimonials", ["gift_id"], unique=False)
    op.create_index(op.f("ix_testimonials_partner_rating"), "testimonials", ["partner_rating"], unique=False)

    op.create_table(
        "analytics",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("event_type", sa.String(length=100), nullable=False),
        sa.Column("gift_id", sa.Integer(), nullable=True),
        sa.Column("session_id", sa.String(length=100), nullable=True),
        sa.Column("metadata", sa.JSON(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(
            ["gift_id"],
            ["gifts.id"],
            name=op.f("fk_analytics_gift_id_gifts"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_analytics")),
    )
    op.create_index(op.f("ix_analytics_event_type"), "analytics", ["event_type"], unique=False)
    op.create_index(op.f("ix_analytics_created_at"), "analytics", ["created_at"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_analytics_created_at"), table_name="analytics")
    op.drop_index(op.f("ix_analytics_event_type"), table_name="analytics")
    op.drop_table("analytics")
    op.drop_index(op.f("ix_testimonials_partner_rating"), table_name="testimonials")
    op.drop_index(op.f("ix_testimonials_gift_id"), table_name="testimonials")
    op.drop_table("testimonials")
    op.drop_index(op.f("ix_gifts_is_active"), table_name="gifts")
    op.drop_index(op.f("ix_gifts_success_rate"), table_name="gifts")
    op.drop_index(op.f("ix_gifts_occasion"), table_name="gifts")
    op.drop_index(op.f("ix_gifts_category"), table_name="gifts")
    op.drop_index(op.f("ix_gifts_price"), table_name="gifts")
    op.drop_table("gifts")
