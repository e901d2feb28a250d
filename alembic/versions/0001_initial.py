"""initial schema: users, cars, car_images, contact_submissions, site_images

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa

revision = "0001_initial"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(150), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password", sa.String(255), nullable=False),
        sa.Column("role", sa.String(20), nullable=False),
        sa.Column("isActive", sa.Boolean(), nullable=False),
        sa.Column("createdAt", sa.TIMESTAMP(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updatedAt", sa.TIMESTAMP(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_users_id", "users", ["id"])
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "cars",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("brand", sa.String(100), nullable=False),
        sa.Column("model", sa.String(100), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("price", sa.Integer(), nullable=False),
        sa.Column("mileage", sa.Integer(), nullable=False),
        sa.Column("fuelType", sa.String(20), nullable=False),
        sa.Column("transmission", sa.String(20), nullable=False),
        sa.Column("color", sa.String(50), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("featured", sa.Boolean(), nullable=False),
        sa.Column("createdAt", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("updatedAt", sa.TIMESTAMP(timezone=True), nullable=False),
    )
    op.create_index("ix_cars_brand", "cars", ["brand"])
    op.create_index("ix_cars_status", "cars", ["status"])
    op.create_index("ix_cars_createdAt", "cars", ["createdAt"])

    op.create_table(
        "car_images",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("carId", sa.String(36), sa.ForeignKey("cars.id", ondelete="CASCADE"), nullable=False),
        sa.Column("url", sa.String(500), nullable=False),
        sa.Column("alt", sa.String(255), nullable=True),
        sa.Column("order", sa.Integer(), nullable=False),
        sa.Column("isPrimary", sa.Boolean(), nullable=False),
        sa.Column("createdAt", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.UniqueConstraint("carId", "order", name="uq_car_image_order"),
    )
    op.create_index("ix_car_images_carId", "car_images", ["carId"])

    op.create_table(
        "contact_submissions",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(150), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("phone", sa.String(30), nullable=True),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("carId", sa.String(36), sa.ForeignKey("cars.id", ondelete="SET NULL"), nullable=True),
        sa.Column("status", sa.String(10), nullable=False),
        sa.Column("createdAt", sa.TIMESTAMP(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_contact_submissions_id", "contact_submissions", ["id"])
    op.create_index("ix_contact_submissions_status", "contact_submissions", ["status"])

    op.create_table(
        "site_images",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("section", sa.String(20), nullable=False),
        sa.Column("url", sa.String(500), nullable=False),
        sa.Column("title", sa.String(150), nullable=True),
        sa.Column("alt", sa.String(255), nullable=True),
        sa.Column("order", sa.Integer(), nullable=False),
        sa.Column("isActive", sa.Boolean(), nullable=False),
        sa.Column("createdAt", sa.TIMESTAMP(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updatedAt", sa.TIMESTAMP(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_site_images_id", "site_images", ["id"])
    op.create_index("ix_site_images_section", "site_images", ["section"])


def downgrade() -> None:
    op.drop_table("site_images")
    op.drop_table("contact_submissions")
    op.drop_table("car_images")
    op.drop_table("cars")
    op.drop_table("users")
