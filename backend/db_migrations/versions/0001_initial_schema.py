"""initial schema

Revision ID: 0001
Revises:
Create Date: 2026-10-17
"""

from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None

PLAN_TYPES = ("FREE", "BASIC", "PREMIUM", "ENTERPRISE")
USER_ROLES = ("SUPER_ADMIN", "ADMIN", "TEACHER", "STUDENT")
FILE_STATUSES = ("PENDING", "APPROVED", "REJECTED")
FILE_TYPES = ("PDF", "DOC", "DOCX", "XLS", "XLSX", "PPT", "PPTX", "IMG", "JPG", "JPEG", "PNG", "GIF", "TXT")


def _timestamps():
    return [
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def _enum(values, name, length):
    return sa.Enum(*values, name=name, native_enum=False, length=length)


def upgrade():
    op.create_table(
        "institutions",
        *_timestamps(),
        sa.Column("name", sa.String(100), nullable=False, unique=True),
        sa.Column("code", sa.String(50), nullable=True, unique=True),
        sa.Column("description", sa.String(200), nullable=True),
        sa.Column("plan", _enum(PLAN_TYPES, "plantype", 20), nullable=False),
        sa.Column("max_users", sa.Integer(), nullable=False),
        sa.Column("max_storage_gb", sa.Integer(), nullable=False),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("active", sa.Boolean(), nullable=False),
    )
    op.create_index("ix_institutions_active", "institutions", ["active"])

    op.create_table(
        "users",
        *_timestamps(),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(100), nullable=False, unique=True),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("role", _enum(USER_ROLES, "userrole", 20), nullable=False),
        sa.Column("institution_id", sa.Integer(), sa.ForeignKey("institutions.id"), nullable=False),
        sa.Column("active", sa.Boolean(), nullable=False),
        sa.Column("last_login", sa.DateTime(timezone=True), nullable=True),
        sa.Column("reset_token", sa.String(255), nullable=True),
        sa.Column("reset_token_expires", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_users_institution_id", "users", ["institution_id"])
    op.create_index("ix_users_active", "users", ["active"])
    op.create_index("ix_users_reset_token", "users", ["reset_token"])

    op.create_table(
        "disciplines",
        *_timestamps(),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("code", sa.String(20), nullable=True),
        sa.Column("description", sa.String(500), nullable=True),
        sa.Column("institution_id", sa.Integer(), sa.ForeignKey("institutions.id"), nullable=False),
        sa.Column("active", sa.Boolean(), nullable=False),
        sa.UniqueConstraint("institution_id", "code", name="uq_discipline_institution_code"),
    )
    op.create_index("ix_disciplines_code", "disciplines", ["code"])
    op.create_index("ix_disciplines_institution_id", "disciplines", ["institution_id"])
    op.create_index("ix_disciplines_active", "disciplines", ["active"])

    op.create_table(
        "files",
        *_timestamps(),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("file_name", sa.String(500), nullable=False),
        sa.Column("file_type", _enum(FILE_TYPES, "filetype", 50), nullable=False),
        sa.Column("file_size", sa.BigInteger(), nullable=False),
        sa.Column("file_path", sa.String(500), nullable=True),
        sa.Column("description", sa.String(1000), nullable=True),
        sa.Column("discipline_id", sa.Integer(), sa.ForeignKey("disciplines.id"), nullable=False),
        sa.Column("institution_id", sa.Integer(), sa.ForeignKey("institutions.id"), nullable=False),
        sa.Column("uploaded_by_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("status", _enum(FILE_STATUSES, "filestatus", 20), nullable=False),
        sa.Column("download_count", sa.Integer(), nullable=False),
        sa.Column("approved_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("version", sa.String(20), nullable=True),
    )
    op.create_index("ix_files_file_type", "files", ["file_type"])
    op.create_index("ix_files_discipline_id", "files", ["discipline_id"])
    op.create_index("ix_files_institution_id", "files", ["institution_id"])
    op.create_index("ix_files_uploaded_by_id", "files", ["uploaded_by_id"])
    op.create_index("ix_files_status", "files", ["status"])

    op.create_table(
        "favorites",
        *_timestamps(),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("file_id", sa.Integer(), sa.ForeignKey("files.id"), nullable=False),
        sa.UniqueConstraint("user_id", "file_id", name="uq_favorite_user_file"),
    )
    op.create_index("ix_favorites_user_id", "favorites", ["user_id"])
    op.create_index("ix_favorites_file_id", "favorites", ["file_id"])

    op.create_table(
        "comments",
        *_timestamps(),
        sa.Column("content", sa.String(2000), nullable=False),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("file_id", sa.Integer(), sa.ForeignKey("files.id"), nullable=False),
        sa.Column("active", sa.Boolean(), nullable=False),
    )
    op.create_index("ix_comments_user_id", "comments", ["user_id"])
    op.create_index("ix_comments_file_id", "comments", ["file_id"])
    op.create_index("ix_comments_active", "comments", ["active"])


def downgrade():
    op.drop_table("comments")
    op.drop_table("favorites")
    op.drop_table("files")
    op.drop_table("disciplines")
    op.drop_table("users")
    op.drop_table("institutions")
