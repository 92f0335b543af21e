"""
Initial schema: courses, students, themes, school settings and admin users

Revision ID: 0001_initial
Revises:
"""
from alembic import op
import sqlalchemy as sa

revision = "0001_initial"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps(with_updated=True):
    columns = [sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False)]
    if with_updated:
        columns.append(sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True))
    return columns


def upgrade():
    op.create_table(
        "courses",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("duration", sa.String(500), nullable=False),
        sa.Column("syllabus", sa.JSON(), nullable=False),
        sa.Column("instructor", sa.String(255), nullable=False, server_default=""),
        sa.Column("theme_id", sa.String(64), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_courses_id", "courses", ["id"])
    op.create_index("ix_courses_name", "courses", ["name"])

    op.create_table(
        "students",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("cpf", sa.String(14), nullable=False),
        sa.Column("course_id", sa.Uuid(), nullable=False),
        sa.Column("registration_date", sa.String(10), nullable=False),
        sa.Column("completion_date", sa.String(10), nullable=False, server_default=""),
        sa.Column("status", sa.String(20), nullable=False, server_default="PENDENTE"),
        sa.Column("issued_at", sa.String(10), nullable=True),
        sa.Column("verification_code", sa.String(8), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_students_id", "students", ["id"])
    op.create_index("ix_students_name", "students", ["name"])
    op.create_index("ix_students_cpf", "students", ["cpf"])
    op.create_index("ix_students_course_id", "students", ["course_id"])
    op.create_index("ix_students_status", "students", ["status"])
    op.create_index("ix_students_verification_code", "students", ["verification_code"], unique=True)

    op.create_table(
        "themes",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("primary_color", sa.String(7), nullable=False),
        sa.Column("accent_color", sa.String(7), nullable=False),
        sa.Column("ribbon_color", sa.String(7), nullable=False),
        *_timestamps(with_updated=False),
    )
    op.create_index("ix_themes_id", "themes", ["id"])

    op.create_table(
        "school_settings",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("school_name", sa.String(255), nullable=False),
        sa.Column("cnpj", sa.String(18), nullable=False, server_default=""),
        sa.Column("show_cnpj", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("instructor_name", sa.String(255), nullable=False),
        sa.Column("instructor_cpf", sa.String(14), nullable=False, server_default=""),
        sa.Column("show_instructor_cpf", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("instructor_title", sa.String(255), nullable=False, server_default=""),
        sa.Column("signature_image", sa.Text(), nullable=True),
        *_timestamps(),
    )

    op.create_table(
        "admin_users",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("username", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_admin_users_id", "admin_users", ["id"])
    op.create_index("ix_admin_users_username", "admin_users", ["username"], unique=True)


def downgrade():
    op.drop_table("admin_users")
    op.drop_table("school_settings")
    op.drop_table("themes")
    op.drop_table("students")
    op.drop_table("courses")
