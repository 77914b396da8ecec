"""Initial schema - users and their profile records, vacancies, applications, blogs, solutions

Revision ID: 001_initial
Revises:
Create Date: 2026-10-16

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list:
    return [
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("first_name", sa.String(length=100), nullable=False),
        sa.Column("last_name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=100), nullable=True),
        sa.Column("slug", sa.String(length=255), nullable=False),
        sa.Column("image", sa.String(length=512), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("show_curriculum", sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)
    op.create_index(op.f("ix_users_slug"), "users", ["slug"], unique=True)

    op.create_table(
        "card_configurations",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("id_user", sa.String(length=36), nullable=False),
        sa.Column("image_size", sa.Integer(), nullable=True),
        sa.Column("image_left_offset", sa.String(length=50), nullable=True),
        sa.Column("bg_color", sa.String(length=20), nullable=True),
        sa.Column("text_above", sa.Text(), nullable=True),
        sa.Column("text_above_color", sa.String(length=20), nullable=True),
        sa.Column("above_font_family", sa.String(length=255), nullable=True),
        sa.Column("above_font_size", sa.String(length=50), nullable=True),
        sa.Column("above_font_weight", sa.String(length=50), nullable=True),
        sa.Column("above_letter_spacing", sa.String(length=50), nullable=True),
        sa.Column("above_text_transform", sa.String(length=50), nullable=True),
        sa.Column("above_text_top_offset", sa.String(length=50), nullable=True),
        sa.Column("text_below", sa.Text(), nullable=True),
        sa.Column("text_below_color", sa.String(length=20), nullable=True),
        sa.Column("below_font_family", sa.String(length=255), nullable=True),
        sa.Column("below_font_size", sa.String(length=50), nullable=True),
        sa.Column("below_font_weight", sa.String(length=50), nullable=True),
        sa.Column("below_letter_spacing", sa.String(length=50), nullable=True),
        sa.Column("below_text_transform", sa.String(length=50), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["id_user"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_card_configurations_id_user"), "card_configurations", ["id_user"], unique=True)

    op.create_table(
        "curriculums",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("id_user", sa.String(length=36), nullable=False),
        sa.Column("about_me", sa.Text(), nullable=True),
        sa.Column("github_slug", sa.String(length=255), nullable=True),
        sa.Column("linkedin_slug", sa.String(length=255), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["id_user"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_curriculums_id_user"), "curriculums", ["id_user"], unique=True)

    op.create_table(
        "skills",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("id_user", sa.String(length=36), nullable=False),
        sa.Column("skill_name", sa.String(length=255), nullable=False),
        sa.Column("url_certificate", sa.String(length=512), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["id_user"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_skills_id_user"), "skills", ["id_user"], unique=False)

    op.create_table(
        "work_experiences",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("id_user", sa.String(length=36), nullable=False),
        sa.Column("role", sa.String(length=255), nullable=False),
        sa.Column("company_name", sa.String(length=255), nullable=False),
        sa.Column("from_year", sa.Date(), nullable=False),
        sa.Column("until_year", sa.Date(), nullable=True),
        sa.Column("role_description", sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["id_user"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_work_experiences_id_user"), "work_experiences", ["id_user"], unique=False)

    op.create_table(
        "vacancies",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("job_title", sa.String(length=255), nullable=False),
        sa.Column("slug", sa.String(length=255), nullable=False),
        sa.Column("mode", sa.String(length=20), nullable=False),
        sa.Column("years_experience", sa.Integer(), nullable=False),
        sa.Column("short_description", sa.String(length=500), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("stack_required", sa.JSON(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_vacancies_slug"), "vacancies", ["slug"], unique=True)
    op.create_index(op.f("ix_vacancies_status"), "vacancies", ["status"], unique=False)

    op.create_table(
        "applications",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("id_vacancy", sa.String(length=36), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("phone", sa.String(length=50), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.Column("application_motivation", sa.Text(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("cv_url", sa.String(length=1024), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["id_vacancy"], ["vacancies.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("id_vacancy", "email", name="uq_applications_vacancy_email"),
    )
    op.create_index(op.f("ix_applications_id_vacancy"), "applications", ["id_vacancy"], unique=False)
    op.create_index(op.f("ix_applications_email"), "applications", ["email"], unique=False)
    op.create_index(op.f("ix_applications_status"), "applications", ["status"], unique=False)

    op.create_table(
        "blogs",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("id_user", sa.String(length=36), nullable=False),
        sa.Column("image", sa.String(length=512), nullable=True),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("slug", sa.String(length=255), nullable=False),
        sa.Column("short_description", sa.Text(), nullable=False),
        sa.Column("categories", sa.JSON(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["id_user"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_blogs_id_user"), "blogs", ["id_user"], unique=False)
    op.create_index(op.f("ix_blogs_slug"), "blogs", ["slug"], unique=True)

    op.create_table(
        "blog_sections",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("id_blog", sa.String(length=36), nullable=False),
        sa.Column("order", sa.Integer(), nullable=False),
        sa.Column("type", sa.String(length=20), nullable=False),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("src", sa.String(length=1024), nullable=True),
        sa.Column("alt", sa.String(length=255), nullable=True),
        sa.Column("caption", sa.String(length=500), nullable=True),
        sa.Column("style", sa.String(length=20), nullable=True),
        sa.Column("items", sa.JSON(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["id_blog"], ["blogs.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_blog_sections_id_blog"), "blog_sections", ["id_blog"], unique=False)

    op.create_table(
        "solutions",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("icon", sa.String(length=255), nullable=True),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("order", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "features",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("id_solution", sa.String(length=36), nullable=False),
        sa.Column("feature_description", sa.String(length=500), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["id_solution"], ["solutions.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_features_id_solution"), "features", ["id_solution"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_features_id_solution"), table_name="features")
    op.drop_table("features")
    op.drop_table("solutions")
    op.drop_index(op.f("ix_blog_sections_id_blog"), table_name="blog_sections")
    op.drop_table("blog_sections")
    op.drop_index(op.f("ix_blogs_slug"), table_name="blogs")
    op.drop_index(op.f("ix_blogs_id_user"), table_name="blogs")
    op.drop_table("blogs")
    op.drop_index(op.f("ix_applications_status"), table_name="applications")
    op.drop_index(op.f("ix_applications_email"), table_name="applications")
    op.drop_index(op.f("ix_applications_id_vacancy"), table_name="applications")
    op.drop_table("applications")
    op.drop_index(op.f("ix_vacancies_status"), table_name="vacancies")
    op.drop_index(op.f("ix_vacancies_slug"), table_name="vacancies")
    op.drop_table("vacancies")
    op.drop_index(op.f("ix_work_experiences_id_user"), table_name="work_experiences")
    op.drop_table("work_experiences")
    op.drop_index(op.f("ix_skills_id_user"), table_name="skills")
    op.drop_table("skills")
    op.drop_index(op.f("ix_curriculums_id_user"), table_name="curriculums")
    op.drop_table("curriculums")
    op.drop_index(op.f("ix_card_configurations_id_user"), table_name="card_configurations")
    op.drop_table("card_configurations")
    op.drop_index(op.f("ix_users_slug"), table_name="users")
    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_table("users")
