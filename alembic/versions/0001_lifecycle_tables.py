"""Add application, interview and task tables

Revision ID: 0001
Revises:
Create Date: 2025-01-01

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Create applications table
    op.create_table(
        'applications',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('candidate_id', sa.String(length=255), nullable=False),
        sa.Column('internship_id', sa.String(length=255), nullable=False),
        sa.Column('unit_id', sa.String(length=255), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=False, default='applied'),
        sa.Column('applied_date', sa.DateTime(), nullable=False),
        sa.Column('profile_match_score', sa.Integer(), nullable=False, default=0),
        sa.Column('interview_date', sa.DateTime(), nullable=True),
        sa.Column('candidate_name', sa.String(length=255), nullable=True),
        sa.Column('candidate_email', sa.String(length=255), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_applications_candidate_id', 'applications', ['candidate_id'], unique=False)
    op.create_index('ix_applications_internship_id', 'applications', ['internship_id'], unique=False)
    op.create_index('ix_applications_unit_id', 'applications', ['unit_id'], unique=False)

    # Create interviews table
    op.create_table(
        'interviews',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('application_id', sa.String(length=36), nullable=False),
        sa.Column('scheduled_at', sa.DateTime(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('meeting_link', sa.String(length=500), nullable=True),
        sa.Column('duration_minutes', sa.Integer(), nullable=False, default=60),
        sa.Column('guest_emails', sa.JSON(), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=False, default='scheduled'),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['application_id'], ['applications.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_interviews_application_id', 'interviews', ['application_id'], unique=False)

    # Create tasks table
    op.create_table(
        'tasks',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('application_id', sa.String(length=36), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('color', sa.String(length=20), nullable=False, default='#3B82F6'),
        sa.Column('start_date', sa.Date(), nullable=True),
        sa.Column('end_date', sa.Date(), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=False, default='pending'),
        sa.Column('submission_link', sa.String(length=1000), nullable=True),
        sa.Column('submitted_at', sa.DateTime(), nullable=True),
        sa.Column('review_remarks', sa.Text(), nullable=True),
        sa.Column('reviewed_at', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['application_id'], ['applications.id']),
        sa.CheckConstraint('end_date IS NULL OR start_date IS NULL OR end_date >= start_date', name='ck_tasks_date_order'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_tasks_application_id', 'tasks', ['application_id'], unique=False)


def downgrade() -> None:
    op.drop_index('ix_tasks_application_id', table_name='tasks')
    op.drop_table('tasks')
    op.drop_index('ix_interviews_application_id', table_name='interviews')
    op.drop_table('interviews')
    op.drop_index('ix_applications_unit_id', table_name='applications')
    op.drop_index('ix_applications_internship_id', table_name='applications')
    op.drop_index('ix_applications_candidate_id', table_name='applications')
    op.drop_table('applications')
