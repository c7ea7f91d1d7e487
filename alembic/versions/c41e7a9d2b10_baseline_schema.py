"""baseline_schema

Revision ID: c41e7a9d2b10
Revises: 
Create Date: 2026-10-19 10:12:41.118204

Creates users, aptitude_tests, test_attempts, questions and interviews.
Idempotent: tables that already exist are left untouched.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect


# revision identifiers, used by Alembic.
revision: str = 'c41e7a9d2b10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def table_exists(table_name: str) -> bool:
    """Check if a table exists in the database."""
    bind = op.get_bind()
    inspector = inspect(bind)
    return table_name in inspector.get_table_names()


def upgrade() -> None:
    if not table_exists('users'):
        op.create_table('users',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('principal_id', sa.String(), nullable=False),
            sa.Column('name', sa.String(), nullable=False),
            sa.Column('email', sa.String(), nullable=False),
            sa.Column('image', sa.String(), nullable=True),
            sa.Column('role', sa.String(), nullable=False),
            sa.Column('created_at', sa.BigInteger(), nullable=False),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_users_id'), 'users', ['id'], unique=False)
        op.create_index(op.f('ix_users_principal_id'), 'users', ['principal_id'], unique=True)
        op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=False)
        op.create_index(op.f('ix_users_role'), 'users', ['role'], unique=False)

    if not table_exists('aptitude_tests'):
        op.create_table('aptitude_tests',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('title', sa.String(), nullable=False),
            sa.Column('description', sa.Text(), nullable=True),
            sa.Column('duration_minutes', sa.Integer(), nullable=False),
            sa.Column('questions', sa.JSON(), nullable=False),
            sa.Column('total_points', sa.Float(), nullable=False),
            sa.Column('created_by', sa.String(), nullable=False),
            sa.Column('created_at', sa.BigInteger(), nullable=False),
            sa.Column('is_active', sa.Boolean(), nullable=False),
            sa.Column('is_question_set', sa.Boolean(), nullable=False),
            sa.Column('assigned_candidates', sa.JSON(), nullable=False),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_aptitude_tests_id'), 'aptitude_tests', ['id'], unique=False)
        op.create_index(op.f('ix_aptitude_tests_created_by'), 'aptitude_tests', ['created_by'], unique=False)
        op.create_index(op.f('ix_aptitude_tests_is_active'), 'aptitude_tests', ['is_active'], unique=False)

    if not table_exists('test_attempts'):
        op.create_table('test_attempts',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('test_id', sa.Integer(), nullable=False),
            sa.Column('candidate_id', sa.String(), nullable=False),
            sa.Column('answers', sa.JSON(), nullable=False),
            sa.Column('score', sa.Float(), nullable=False),
            sa.Column('total_points', sa.Float(), nullable=False),
            sa.Column('percentage', sa.Float(), nullable=False),
            sa.Column('started_at', sa.BigInteger(), nullable=False),
            sa.Column('completed_at', sa.BigInteger(), nullable=False),
            sa.Column('time_spent_seconds', sa.Integer(), nullable=False),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_test_attempts_id'), 'test_attempts', ['id'], unique=False)
        op.create_index(op.f('ix_test_attempts_test_id'), 'test_attempts', ['test_id'], unique=False)
        op.create_index(op.f('ix_test_attempts_candidate_id'), 'test_attempts', ['candidate_id'], unique=False)
        op.create_index('idx_attempt_test_candidate', 'test_attempts', ['test_id', 'candidate_id'], unique=False)

    if not table_exists('questions'):
        op.create_table('questions',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('title', sa.String(), nullable=False),
            sa.Column('description', sa.Text(), nullable=False),
            sa.Column('difficulty', sa.String(), nullable=False),
            sa.Column('leetcode_url', sa.String(), nullable=True),
            sa.Column('source', sa.String(), nullable=False),
            sa.Column('examples', sa.JSON(), nullable=False),
            sa.Column('starter_code', sa.JSON(), nullable=False),
            sa.Column('constraints', sa.JSON(), nullable=False),
            sa.Column('test_cases', sa.JSON(), nullable=False),
            sa.Column('created_by', sa.String(), nullable=False),
            sa.Column('created_at', sa.BigInteger(), nullable=False),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_questions_id'), 'questions', ['id'], unique=False)
        op.create_index(op.f('ix_questions_difficulty'), 'questions', ['difficulty'], unique=False)
        op.create_index(op.f('ix_questions_created_by'), 'questions', ['created_by'], unique=False)

    if not table_exists('interviews'):
        op.create_table('interviews',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('title', sa.String(), nullable=False),
            sa.Column('description', sa.Text(), nullable=True),
            sa.Column('start_time', sa.BigInteger(), nullable=False),
            sa.Column('end_time', sa.BigInteger(), nullable=True),
            sa.Column('status', sa.String(), nullable=False),
            sa.Column('stream_call_id', sa.String(), nullable=False),
            sa.Column('candidate_id', sa.String(), nullable=False),
            sa.Column('interviewer_ids', sa.JSON(), nullable=False),
            sa.Column('question_ids', sa.JSON(), nullable=True),
            sa.Column('aptitude_test_id', sa.Integer(), nullable=True),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_interviews_id'), 'interviews', ['id'], unique=False)
        op.create_index(op.f('ix_interviews_stream_call_id'), 'interviews', ['stream_call_id'], unique=False)
        op.create_index(op.f('ix_interviews_candidate_id'), 'interviews', ['candidate_id'], unique=False)


def downgrade() -> None:
    op.drop_table('interviews')
    op.drop_table('questions')
    op.drop_table('test_attempts')
    op.drop_table('aptitude_tests')
    op.drop_table('users')
