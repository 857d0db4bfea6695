"""initial_schema

Revision ID: 3f1c2b7a9d40
Revises:
Create Date: 2026-10-18 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c2b7a9d40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table('users',
        sa.Column('id', sa.String(32), nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('hashed_password', sa.String(255), nullable=False),
        sa.Column('role', sa.String(20), nullable=False, server_default='teacher'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table('tests',
        sa.Column('id', sa.String(32), nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('status', sa.String(20), nullable=False, server_default='draft'),
        sa.Column('user_id', sa.String(32), nullable=False),
        sa.Column('grade', sa.String(100), nullable=True),
        sa.Column('subject', sa.String(255), nullable=True),
        sa.Column('purpose', sa.String(255), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('config_type', sa.String(20), nullable=True),
        sa.Column('test_duration', sa.Integer(), nullable=True),
        sa.Column('access_time_from', sa.DateTime(timezone=True), nullable=True),
        sa.Column('access_time_to', sa.DateTime(timezone=True), nullable=True),
        sa.Column('allowed_takers', sa.String(20), nullable=True),
        sa.Column('allowed_students', sa.Text(), nullable=True),
        sa.Column('submitted_times', sa.Integer(), nullable=True),
        sa.Column('exam_password', sa.String(255), nullable=True),
        sa.Column('question_answer_mixed', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('shuffle_question_answers', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('show_point', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('show_correct_answer_option', sa.String(20), nullable=True),
        sa.Column('point_to_show_answer', sa.Integer(), nullable=True),
        sa.Column('add_header_info', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('header_info', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE')
    )
    op.create_index('ix_tests_user_id', 'tests', ['user_id'])

    op.create_table('questions',
        sa.Column('id', sa.String(32), nullable=False),
        sa.Column('test_id', sa.String(32), nullable=False),
        sa.Column('text', sa.Text(), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False, server_default='0'),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['test_id'], ['tests.id'], ondelete='CASCADE')
    )
    op.create_index('ix_questions_test_id', 'questions', ['test_id'])

    op.create_table('choices',
        sa.Column('id', sa.String(32), nullable=False),
        sa.Column('question_id', sa.String(32), nullable=False),
        sa.Column('text', sa.Text(), nullable=False),
        sa.Column('is_correct', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('position', sa.Integer(), nullable=False, server_default='0'),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['question_id'], ['questions.id'], ondelete='CASCADE')
    )
    op.create_index('ix_choices_question_id', 'choices', ['question_id'])

    op.create_table('submissions',
        sa.Column('id', sa.String(32), nullable=False),
        sa.Column('user_id', sa.String(32), nullable=False),
        sa.Column('test_id', sa.String(32), nullable=False),
        sa.Column('score', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('answers_json', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['test_id'], ['tests.id'], ondelete='CASCADE')
    )
    op.create_index('ix_submissions_user_id', 'submissions', ['user_id'])
    op.create_index('ix_submissions_test_id', 'submissions', ['test_id'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('ix_submissions_test_id', table_name='submissions')
    op.drop_index('ix_submissions_user_id', table_name='submissions')
    op.drop_table('submissions')
    op.drop_index('ix_choices_question_id', table_name='choices')
    op.drop_table('choices')
    op.drop_index('ix_questions_test_id', table_name='questions')
    op.drop_table('questions')
    op.drop_index('ix_tests_user_id', table_name='tests')
    op.drop_table('tests')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
