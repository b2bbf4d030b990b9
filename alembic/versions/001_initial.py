# alembic/versions/001_initial.py

"""Initial schema: fatigue assessment audit log

Revision ID: 001
Revises: 
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision = '001'
down_revision = None
branch_labels = None
depends_on = None

FATIGUE_LEVELS = ('Low', 'Moderate', 'High', 'Extreme')


def upgrade():
    # created_at is written by the application in settings.TIMEZONE; no server default
    op.create_table('fatigue_assessment',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('sleep_last_24', sa.Float(), nullable=False),
        sa.Column('sleep_previous_24', sa.Float(), nullable=False),
        sa.Column('wake_time', sa.String(length=5), nullable=False),
        sa.Column('work_start_time', sa.String(length=5), nullable=False),
        sa.Column('score', sa.Integer(), nullable=False),
        sa.Column('level', sa.Enum(*FATIGUE_LEVELS, name='fatiguelevel'), nullable=False),
        sa.Column('total_sleep_48', sa.Float(), nullable=False),
        sa.Column('hours_awake', sa.Float(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_fatigue_assessment_created_at', 'fatigue_assessment', ['created_at'], unique=False)
    op.create_index('ix_fatigue_assessment_level', 'fatigue_assessment', ['level', 'created_at'], unique=False)


def downgrade():
    op.drop_index('ix_fatigue_assessment_level', table_name='fatigue_assessment')
    op.drop_index('ix_fatigue_assessment_created_at', table_name='fatigue_assessment')
    op.drop_table('fatigue_assessment')
    sa.Enum(name='fatiguelevel').drop(op.get_bind(), checkfirst=True)
