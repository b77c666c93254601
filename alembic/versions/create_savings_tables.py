"""create users, savings goals and goal transactions

Revision ID: create_savings_tables
Revises:
Create Date: 2026-10-18

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = 'create_savings_tables'
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column('email', sa.String(length=320), nullable=False),
        sa.Column('hashed_password', sa.String(length=1024), nullable=False),
        sa.Column('is_active', sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column('is_superuser', sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column('is_verified', sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column('full_name', sa.String, nullable=True),
        sa.Column('created_at', sa.DateTime, server_default=sa.func.now()),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'savings_goals',
        sa.Column('id', sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column('user_id', sa.Uuid(as_uuid=True), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('title', sa.String(length=100), nullable=False),
        sa.Column('target', sa.Numeric(14, 2), nullable=False),
        sa.Column('created_at', sa.DateTime, nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint('target >= 0.01', name='ck_savings_goals_target_positive'),
    )
    op.create_index('ix_savings_goals_user_id', 'savings_goals', ['user_id'])

    op.create_table(
        'goal_transactions',
        sa.Column('id', sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column('goal_id', sa.Uuid(as_uuid=True), sa.ForeignKey('savings_goals.id', ondelete='CASCADE'), nullable=False),
        sa.Column('amount', sa.Numeric(14, 2), nullable=False),
        sa.Column('type', sa.String(length=16), nullable=False),
        sa.Column('position', sa.Integer, nullable=False),
        sa.Column('created_at', sa.DateTime, nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint('goal_id', 'position', name='uq_goal_transactions_goal_position'),
        sa.CheckConstraint('amount >= 0.01', name='ck_goal_transactions_amount_positive'),
        sa.CheckConstraint("type IN ('deposit', 'withdrawal')", name='ck_goal_transactions_type'),
    )
    op.create_index('ix_goal_transactions_goal_id', 'goal_transactions', ['goal_id'])

def downgrade():
    op.drop_index('ix_goal_transactions_goal_id', table_name='goal_transactions')
    op.drop_table('goal_transactions')
    op.drop_index('ix_savings_goals_user_id', table_name='savings_goals')
    op.drop_table('savings_goals')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
