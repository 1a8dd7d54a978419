"""initial models

Revision ID: 0001_initial_models
Revises: 
Create Date: 2026-10-19 00:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0001_initial_models'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    # --- reservations ---
    op.create_table(
        'reservations',
        sa.Column('reservation_id', sa.Integer(), primary_key=True),
        sa.Column('first_name', sa.String(length=100), nullable=False),
        sa.Column('last_name', sa.String(length=100), nullable=False),
        sa.Column('mobile_number', sa.String(length=30), nullable=False),
        sa.Column('reservation_date', sa.Date(), nullable=False),
        sa.Column('reservation_time', sa.Time(), nullable=False),
        sa.Column('people', sa.Integer(), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='booked'),
        sa.Column('created_at', sa.TIMESTAMP(), server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.Column('updated_at', sa.TIMESTAMP(), server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.CheckConstraint('people >= 1', name='ck_reservations_people_positive'),
    )

    # --- tables (depends on reservations) ---
    op.create_table(
        'tables',
        sa.Column('table_id', sa.Integer(), primary_key=True),
        sa.Column('table_name', sa.String(length=100), nullable=False),
        sa.Column('capacity', sa.Integer(), nullable=False),
        sa.Column('reservation_id', sa.Integer(), sa.ForeignKey('reservations.reservation_id'), nullable=True),
        sa.Column('created_at', sa.TIMESTAMP(), server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.Column('updated_at', sa.TIMESTAMP(), server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.CheckConstraint('capacity >= 1', name='ck_tables_capacity_positive'),
    )

    # indexes
    op.create_index('ix_reservations_reservation_id', 'reservations', ['reservation_id'])
    op.create_index('ix_reservations_mobile_number', 'reservations', ['mobile_number'])
    op.create_index('ix_reservations_reservation_date', 'reservations', ['reservation_date'])
    op.create_index('ix_tables_table_id', 'tables', ['table_id'])


def downgrade():
    op.drop_index('ix_tables_table_id', table_name='tables')
    op.drop_index('ix_reservations_reservation_date', table_name='reservations')
    op.drop_index('ix_reservations_mobile_number', table_name='reservations')
    op.drop_index('ix_reservations_reservation_id', table_name='reservations')

    # children before parents
    op.drop_table('tables')
    op.drop_table('reservations')
