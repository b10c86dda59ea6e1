"""Initial business tables

Revision ID: 001
Revises: 
Create Date: 2026-10-18 12:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table('customers',
        sa.Column('customer_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('first_name', sa.String(length=100), nullable=False),
        sa.Column('last_name', sa.String(length=100), nullable=False),
        sa.Column('phone_num', sa.String(length=30), nullable=False),
        sa.Column('address', sa.String(length=255), nullable=True),
        sa.PrimaryKeyConstraint('customer_id')
    )

    op.create_table('trainers',
        sa.Column('trainer_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('first_name', sa.String(length=100), nullable=False),
        sa.Column('last_name', sa.String(length=100), nullable=False),
        sa.Column('phone_num', sa.String(length=30), nullable=False),
        sa.Column('speciality', sa.String(length=100), nullable=True),
        sa.PrimaryKeyConstraint('trainer_id')
    )

    op.create_table('employees',
        sa.Column('employee_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('first_name', sa.String(length=100), nullable=False),
        sa.Column('last_name', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('phone', sa.String(length=30), nullable=True),
        sa.Column('position', sa.String(length=100), nullable=True),
        sa.Column('hire_date', sa.Date(), nullable=True),
        sa.PrimaryKeyConstraint('employee_id')
    )

    # References below are application-level only: no foreign keys, deletes never cascade.
    op.create_table('pets',
        sa.Column('pet_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('customer_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('species', sa.String(length=50), nullable=False),
        sa.Column('birth_date', sa.Date(), nullable=False),
        sa.Column('breed', sa.String(length=100), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('pet_id')
    )
    op.create_index(op.f('ix_pets_customer_id'), 'pets', ['customer_id'], unique=False)

    op.create_table('classes',
        sa.Column('class_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('trainer_id', sa.Integer(), nullable=False),
        sa.Column('class_type', sa.String(length=50), nullable=False),
        sa.Column('title', sa.String(length=150), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('location', sa.String(length=150), nullable=False),
        sa.Column('start_time', sa.Time(), nullable=False),
        sa.Column('end_time', sa.Time(), nullable=False),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=False),
        sa.Column('max_capacity', sa.Integer(), nullable=False),
        sa.Column('price', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('category', sa.String(length=50), nullable=True),
        sa.PrimaryKeyConstraint('class_id')
    )
    op.create_index(op.f('ix_classes_trainer_id'), 'classes', ['trainer_id'], unique=False)

    op.create_table('bookings',
        sa.Column('booking_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('class_id', sa.Integer(), nullable=False),
        sa.Column('pet_id', sa.Integer(), nullable=False),
        sa.Column('employee_id', sa.Integer(), nullable=False),
        sa.Column('booking_date', sa.DateTime(), nullable=False),
        sa.Column('status', sa.String(length=100), nullable=False),
        sa.Column('payment_status', sa.String(length=100), nullable=False),
        sa.Column('amount_paid', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.PrimaryKeyConstraint('booking_id')
    )
    op.create_index(op.f('ix_bookings_class_id'), 'bookings', ['class_id'], unique=False)
    op.create_index(op.f('ix_bookings_pet_id'), 'bookings', ['pet_id'], unique=False)
    op.create_index(op.f('ix_bookings_employee_id'), 'bookings', ['employee_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_bookings_employee_id'), table_name='bookings')
    op.drop_index(op.f('ix_bookings_pet_id'), table_name='bookings')
    op.drop_index(op.f('ix_bookings_class_id'), table_name='bookings')
    op.drop_table('bookings')
    op.drop_index(op.f('ix_classes_trainer_id'), table_name='classes')
    op.drop_table('classes')
    op.drop_index(op.f('ix_pets_customer_id'), table_name='pets')
    op.drop_table('pets')
    op.drop_table('employees')
    op.drop_table('trainers')
    op.drop_table('customers')
