"""Initial schema - products and invoices

Revision ID: 001
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Create products table
    op.create_table(
        'products',
        sa.Column('document_id', sa.Uuid(), nullable=False),
        sa.Column('barcode', sa.String(length=100), nullable=False),
        sa.Column('name', sa.String(length=500), nullable=False),
        sa.Column('price', sa.Float(), nullable=False),
        sa.Column('details', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('document_id', name='pk_products')
    )
    op.create_index('idx_products_barcode', 'products', ['barcode'], unique=True)

    # Create invoices table
    op.create_table(
        'invoices',
        sa.Column('document_id', sa.Uuid(), nullable=False),
        sa.Column('id', sa.BigInteger(), nullable=False),
        sa.Column('date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('customer_name', sa.String(length=255), nullable=True),
        sa.Column('customer_phone', sa.String(length=50), nullable=True),
        sa.Column('items', sa.JSON(), nullable=False),
        sa.Column('subtotal', sa.Float(), nullable=True),
        sa.Column('discount', sa.Float(), nullable=True),
        sa.Column('tax_rate', sa.Float(), nullable=True),
        sa.Column('tax_amount', sa.Float(), nullable=True),
        sa.Column('total', sa.Float(), nullable=True),
        sa.Column('saved_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('document_id', name='pk_invoices')
    )
    op.create_index('idx_invoices_id', 'invoices', ['id'], unique=True)
    op.create_index('idx_invoices_date', 'invoices', ['date'])


def downgrade() -> None:
    # Drop tables in reverse order
    op.drop_index('idx_invoices_date', table_name='invoices')
    op.drop_index('idx_invoices_id', table_name='invoices')
    op.drop_table('invoices')
    op.drop_index('idx_products_barcode', table_name='products')
    op.drop_table('products')
