"""create cart_items table

Revision ID: 0002_create_cart_items
Revises: 0001_create_products
Create Date: 2026-10-19 00:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

revision = '0002_create_cart_items'
down_revision = '0001_create_products'
branch_labels = None
depends_on = None


def upgrade():
    # product_id is a plain reference, no foreign key
    op.create_table(
        'cart_items',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('product_id', sa.Integer(), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False, server_default='1'),
    )
    op.create_index(op.f('ix_cart_items_id'), 'cart_items', ['id'])
    op.create_index(op.f('ix_cart_items_product_id'), 'cart_items', ['product_id'])


def downgrade():
    op.drop_index(op.f('ix_cart_items_product_id'), table_name='cart_items')
    op.drop_index(op.f('ix_cart_items_id'), table_name='cart_items')
    op.drop_table('cart_items')
