"""create products table

Revision ID: 0001_create_products
Revises: 
Create Date: 2026-10-19 00:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

revision = '0001_create_products'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'products',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('price', sa.Float(), nullable=False),
        sa.Column('image', sa.String(length=1024), nullable=False),
    )
    op.create_index(op.f('ix_products_id'), 'products', ['id'])


def downgrade():
    op.drop_index(op.f('ix_products_id'), table_name='products')
    op.drop_table('products')
