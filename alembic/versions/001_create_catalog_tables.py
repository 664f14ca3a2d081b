"""Create product and moodboard catalog tables.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
    ]


def upgrade() -> None:
    """Create products, moodboards and their child tables."""
    op.create_table(
        'products',
        sa.Column('id', sa.String(50), primary_key=True),
        sa.Column('slug', sa.String(200), nullable=False, unique=True),
        sa.Column('name', sa.String(500), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('brand', sa.String(100), nullable=True, index=True),
        sa.Column('category', sa.String(100), nullable=True, index=True),
        sa.Column('price', sa.Numeric(10, 2), nullable=True),
        sa.Column('image_url', sa.String(1000), nullable=True),
        sa.Column('affiliate_url', sa.String(1000), nullable=True),
        sa.Column('is_featured', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('is_published', sa.Boolean(), nullable=False, server_default='true', index=True),
        *_timestamps(),
    )

    op.create_table(
        'product_tags',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('product_id', sa.String(50),
                  sa.ForeignKey('products.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('tag', sa.String(100), nullable=False, index=True),
    )
    op.create_unique_constraint('uq_product_tags_product_tag', 'product_tags', ['product_id', 'tag'])

    op.create_table(
        'moodboards',
        sa.Column('id', sa.String(50), primary_key=True),
        sa.Column('slug', sa.String(200), nullable=False, unique=True),
        sa.Column('title', sa.String(500), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('cover_image', sa.String(1000), nullable=True),
        sa.Column('how_to_wear', sa.Text(), nullable=True),
        sa.Column('is_featured', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('is_published', sa.Boolean(), nullable=False, server_default='true', index=True),
        *_timestamps(),
    )

    op.create_table(
        'moodboard_tags',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('moodboard_id', sa.String(50),
                  sa.ForeignKey('moodboards.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('tag', sa.String(100), nullable=False, index=True),
    )
    op.create_unique_constraint('uq_moodboard_tags_moodboard_tag', 'moodboard_tags', ['moodboard_id', 'tag'])

    op.create_table(
        'moodboard_products',
        sa.Column('moodboard_id', sa.String(50),
                  sa.ForeignKey('moodboards.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('product_id', sa.String(50),
                  sa.ForeignKey('products.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('sort_order', sa.Integer(), nullable=False, server_default='0'),
    )

    op.create_table(
        'moodboard_styling_tips',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('moodboard_id', sa.String(50),
                  sa.ForeignKey('moodboards.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('tip', sa.Text(), nullable=False),
        sa.Column('sort_order', sa.Integer(), nullable=False, server_default='0'),
    )


def downgrade() -> None:
    """Drop catalog tables."""
    op.drop_table('moodboard_styling_tips')
    op.drop_table('moodboard_products')
    op.drop_table('moodboard_tags')
    op.drop_table('moodboards')
    op.drop_table('product_tags')
    op.drop_table('products')
