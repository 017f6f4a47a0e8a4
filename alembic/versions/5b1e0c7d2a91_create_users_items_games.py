"""create users, items, user_items, games

Revision ID: 5b1e0c7d2a91
Revises:
Create Date: 2025-10-02 18:04:11.512207

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '5b1e0c7d2a91'
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('username', sa.String(), nullable=False),
        sa.Column('password', sa.String(length=255), nullable=False),
        sa.Column('avatar', sa.Text(), nullable=False, server_default=''),
        sa.Column('is_admin', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('badges', sa.JSON(), nullable=False),
        sa.Column('currency', sa.Integer(), nullable=False, server_default='1000'),
        sa.CheckConstraint('currency >= 0', name=op.f('ck_users_currency_non_negative')),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_users')),
    )
    op.create_index(op.f('ix_users_id'), 'users', ['id'], unique=False)
    op.create_index(op.f('ix_users_username'), 'users', ['username'], unique=True)

    op.create_table(
        'items',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('price', sa.Integer(), nullable=False),
        sa.Column('image', sa.String(length=255), nullable=False),
        sa.Column('type', sa.String(length=40), nullable=False),
        sa.CheckConstraint('price >= 0', name=op.f('ck_items_price_non_negative')),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_items')),
    )
    op.create_index(op.f('ix_items_id'), 'items', ['id'], unique=False)

    op.create_table(
        'user_items',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('item_id', sa.Integer(), nullable=False),
        sa.Column('acquired_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], name=op.f('fk_user_items_user_id_users'), ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['item_id'], ['items.id'], name=op.f('fk_user_items_item_id_items'), ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_user_items')),
        sa.UniqueConstraint('user_id', 'item_id', name='uq_user_item'),
    )
    op.create_index(op.f('ix_user_items_user_id'), 'user_items', ['user_id'], unique=False)
    op.create_index(op.f('ix_user_items_item_id'), 'user_items', ['item_id'], unique=False)

    op.create_table(
        'games',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('creator_id', sa.Integer(), nullable=False),
        sa.Column('thumbnail', sa.String(length=512), nullable=False),
        sa.Column('file_path', sa.String(length=512), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_games')),
    )
    op.create_index(op.f('ix_games_id'), 'games', ['id'], unique=False)
    op.create_index(op.f('ix_games_creator_id'), 'games', ['creator_id'], unique=False)

def downgrade():
    op.drop_index(op.f('ix_games_creator_id'), table_name='games')
    op.drop_index(op.f('ix_games_id'), table_name='games')
    op.drop_table('games')
    op.drop_index(op.f('ix_user_items_item_id'), table_name='user_items')
    op.drop_index(op.f('ix_user_items_user_id'), table_name='user_items')
    op.drop_table('user_items')
    op.drop_index(op.f('ix_items_id'), table_name='items')
    op.drop_table('items')
    op.drop_index(op.f('ix_users_username'), table_name='users')
    op.drop_index(op.f('ix_users_id'), table_name='users')
    op.drop_table('users')
