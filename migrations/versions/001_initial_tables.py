"""Create plant care social tables

Revision ID: 001
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create users, posts, chats, notifications and plants tables"""

    # 1. Users with denormalized follow lists
    op.create_table('users',
        sa.Column('user_id', sa.String(36), nullable=False),
        sa.Column('name', sa.String(120), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('age', sa.Integer(), nullable=True),
        sa.Column('gender', sa.String(32), nullable=True),
        sa.Column('type', sa.String(32), nullable=True),
        sa.Column('profile_image_url', sa.Text(), nullable=False),
        sa.Column('following', sa.JSON(), nullable=False),
        sa.Column('followers', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('user_id'),
        sa.UniqueConstraint('email'),
    )
    op.create_index('ix_users_email', 'users', ['email'])

    # 2. Posts
    op.create_table('posts',
        sa.Column('post_id', sa.String(36), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('caption', sa.Text(), nullable=False),
        sa.Column('image', sa.Text(), nullable=False),
        sa.Column('date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('like_count', sa.Integer(), nullable=False),
        sa.Column('comment', sa.JSON(), nullable=False),
        sa.Column('liked_by', sa.JSON(), nullable=False),
        sa.PrimaryKeyConstraint('post_id'),
        sa.CheckConstraint('like_count >= 0', name='ck_posts_like_count'),
    )
    op.create_index('ix_posts_email', 'posts', ['email'])
    op.create_index('ix_posts_date', 'posts', ['date'])

    # 3. Chat messages
    op.create_table('chats',
        sa.Column('chat_id', sa.String(36), nullable=False),
        sa.Column('sender_email', sa.String(255), nullable=False),
        sa.Column('receiver_email', sa.String(255), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('timestamp', sa.DateTime(timezone=True), nullable=False),
        sa.Column('read', sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint('chat_id'),
    )
    op.create_index('ix_chats_sender_email', 'chats', ['sender_email'])
    op.create_index('ix_chats_receiver_email', 'chats', ['receiver_email'])
    op.create_index('ix_chats_receiver_read', 'chats', ['receiver_email', 'read'])

    # 4. Notifications
    op.create_table('notifications',
        sa.Column('notification_id', sa.String(36), nullable=False),
        sa.Column('user_id', sa.String(255), nullable=False),
        sa.Column('type', sa.String(16), nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('related_id', sa.String(36), nullable=True),
        sa.Column('related_email', sa.String(255), nullable=True),
        sa.Column('read', sa.Boolean(), nullable=False),
        sa.Column('timestamp', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('notification_id'),
        sa.CheckConstraint("type IN ('message', 'post', 'update')", name='ck_notifications_type'),
    )
    op.create_index('ix_notifications_user_id', 'notifications', ['user_id'])
    op.create_index('ix_notifications_user_timestamp', 'notifications', ['user_id', 'timestamp'])

    # 5. Tracked plants
    op.create_table('plants',
        sa.Column('plant_id', sa.String(36), nullable=False),
        sa.Column('user_email', sa.String(255), nullable=False),
        sa.Column('plant_name', sa.String(200), nullable=False),
        sa.Column('plant_type', sa.String(200), nullable=False),
        sa.Column('date_added', sa.DateTime(timezone=True), nullable=False),
        sa.Column('image', sa.Text(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=False),
        sa.Column('daily_entries', sa.JSON(), nullable=False),
        sa.Column('care_schedule', sa.JSON(), nullable=False),
        sa.PrimaryKeyConstraint('plant_id'),
    )
    op.create_index('ix_plants_user_email', 'plants', ['user_email'])


def downgrade() -> None:
    """Drop all plant care social tables"""
    op.drop_index('ix_plants_user_email', table_name='plants')
    op.drop_table('plants')

    op.drop_index('ix_notifications_user_timestamp', table_name='notifications')
    op.drop_index('ix_notifications_user_id', table_name='notifications')
    op.drop_table('notifications')

    op.drop_index('ix_chats_receiver_read', table_name='chats')
    op.drop_index('ix_chats_receiver_email', table_name='chats')
    op.drop_index('ix_chats_sender_email', table_name='chats')
    op.drop_table('chats')

    op.drop_index('ix_posts_date', table_name='posts')
    op.drop_index('ix_posts_email', table_name='posts')
    op.drop_table('posts')

    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
