"""Initial schema with all tables

Revision ID: 001
Revises:
Create Date: 2026-10-18

Creates all ClipStack database tables:
- users: Identity anchor (unique username and email)
- projects: Video editing projects
- media_assets: Logical references to uploaded files
- timeline_items: Media placed on project tracks
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
    # Create users table
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('username', sa.String(100), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_users_username', 'users', ['username'], unique=True)
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    # Create projects table
    op.create_table(
        'projects',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('status', sa.String(20), nullable=False, server_default='draft'),
        sa.Column('duration', sa.Numeric(10, 3), nullable=True),
        sa.Column('frame_rate', sa.Numeric(5, 2), nullable=False, server_default='30.00'),
        sa.Column('resolution_width', sa.Integer(), nullable=False, server_default='1920'),
        sa.Column('resolution_height', sa.Integer(), nullable=False, server_default='1080'),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        # Timestamps
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_projects_user_id', 'projects', ['user_id'])
    op.create_index('ix_projects_status', 'projects', ['status'])

    # Create media_assets table
    op.create_table(
        'media_assets',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        # File info
        sa.Column('filename', sa.String(255), nullable=False),
        sa.Column('original_filename', sa.String(255), nullable=False),
        sa.Column('file_path', sa.String(500), nullable=False),
        sa.Column('file_size', sa.BigInteger(), nullable=False),
        sa.Column('mime_type', sa.String(100), nullable=False),
        sa.Column('media_type', sa.String(10), nullable=False),
        # Media properties
        sa.Column('duration', sa.Numeric(10, 3), nullable=True),
        sa.Column('width', sa.Integer(), nullable=True),
        sa.Column('height', sa.Integer(), nullable=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        # Timestamps
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_media_assets_user_id', 'media_assets', ['user_id'])
    op.create_index('ix_media_assets_media_type', 'media_assets', ['media_type'])

    # Create timeline_items table
    op.create_table(
        'timeline_items',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('project_id', sa.Integer(), sa.ForeignKey('projects.id', ondelete='CASCADE'), nullable=False),
        sa.Column('media_asset_id', sa.Integer(), sa.ForeignKey('media_assets.id', ondelete='CASCADE'), nullable=False),
        # Placement
        sa.Column('track_number', sa.Integer(), nullable=False),
        sa.Column('start_time', sa.Numeric(10, 3), nullable=False),
        sa.Column('end_time', sa.Numeric(10, 3), nullable=False),
        sa.Column('media_start_offset', sa.Numeric(10, 3), nullable=False, server_default='0.000'),
        # Mix and transform
        sa.Column('volume', sa.Numeric(3, 2), nullable=True),
        sa.Column('opacity', sa.Numeric(3, 2), nullable=True),
        sa.Column('position_x', sa.Numeric(10, 2), nullable=True),
        sa.Column('position_y', sa.Numeric(10, 2), nullable=True),
        sa.Column('scale', sa.Numeric(5, 3), nullable=True),
        sa.Column('rotation', sa.Numeric(6, 2), nullable=True),
        # Timestamps
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.CheckConstraint('end_time > start_time', name='ck_timeline_items_time_order'),
    )
    op.create_index('ix_timeline_items_project_id', 'timeline_items', ['project_id'])
    op.create_index('ix_timeline_items_media_asset_id', 'timeline_items', ['media_asset_id'])
    op.create_index(
        'ix_timeline_items_project_order',
        'timeline_items',
        ['project_id', 'track_number', 'start_time'],
    )


def downgrade() -> None:
    # Drop tables in reverse order of creation (respecting foreign keys)
    op.drop_table('timeline_items')
    op.drop_table('media_assets')
    op.drop_table('projects')
    op.drop_table('users')
