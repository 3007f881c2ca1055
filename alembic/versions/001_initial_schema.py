"""Initial schema - creates all tables for the A.R.M backend

Revision ID: 001_initial_schema
Revises:
Create Date: 2026-10-16

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '001_initial_schema'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

JSON_TYPE = sa.JSON().with_variant(postgresql.JSONB(), "postgresql")


def _timestamp(name: str, nullable: bool = False, server_default: bool = True) -> sa.Column:
    return sa.Column(
        name,
        sa.DateTime(timezone=True),
        nullable=nullable,
        server_default=sa.text('now()') if server_default else None,
    )


def upgrade() -> None:
    # Accounts
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('password_hash', sa.String(255), nullable=False),
        _timestamp('created_at'),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'user_sessions',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('token', sa.String(128), nullable=False),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        _timestamp('created_at'),
        _timestamp('expires_at', server_default=False),
    )
    op.create_index('ix_user_sessions_token', 'user_sessions', ['token'], unique=True)
    op.create_index('ix_user_sessions_user_id', 'user_sessions', ['user_id'])

    # Membership
    op.create_table(
        'members',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False, unique=True),
        sa.Column('phone', sa.String(), nullable=False),
        sa.Column('region', sa.String(), nullable=False),
        sa.Column('cercle', sa.String(), nullable=True),
        sa.Column('commune', sa.String(), nullable=True),
        _timestamp('membership_date'),
        sa.Column('status', sa.String(20), nullable=False, server_default='pending'),
    )
    op.create_index('ix_members_region', 'members', ['region'])
    op.create_index('ix_members_status', 'members', ['status'])

    op.create_table(
        'member_profiles',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('user_id', sa.String(), nullable=True),
        sa.Column('full_name', sa.String(), nullable=False),
        sa.Column('nina', sa.String(), nullable=True),
        sa.Column('commune', sa.String(), nullable=False),
        sa.Column('profession', sa.String(), nullable=False),
        sa.Column('phone', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=True),
        sa.Column('membership_number', sa.String(32), nullable=False, unique=True),
        sa.Column('qr_code', sa.Text(), nullable=False),
        sa.Column('status', sa.String(20), nullable=False, server_default='pending'),
        sa.Column('role', sa.String(20), nullable=False, server_default='militant'),
        _timestamp('created_at'),
        _timestamp('updated_at'),
    )
    op.create_index('ix_member_profiles_user_id', 'member_profiles', ['user_id'])
    op.create_index('ix_member_profiles_commune', 'member_profiles', ['commune'])
    op.create_index('ix_member_profiles_status', 'member_profiles', ['status'])
    op.create_index('ix_member_profiles_role', 'member_profiles', ['role'])

    op.create_table(
        'cotisations',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('member_id', sa.Uuid(), sa.ForeignKey('member_profiles.id', ondelete='CASCADE'), nullable=False),
        sa.Column('amount', sa.Numeric(15, 2), nullable=False),
        sa.Column('type', sa.String(20), nullable=False),
        sa.Column('payment_method', sa.String(30), nullable=False),
        sa.Column('transaction_id', sa.String(), nullable=True),
        sa.Column('status', sa.String(20), nullable=False, server_default='pending'),
        _timestamp('paid_at', nullable=True, server_default=False),
        _timestamp('created_at'),
    )
    op.create_index('ix_cotisations_member_id', 'cotisations', ['member_id'])
    op.create_index('ix_cotisations_status', 'cotisations', ['status'])

    # Content
    op.create_table(
        'leadership',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('position', sa.String(), nullable=False),
        sa.Column('phone', sa.String(), nullable=True),
        sa.Column('address', sa.String(), nullable=True),
        sa.Column('location', sa.String(), nullable=True),
        sa.Column('order', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_by', sa.String(), nullable=True),
    )

    op.create_table(
        'political_program',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('category', sa.String(), nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('order', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_by', sa.String(), nullable=True),
    )
    op.create_index('ix_political_program_category', 'political_program', ['category'])

    op.create_table(
        'news',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('image_url', sa.String(), nullable=True),
        sa.Column('video_url', sa.String(), nullable=True),
        sa.Column('created_by', sa.String(), nullable=True),
        _timestamp('published_at'),
    )

    op.create_table(
        'events',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        _timestamp('date', server_default=False),
        sa.Column('location', sa.String(), nullable=False),
        sa.Column('image_url', sa.String(), nullable=True),
        sa.Column('created_by', sa.String(), nullable=True),
        _timestamp('created_at'),
    )
    op.create_index('ix_events_date', 'events', ['date'])

    # Donations and messages
    op.create_table(
        'donations',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('donor_name', sa.String(), nullable=False),
        sa.Column('donor_email', sa.String(), nullable=False),
        sa.Column('amount', sa.Numeric(15, 2), nullable=False),
        sa.Column('currency', sa.String(3), nullable=False, server_default='EUR'),
        sa.Column('payment_method', sa.String(), nullable=True),
        sa.Column('status', sa.String(20), nullable=False, server_default='pending'),
        sa.Column('contribution_type', sa.String(20), nullable=False, server_default='one-time'),
        _timestamp('created_at'),
    )
    op.create_index('ix_donations_status', 'donations', ['status'])

    op.create_table(
        'messages',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('sender_name', sa.String(), nullable=False),
        sa.Column('sender_email', sa.String(), nullable=False),
        sa.Column('subject', sa.String(), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('status', sa.String(20), nullable=False, server_default='unread'),
        _timestamp('created_at'),
    )
    op.create_index('ix_messages_status', 'messages', ['status'])

    op.create_table(
        'internal_messages',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('sender_id', sa.String(), nullable=False),
        sa.Column('target_role', sa.String(20), nullable=True),
        sa.Column('target_region', sa.String(), nullable=True),
        sa.Column('target_cercle', sa.String(), nullable=True),
        sa.Column('target_commune', sa.String(), nullable=True),
        _timestamp('sent_at'),
        _timestamp('created_at'),
    )

    op.create_table(
        'public_chat',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('user_name', sa.String(), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        _timestamp('created_at'),
    )
    op.create_index('ix_public_chat_created_at', 'public_chat', ['created_at'])

    # Geography
    op.create_table(
        'regions',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False, unique=True),
        sa.Column('cercles', JSON_TYPE, nullable=False),
    )

    op.create_table(
        'regions_table',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('code', sa.String(20), nullable=False, unique=True),
        sa.Column('member_count', sa.Integer(), nullable=False, server_default='0'),
        _timestamp('created_at'),
    )

    op.create_table(
        'cercles',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('region_id', sa.Uuid(), sa.ForeignKey('regions_table.id', ondelete='CASCADE'), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('code', sa.String(20), nullable=False, unique=True),
        _timestamp('created_at'),
    )
    op.create_index('ix_cercles_region_id', 'cercles', ['region_id'])

    op.create_table(
        'communes',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('cercle_id', sa.Uuid(), sa.ForeignKey('cercles.id', ondelete='CASCADE'), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('code', sa.String(64), nullable=False, unique=True),
        _timestamp('created_at'),
    )
    op.create_index('ix_communes_cercle_id', 'communes', ['cercle_id'])

    # Media, conferences, elections
    op.create_table(
        'media',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('key', sa.String(), nullable=False, unique=True),
        sa.Column('file_name', sa.String(), nullable=False),
        sa.Column('mime_type', sa.String(), nullable=False),
        sa.Column('size', sa.Integer(), nullable=False),
        _timestamp('uploaded_at'),
    )

    op.create_table(
        'video_conferences',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        _timestamp('scheduled_at', server_default=False),
        sa.Column('meeting_url', sa.String(), nullable=False),
        sa.Column('status', sa.String(20), nullable=False, server_default='scheduled'),
        sa.Column('created_by', sa.String(), nullable=False),
        _timestamp('created_at'),
    )
    op.create_index('ix_video_conferences_scheduled_at', 'video_conferences', ['scheduled_at'])

    op.create_table(
        'election_results',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('member_id', sa.Uuid(), sa.ForeignKey('member_profiles.id', ondelete='CASCADE'), nullable=False),
        sa.Column('election_type', sa.String(), nullable=False),
        sa.Column('region', sa.String(), nullable=False),
        sa.Column('cercle', sa.String(), nullable=False),
        sa.Column('commune', sa.String(), nullable=False),
        sa.Column('bureau_vote', sa.String(), nullable=False),
        sa.Column('results_data', JSON_TYPE, nullable=False),
        sa.Column('pv_photo_url', sa.String(), nullable=True),
        _timestamp('submitted_at'),
        sa.Column('verified_by', sa.String(), nullable=True),
        _timestamp('verified_at', nullable=True, server_default=False),
        sa.Column('status', sa.String(20), nullable=False, server_default='pending'),
    )
    op.create_index('ix_election_results_member_id', 'election_results', ['member_id'])
    op.create_index('ix_election_results_status', 'election_results', ['status'])


def downgrade() -> None:
    for table in (
        'election_results',
        'video_conferences',
        'media',
        'communes',
        'cercles',
        'regions_table',
        'regions',
        'public_chat',
        'internal_messages',
        'messages',
        'donations',
        'events',
        'news',
        'political_program',
        'leadership',
        'cotisations',
        'member_profiles',
        'members',
        'user_sessions',
        'users',
    ):
        op.drop_table(table)
