"""create_users_and_places

Revision ID: 3f1c2a9d7e40
Revises:
Create Date: 2026-10-17 09:12:31.504117

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
import sqlmodel


# revision identifiers, used by Alembic.
revision: str = '3f1c2a9d7e40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

PLACE_TYPES = (
    'restaurant', 'cafe', 'park', 'museum', 'beach', 'temple', 'market',
    'shopping_mall', 'hotel', 'attraction', 'bar', 'nightlife',
    'entertainment', 'cultural_site', 'nature', 'other',
)
CITIES = (
    'Ho Chi Minh City', 'Hanoi', 'Da Nang', 'Hai Phong', 'Can Tho',
    'Bien Hoa', 'Hue', 'Nha Trang', 'Buon Ma Thuot', 'Quy Nhon', 'Vung Tau',
    'Nam Dinh', 'Phan Thiet', 'Long Xuyen', 'Thai Nguyen', 'Thanh Hoa',
    'Rach Gia', 'Cam Ranh', 'Vinh Long', 'My Tho',
)


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('password_hash', sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column('google_id', sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)
    op.create_index(op.f('ix_users_google_id'), 'users', ['google_id'], unique=True)

    op.create_table(
        'places',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=200), nullable=False),
        sa.Column('address', sqlmodel.sql.sqltypes.AutoString(length=500), nullable=False),
        sa.Column('google_maps_url', sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column('google_place_id', sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column('type', sa.Enum(*PLACE_TYPES, name='place_type'), nullable=False),
        sa.Column('city', sa.Enum(*CITIES, name='vietnamese_city'), nullable=False),
        sa.Column('notes', sqlmodel.sql.sqltypes.AutoString(length=1000), nullable=True),
        sa.Column('is_visited', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_places_user_id'), 'places', ['user_id'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f('ix_places_user_id'), table_name='places')
    op.drop_table('places')
    op.drop_index(op.f('ix_users_google_id'), table_name='users')
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_table('users')

    # Drop the enum types (PostgreSQL)
    sa.Enum(name='vietnamese_city').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='place_type').drop(op.get_bind(), checkfirst=True)
