"""create breeds and dogs tables

Revision ID: 3f1a9c2d7b10
Revises:
Create Date: 2026-10-18 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1a9c2d7b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'breeds',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_breeds_name'), 'breeds', ['name'], unique=True)

    op.create_table(
        'dogs',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('breed_id', sa.Integer(), nullable=False),
        sa.Column('age', sa.Integer(), nullable=True),
        sa.Column('gender', sa.String(length=10), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column(
            'status',
            sa.Enum('AVAILABLE', 'PENDING', 'ADOPTED', name='dog_status'),
            nullable=False,
        ),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('version', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['breed_id'], ['breeds.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_dogs_breed_id'), 'dogs', ['breed_id'], unique=False)
    op.create_index(op.f('ix_dogs_status'), 'dogs', ['status'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_dogs_status'), table_name='dogs')
    op.drop_index(op.f('ix_dogs_breed_id'), table_name='dogs')
    op.drop_table('dogs')
    op.drop_index(op.f('ix_breeds_name'), table_name='breeds')
    op.drop_table('breeds')
    sa.Enum(name='dog_status').drop(op.get_bind(), checkfirst=True)
