"""Create animals and breeding_policies tables

Revision ID: 3f1c2d4e5a6b
Revises:
Create Date: 2026-10-18 00:00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c2d4e5a6b'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'animals',
        sa.Column('id', sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column('sex', sa.String(length=6), nullable=False),
        sa.Column('dysplasia_grade', sa.String(length=1), nullable=False),
        sa.Column('sire_id', sa.Uuid(as_uuid=True), sa.ForeignKey('animals.id'), nullable=True),
        sa.Column('dam_id', sa.Uuid(as_uuid=True), sa.ForeignKey('animals.id'), nullable=True),
        sa.Column('name', sa.String(length=255), nullable=True),
        sa.Column('breed', sa.String(length=255), nullable=True),
        sa.Column('birth_date', sa.Date(), nullable=True),
        sa.Column('registration_number', sa.String(length=64), nullable=True),
        sa.Column('microchip', sa.String(length=64), nullable=True),
        sa.Column('owner_id', sa.Uuid(as_uuid=True), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column(
            'created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.Column(
            'updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.Column('version', sa.Integer(), nullable=False, server_default='1'),
        sa.CheckConstraint("sex IN ('male', 'female')", name='ck_animals_sex'),
        sa.CheckConstraint(
            "dysplasia_grade IN ('A', 'B', 'C', 'D', 'E')", name='ck_animals_dysplasia_grade'
        ),
    )
    op.create_index('ix_animals_sire_id', 'animals', ['sire_id'])
    op.create_index('ix_animals_dam_id', 'animals', ['dam_id'])
    op.create_index('ix_animals_owner_id', 'animals', ['owner_id'])

    op.create_table(
        'breeding_policies',
        sa.Column('id', sa.Uuid(as_uuid=True), primary_key=True),
        # 'active' on the single active row, NULL otherwise
        sa.Column('active_key', sa.String(length=16), nullable=True),
        sa.Column('dysplasia_matrix', sa.JSON(), nullable=True),
        sa.Column('inbreeding_limit', sa.Float(), nullable=False, server_default='12.5'),
        sa.Column('max_generations', sa.Integer(), nullable=False, server_default='5'),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column(
            'created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.Column(
            'updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.UniqueConstraint('active_key', name='ux_breeding_policies_active_key'),
        sa.CheckConstraint(
            'inbreeding_limit >= 0 AND inbreeding_limit <= 100',
            name='ck_breeding_policies_inbreeding_limit',
        ),
        sa.CheckConstraint(
            'max_generations >= 1 AND max_generations <= 10',
            name='ck_breeding_policies_max_generations',
        ),
    )


def downgrade() -> None:
    op.drop_table('breeding_policies')
    op.drop_index('ix_animals_owner_id', table_name='animals')
    op.drop_index('ix_animals_dam_id', table_name='animals')
    op.drop_index('ix_animals_sire_id', table_name='animals')
    op.drop_table('animals')
