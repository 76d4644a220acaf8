"""create sheet_row for the database tabular store

Revision ID: 5c2a9e1f7b30
Revises:
Create Date: 2026-10-19 00:00:00
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '5c2a9e1f7b30'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)
    if 'sheet_row' in insp.get_table_names():
        return
    op.create_table(
        'sheet_row',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('sheet', sa.String(length=64), nullable=False),
        sa.Column('row_index', sa.Integer(), nullable=False),
        sa.Column('cells', sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('sheet', 'row_index', name='uq_sheet_row_sheet_row_index'),
    )
    with op.batch_alter_table('sheet_row') as batch_op:
        batch_op.create_index(batch_op.f('ix_sheet_row_sheet'), ['sheet'], unique=False)


def downgrade():
    with op.batch_alter_table('sheet_row') as batch_op:
        batch_op.drop_index(batch_op.f('ix_sheet_row_sheet'))
    op.drop_table('sheet_row')
