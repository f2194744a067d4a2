"""create early_access_requests table

Revision ID: 3f1c9a7e2b10
Revises:
Create Date: 2025-07-10 00:00:00.000000
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3f1c9a7e2b10'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'early_access_requests',
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False, server_default=sa.text('gen_random_uuid()')),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('email', sa.String(length=320), nullable=False),
        sa.Column('preferences', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
    )
    op.create_index(
        'ux_early_access_requests_email',
        'early_access_requests',
        [sa.text('lower(email)')],
        unique=True,
    )


def downgrade() -> None:
    op.drop_index('ux_early_access_requests_email', table_name='early_access_requests')
    op.drop_table('early_access_requests')
