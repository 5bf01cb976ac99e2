"""create todos, labels and todo_labels

Revision ID: 5c1d2e7a9b40
Revises:
Create Date: 2026-10-17 10:12:03.418205

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5c1d2e7a9b40'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'todos',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('text', sa.Text(), nullable=False),
        sa.Column('completed', sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.create_index(op.f('ix_todos_id'), 'todos', ['id'])

    op.create_table(
        'labels',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.Text(), nullable=False),
        sa.UniqueConstraint('name'),
    )
    op.create_index(op.f('ix_labels_id'), 'labels', ['id'])

    op.create_table(
        'todo_labels',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('todo_id', sa.Integer(), nullable=False),
        sa.Column('label_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ['todo_id'], ['todos.id'],
            ondelete='CASCADE', deferrable=True, initially='DEFERRED',
        ),
        sa.ForeignKeyConstraint(
            ['label_id'], ['labels.id'],
            ondelete='CASCADE', deferrable=True, initially='DEFERRED',
        ),
        sa.UniqueConstraint('todo_id', 'label_id'),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('todo_labels')
    op.drop_index(op.f('ix_labels_id'), table_name='labels')
    op.drop_table('labels')
    op.drop_index(op.f('ix_todos_id'), table_name='todos')
    op.drop_table('todos')
