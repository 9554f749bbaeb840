"""create contours table

Revision ID: 002
Revises: 001
Create Date: 2026-10-18 10:05:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from geoalchemy2 import Geometry

# revision identifiers, used by Alembic.
revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "contours",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column(
            "data",
            Geometry(geometry_type="POLYGON", srid=4326, spatial_index=False),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_contours_id", "contours", ["id"], unique=False)
    op.create_index("ix_contours_data", "contours", ["data"], postgresql_using="gist")


def downgrade() -> None:
    op.drop_index("ix_contours_data", table_name="contours")
    op.drop_index("ix_contours_id", table_name="contours")
    op.drop_table("contours")
