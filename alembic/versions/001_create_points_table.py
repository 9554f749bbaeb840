"""enable postgis and create points table

Revision ID: 001
Revises:
Create Date: 2026-10-18 10:00:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from geoalchemy2 import Geometry

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("CREATE EXTENSION IF NOT EXISTS postgis")

    op.create_table(
        "points",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column(
            "data",
            Geometry(geometry_type="POINT", srid=4326, spatial_index=False),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_points_id", "points", ["id"], unique=False)
    op.create_index("ix_points_data", "points", ["data"], postgresql_using="gist")


def downgrade() -> None:
    op.drop_index("ix_points_data", table_name="points")
    op.drop_index("ix_points_id", table_name="points")
    op.drop_table("points")
