"""SQLAlchemy-backed store of raw feedback rows."""

import json
import logging
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional

from sqlalchemy import (
    Column, Integer, MetaData, String, Table, Text,
    create_engine, func, insert, select,
)

from ..core.config import settings
from ..core.models import FeedbackRecord

logger = logging.getLogger(__name__)

ALL_PRODUCTS = "all"
REQUIRED_FIELDS = ("product", "source", "comment")

metadata = MetaData()

feedback_table = Table(
    "feedback",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("product", String(120), nullable=False),
    Column("source", String(120), nullable=False),
    Column("comment", Text, nullable=False),
    Column("created_at", String(32), server_default=func.current_timestamp()),
)


class FeedbackStore:
    """Read/write access to the ``feedback`` table."""

    def __init__(self, database_url: Optional[str] = None):
        self.engine = create_engine(database_url or settings.database_url)

    def create_schema(self) -> None:
        metadata.create_all(self.engine)

    def add_feedback(self, product: str, source: str, comment: str) -> int:
        """Insert one row and return its id."""
        with self.engine.begin() as conn:
            result = conn.execute(
                insert(feedback_table).values(product=product, source=source, comment=comment)
            )
            return result.inserted_primary_key[0]

    def seed(self, rows: Iterable[Mapping[str, Any]]) -> int:
        """Insert many rows; every row needs product, source and comment."""
        values = []
        for i, row in enumerate(rows):
            if not isinstance(row, Mapping):
                raise ValueError(f"Item at index {i} is not a valid object")
            missing = [f for f in REQUIRED_FIELDS if not row.get(f)]
            if missing:
                raise ValueError(f"Item at index {i} missing required fields: {missing}")
            values.append({f: str(row[f]) for f in REQUIRED_FIELDS})

        if not values:
            return 0

        self.create_schema()
        with self.engine.begin() as conn:
            conn.execute(insert(feedback_table), values)
        logger.info(f"Seeded {len(values)} feedback rows")
        return len(values)

    def load_json(self, path: str) -> int:
        """Seed from a JSON file holding an array of feedback objects."""
        with open(Path(path), encoding="utf-8") as f:
            rows = json.load(f)
        if not isinstance(rows, list):
            raise ValueError(f"{path} must contain a JSON array of feedback items")
        return self.seed(rows)

    def list_products(self) -> List[str]:
        stmt = select(feedback_table.c.product).distinct().order_by(feedback_table.c.product.asc())
        with self.engine.connect() as conn:
            return [row.product for row in conn.execute(stmt)]

    def fetch_feedback(self, product: str = ALL_PRODUCTS) -> List[FeedbackRecord]:
        """Rows for ``product`` (case-insensitive) or every row, newest first."""
        product = (product or ALL_PRODUCTS).lower()
        stmt = select(feedback_table).order_by(feedback_table.c.id.desc())
        if product != ALL_PRODUCTS:
            stmt = stmt.where(func.lower(feedback_table.c.product) == product)

        with self.engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()

        return [
            FeedbackRecord(
                id=row["id"],
                product=row["product"],
                source=row["source"],
                comment=row["comment"],
                created_at=str(row["created_at"]) if row["created_at"] is not None else None,
            )
            for row in rows
        ]
