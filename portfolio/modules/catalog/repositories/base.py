"""
Catalog Repository Base

Shared SQL for aggregates stored as one main row plus side tables of
unlabelled strings (e.g. project technologies).
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence
from databases import Database
from portfolio.modules.database import database

logger = logging.getLogger("portfolio.catalog.repository")


@dataclass(frozen=True)
class SideTable:
    """A string collection stored in its own table keyed by the owner id."""
    table: str
    owner_column: str
    value_column: str
    field: str


def fold_rows(rows: Iterable[Any], collection_fields: Sequence[str]) -> List[Dict[str, Any]]:
    """
    Fold rows of a LEFT JOIN back into one record per id.

    Each collection column becomes a set; NULLs from unmatched joins are
    dropped. Records keep the order in which their id first appears.
    """
    records: Dict[Any, Dict[str, Any]] = {}
    for row in rows:
        data = dict(row)
        record = records.get(data["id"])
        if record is None:
            record = {k: v for k, v in data.items() if k not in collection_fields}
            for field in collection_fields:
                record[field] = set()
            records[data["id"]] = record
        for field in collection_fields:
            value = data.get(field)
            if value is not None:
                record[field].add(value)
    return list(records.values())


class CatalogRepository:
    """Base repository for one catalog table and its side tables."""

    table: str = ""
    columns: Sequence[str] = ()
    side_tables: Sequence[SideTable] = ()
    order_by: str = "m.id"

    def __init__(self, db: Optional[Database] = None):
        self.db = db or database

    @property
    def collection_fields(self) -> List[str]:
        return [side.field for side in self.side_tables]

    def _select_sql(self, where: Optional[str] = None) -> str:
        select = ["m.*"]
        joins = []
        for i, side in enumerate(self.side_tables):
            alias = f"s{i}"
            select.append(f"{alias}.{side.value_column} AS {side.field}")
            joins.append(
                f"LEFT JOIN {side.table} {alias} ON {alias}.{side.owner_column} = m.id"
            )
        query = f"SELECT {', '.join(select)} FROM {self.table} m"
        if joins:
            query += " " + " ".join(joins)
        if where:
            query += f" WHERE {where}"
        query += f" ORDER BY {self.order_by}"
        return query

    async def _fetch(self, where: Optional[str] = None, values: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        rows = await self.db.fetch_all(self._select_sql(where), values or {})
        return fold_rows(rows, self.collection_fields)

    async def list(self) -> List[Dict[str, Any]]:
        return await self._fetch()

    async def get_by_id(self, record_id: int) -> Optional[Dict[str, Any]]:
        records = await self._fetch("m.id = :id", {"id": record_id})
        return records[0] if records else None

    async def exists(self, record_id: int) -> bool:
        query = f"SELECT 1 FROM {self.table} WHERE id = :id"
        return await self.db.fetch_val(query, {"id": record_id}) is not None

    async def create(self, record: Dict[str, Any]) -> int:
        """Insert the main row and its collections; return the new id."""
        columns = [c for c in self.columns if c in record]
        query = f"""
            INSERT INTO {self.table} ({', '.join(columns)})
            VALUES ({', '.join(':' + c for c in columns)})
            RETURNING id
        """
        async with self.db.transaction():
            record_id = await self.db.fetch_val(query, {c: record[c] for c in columns})
            await self._write_collections(record_id, record)
        logger.debug(f"[{type(self).__name__}.create] id={record_id}")
        return record_id

    async def update(self, record_id: int, record: Dict[str, Any]) -> bool:
        """Replace the main row's columns and every collection."""
        columns = [c for c in self.columns if c in record and c != "created_at"]
        values = {c: record[c] for c in columns}
        values["id"] = record_id
        query = f"""
            UPDATE {self.table}
            SET {', '.join(f'{c} = :{c}' for c in columns)}
            WHERE id = :id
            RETURNING id
        """
        async with self.db.transaction():
            updated = await self.db.fetch_val(query, values)
            if updated is None:
                return False
            await self._delete_collections(record_id)
            await self._write_collections(record_id, record)
        return True

    async def delete(self, record_id: int) -> bool:
        query = f"DELETE FROM {self.table} WHERE id = :id RETURNING id"
        async with self.db.transaction():
            await self._delete_collections(record_id)
            deleted = await self.db.fetch_val(query, {"id": record_id})
        return deleted is not None

    async def _delete_collections(self, record_id: int) -> None:
        for side in self.side_tables:
            await self.db.execute(
                f"DELETE FROM {side.table} WHERE {side.owner_column} = :id",
                {"id": record_id}
            )

    async def _write_collections(self, record_id: int, record: Dict[str, Any]) -> None:
        for side in self.side_tables:
            items = sorted(record.get(side.field) or ())
            if not items:
                continue
            await self.db.execute_many(
                f"INSERT INTO {side.table} ({side.owner_column}, {side.value_column}) "
                f"VALUES (:owner_id, :value)",
                [{"owner_id": record_id, "value": item} for item in items]
            )
