"""
SQLite item repository.

Each call opens its own connection, runs a single parameterized
statement and closes it.  ``sqlite3.IntegrityError`` becomes a
``ConflictError``; every other ``sqlite3.Error`` becomes a
``GenericError`` wrapping the original exception.  A stored row that no
longer validates as an ``Item`` also becomes a ``GenericError``.  Missing
rows raise ``NotFoundError``.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import Callable, List
from uuid import UUID

from pydantic import ValidationError

from ..core.context import Context, ContextCancelledError
from ..core.db import get_connection, init_db
from ..core.errors import ConflictError, GenericError, NotFoundError
from ..core.identifiers import format_id, new_id
from ..schemas.item import Item

logger = logging.getLogger(__name__)


class SqliteItemRepository:
    """``IItemRepository`` backed by a SQLite database file."""

    def __init__(self, db_path: str, id_generator: Callable[[], UUID] = new_id) -> None:
        self.db_path = db_path
        self._id_generator = id_generator
        init_db(db_path)

    async def get_all(self, ctx: Context) -> List[Item]:
        self._check(ctx)
        conn = get_connection(self.db_path)
        try:
            rows = conn.execute("SELECT * FROM items ORDER BY created_at ASC, rowid ASC").fetchall()
            return [self._row_to_item(row) for row in rows]
        except sqlite3.Error as exc:
            raise self._translate(exc) from exc
        finally:
            conn.close()

    async def get_by_id(self, ctx: Context, key: UUID) -> Item:
        self._check(ctx)
        conn = get_connection(self.db_path)
        try:
            row = conn.execute("SELECT * FROM items WHERE id = ?", (format_id(key),)).fetchone()
        except sqlite3.Error as exc:
            raise self._translate(exc) from exc
        finally:
            conn.close()
        if row is None:
            raise NotFoundError(id=key)
        return self._row_to_item(row)

    async def insert(self, ctx: Context, item: Item) -> Item:
        self._check(ctx)
        key = self._id_generator()
        conn = get_connection(self.db_path)
        try:
            conn.execute(
                """
                INSERT INTO items (id, name, description, quantity)
                VALUES (?, ?, ?, ?)
                """,
                (format_id(key), item.name, item.description, item.quantity),
            )
            conn.commit()
        except sqlite3.Error as exc:
            raise self._translate(exc) from exc
        finally:
            conn.close()
        logger.debug("Inserted item %s", key)
        return item.model_copy(update={"id": key})

    async def update(self, ctx: Context, key: UUID, item: Item) -> None:
        self._check(ctx)
        conn = get_connection(self.db_path)
        try:
            cursor = conn.execute(
                """
                UPDATE items
                SET name = ?, description = ?, quantity = ?, updated_at = CURRENT_TIMESTAMP
                WHERE id = ?
                """,
                (item.name, item.description, item.quantity, format_id(key)),
            )
            affected = cursor.rowcount
            conn.commit()
        except sqlite3.Error as exc:
            raise self._translate(exc) from exc
        finally:
            conn.close()
        if not affected:
            raise NotFoundError(id=key)

    async def remove(self, ctx: Context, key: UUID) -> None:
        self._check(ctx)
        conn = get_connection(self.db_path)
        try:
            cursor = conn.execute("DELETE FROM items WHERE id = ?", (format_id(key),))
            affected = cursor.rowcount
            conn.commit()
        except sqlite3.Error as exc:
            raise self._translate(exc) from exc
        finally:
            conn.close()
        if not affected:
            raise NotFoundError(id=key)

    @staticmethod
    def _row_to_item(row: sqlite3.Row) -> Item:
        try:
            return Item(
                id=UUID(row["id"]),
                name=row["name"],
                description=row["description"],
                quantity=row["quantity"],
            )
        except (ValidationError, ValueError) as exc:
            raise GenericError(f"corrupt item row {row['id']!r}: {exc}", cause=exc) from exc

    @staticmethod
    def _translate(exc: sqlite3.Error) -> GenericError:
        if isinstance(exc, sqlite3.IntegrityError):
            return ConflictError(str(exc), cause=exc)
        return GenericError(str(exc), cause=exc)

    @staticmethod
    def _check(ctx: Context) -> None:
        try:
            ctx.check()
        except ContextCancelledError as exc:
            raise GenericError(str(exc), cause=exc) from exc
