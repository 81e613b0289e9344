"""
Company persistence.

Companies live in the ``companies`` table; their managers in
``company_managers`` keyed by ``(company_id, user_id)``, so a manager
can never be stored twice for the same company.  Each method opens its
own connection and commits before returning, so a repository instance
holds no state besides the database path and can be shared between
concurrent requests.
"""

import logging
import sqlite3
from contextlib import contextmanager
from typing import Iterable, Iterator, List, Optional, Tuple

from ..core.db import get_cursor, parse_timestamp
from ..models import Company, CompanyCreateInput, CompanyFilter, CompanyUpdateInput, Pagination
from .errors import CompanyNotFoundError, RepositoryError


logger = logging.getLogger(__name__)

_COMPANY_COLUMNS = "id, name, description, address, phone, created_at, updated_at"


def _unique(ids: Iterable[int]) -> List[int]:
    return list(dict.fromkeys(int(i) for i in ids))


class CompanyRepository:
    """SQLite implementation of the company store."""

    def __init__(self, db_path: Optional[str] = None) -> None:
        self.db_path = db_path

    @contextmanager
    def _cursor(self) -> Iterator[sqlite3.Cursor]:
        try:
            with get_cursor(self.db_path) as cursor:
                yield cursor
        except sqlite3.Error as exc:
            raise RepositoryError(f"database error: {exc}") from exc

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _exists(cursor: sqlite3.Cursor, company_id: int) -> bool:
        row = cursor.execute("SELECT id FROM companies WHERE id = ?", (company_id,)).fetchone()
        return row is not None

    @staticmethod
    def _manager_ids(cursor: sqlite3.Cursor, company_id: int) -> List[int]:
        rows = cursor.execute(
            "SELECT user_id FROM company_managers WHERE company_id = ? ORDER BY user_id",
            (company_id,),
        ).fetchall()
        return [row["user_id"] for row in rows]

    @staticmethod
    def _replace_managers(cursor: sqlite3.Cursor, company_id: int, manager_ids: Iterable[int]) -> None:
        cursor.execute("DELETE FROM company_managers WHERE company_id = ?", (company_id,))
        cursor.executemany(
            "INSERT INTO company_managers (company_id, user_id) VALUES (?, ?)",
            [(company_id, user_id) for user_id in _unique(manager_ids)],
        )

    @staticmethod
    def _row_to_company(row: sqlite3.Row, manager_ids: List[int]) -> Company:
        return Company(
            id=row["id"],
            name=row["name"],
            description=row["description"],
            address=row["address"],
            phone=row["phone"],
            manager_ids=manager_ids,
            created_at=parse_timestamp(row["created_at"]),
            updated_at=parse_timestamp(row["updated_at"]),
        )

    def _fetch(self, cursor: sqlite3.Cursor, company_id: int) -> Company:
        row = cursor.execute(
            f"SELECT {_COMPANY_COLUMNS} FROM companies WHERE id = ?", (company_id,)
        ).fetchone()
        if not row:
            raise CompanyNotFoundError(company_id)
        return self._row_to_company(row, self._manager_ids(cursor, company_id))

    # ------------------------------------------------------------------
    # Store operations
    # ------------------------------------------------------------------
    def create(self, data: CompanyCreateInput) -> Company:
        with self._cursor() as cursor:
            cursor.execute(
                "INSERT INTO companies (name, description, address, phone) VALUES (?, ?, ?, ?)",
                (data.name, data.description, data.address, data.phone),
            )
            company_id = cursor.lastrowid
            self._replace_managers(cursor, company_id, data.manager_ids)
            company = self._fetch(cursor, company_id)
        logger.info("Company %s created with %d managers", company_id, len(company.manager_ids))
        return company

    def get_by_id(self, company_id: int) -> Company:
        with self._cursor() as cursor:
            return self._fetch(cursor, company_id)

    def update(self, company_id: int, data: CompanyUpdateInput) -> Company:
        with self._cursor() as cursor:
            if not self._exists(cursor, company_id):
                raise CompanyNotFoundError(company_id)
            fields = []
            values: list = []
            for column in ("name", "description", "address", "phone"):
                value = getattr(data, column)
                if value is not None:
                    fields.append(f"{column} = ?")
                    values.append(value)
            fields.append("updated_at = CURRENT_TIMESTAMP")
            values.append(company_id)
            cursor.execute(f"UPDATE companies SET {', '.join(fields)} WHERE id = ?", tuple(values))
            if data.manager_ids is not None:
                self._replace_managers(cursor, company_id, data.manager_ids)
            company = self._fetch(cursor, company_id)
        logger.info("Company %s updated", company_id)
        return company

    def delete(self, company_id: int) -> None:
        with self._cursor() as cursor:
            cursor.execute("DELETE FROM companies WHERE id = ?", (company_id,))
            if cursor.rowcount == 0:
                raise CompanyNotFoundError(company_id)
        logger.info("Company %s deleted", company_id)

    def list(self, company_filter: CompanyFilter) -> Tuple[List[Company], Pagination]:
        where_clauses: List[str] = []
        params: list = []
        if company_filter.name:
            where_clauses.append("LOWER(c.name) LIKE ?")
            params.append(f"%{company_filter.name.lower()}%")
        if company_filter.manager_id is not None:
            where_clauses.append(
                "EXISTS (SELECT 1 FROM company_managers m WHERE m.company_id = c.id AND m.user_id = ?)"
            )
            params.append(company_filter.manager_id)
        where_sql = (" WHERE " + " AND ".join(where_clauses)) if where_clauses else ""

        with self._cursor() as cursor:
            total = cursor.execute(
                f"SELECT COUNT(*) AS total FROM companies c{where_sql}", tuple(params)
            ).fetchone()["total"]
            rows = cursor.execute(
                f"SELECT c.id, c.name, c.description, c.address, c.phone, c.created_at, c.updated_at "
                f"FROM companies c{where_sql} ORDER BY c.id LIMIT ? OFFSET ?",
                tuple(params) + (company_filter.limit, company_filter.offset),
            ).fetchall()
            companies = [self._row_to_company(row, self._manager_ids(cursor, row["id"])) for row in rows]

        pagination = Pagination(page=company_filter.page, limit=company_filter.limit, total=total)
        return companies, pagination

    def is_manager(self, company_id: int, user_id: int) -> bool:
        with self._cursor() as cursor:
            if not self._exists(cursor, company_id):
                raise CompanyNotFoundError(company_id)
            row = cursor.execute(
                "SELECT 1 FROM company_managers WHERE company_id = ? AND user_id = ?",
                (company_id, user_id),
            ).fetchone()
            return row is not None
