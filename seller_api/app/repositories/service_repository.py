"""
Persistence for the services a company offers.
"""

import logging
import sqlite3
from contextlib import contextmanager
from typing import Iterator, List, Optional

from ..core.db import get_cursor, parse_timestamp
from ..models import Service, ServiceCreateInput
from .errors import CompanyNotFoundError, RepositoryError, ServiceNotFoundError


logger = logging.getLogger(__name__)


class ServiceRepository:
    """SQLite store for the ``services`` table."""

    def __init__(self, db_path: Optional[str] = None) -> None:
        self.db_path = db_path

    @contextmanager
    def _cursor(self) -> Iterator[sqlite3.Cursor]:
        try:
            with get_cursor(self.db_path) as cursor:
                yield cursor
        except sqlite3.Error as exc:
            raise RepositoryError(f"database error: {exc}") from exc

    @staticmethod
    def _row_to_service(row: sqlite3.Row) -> Service:
        return Service(
            id=row["id"],
            company_id=row["company_id"],
            name=row["name"],
            description=row["description"],
            price=row["price"],
            duration_minutes=row["duration_minutes"],
            is_active=bool(row["is_active"]),
            created_at=parse_timestamp(row["created_at"]),
            updated_at=parse_timestamp(row["updated_at"]),
        )

    @staticmethod
    def _ensure_company(cursor: sqlite3.Cursor, company_id: int) -> None:
        row = cursor.execute("SELECT id FROM companies WHERE id = ?", (company_id,)).fetchone()
        if not row:
            raise CompanyNotFoundError(company_id)

    def create(self, company_id: int, data: ServiceCreateInput) -> Service:
        with self._cursor() as cursor:
            self._ensure_company(cursor, company_id)
            cursor.execute(
                """
                INSERT INTO services (company_id, name, description, price, duration_minutes, is_active)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    company_id,
                    data.name,
                    data.description,
                    data.price,
                    data.duration_minutes,
                    int(data.is_active),
                ),
            )
            service_id = cursor.lastrowid
            row = cursor.execute("SELECT * FROM services WHERE id = ?", (service_id,)).fetchone()
        logger.info("Service %s created for company %s", service_id, company_id)
        return self._row_to_service(row)

    def list_by_company(self, company_id: int, include_inactive: bool = False) -> List[Service]:
        query = "SELECT * FROM services WHERE company_id = ?"
        if not include_inactive:
            query += " AND is_active = 1"
        query += " ORDER BY id"
        with self._cursor() as cursor:
            self._ensure_company(cursor, company_id)
            rows = cursor.execute(query, (company_id,)).fetchall()
        return [self._row_to_service(row) for row in rows]

    def delete(self, company_id: int, service_id: int) -> None:
        with self._cursor() as cursor:
            self._ensure_company(cursor, company_id)
            cursor.execute(
                "DELETE FROM services WHERE id = ? AND company_id = ?", (service_id, company_id)
            )
            if cursor.rowcount == 0:
                raise ServiceNotFoundError(service_id)
        logger.info("Service %s of company %s deleted", service_id, company_id)
