"""SQLite database service which manages connection management and catalog queries."""

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path

from movieflix.services.query import GenreFilter, PageRequest

logger = logging.getLogger(__name__)

# SQLite INTEGER is a signed 64-bit value
SQLITE_MAX_INT = 2**63 - 1


def _fits_integer(value: int) -> bool:
    return -SQLITE_MAX_INT - 1 <= value <= SQLITE_MAX_INT


class DatabaseService:
    SORT_COLUMNS = {
        "id": "m.id",
        "title": "m.title",
        "year": "m.year",
    }

    SUMMARY_COLUMNS = "m.id, m.title, m.sub_title, m.year, m.img_url"

    def __init__(self, db_path: Path):
        self._db_path = db_path
        logger.info("DatabaseService initialized with %s", db_path)

    @contextmanager
    def _connect(self):
        conn = sqlite3.connect(self._db_path)
        conn.row_factory = sqlite3.Row
        try:
            yield conn
        finally:
            conn.close()

    def health_check(self) -> bool:
        try:
            with self._connect() as conn:
                conn.execute("SELECT 1 FROM movies LIMIT 1")
            return True
        except Exception:
            logger.exception("Database health check failed")
            return False

    def _order_by(self, page_request: PageRequest) -> str:
        terms = [
            f"{self.SORT_COLUMNS[order.field]} {order.direction.value.upper()}"
            for order in page_request.sort
        ]
        # id tiebreaker keeps equal titles (or years) in a stable order
        if all(order.field != "id" for order in page_request.sort):
            terms.append("m.id ASC")
        return ", ".join(terms)

    def find_movies(
        self, genre_filter: GenreFilter, page_request: PageRequest
    ) -> tuple[list[dict], int]:
        """Return one page of movie summary rows and the total matching count."""
        clauses: list[str] = []
        params: list = []

        if genre_filter.is_active:
            clauses.append("m.genre_id = ?")
            params.append(genre_filter.genre_id)

        if genre_filter.is_active and not _fits_integer(genre_filter.genre_id):
            return [], 0

        where = " AND ".join(clauses) if clauses else "1=1"

        sql = f"""
            SELECT {self.SUMMARY_COLUMNS}
            FROM movies m
            WHERE {where}
            ORDER BY {self._order_by(page_request)}
            LIMIT ? OFFSET ?
        """

        with self._connect() as conn:
            total = conn.execute(
                f"SELECT COUNT(*) FROM movies m WHERE {where}", params
            ).fetchone()[0]
            if not _fits_integer(page_request.offset):
                return [], total
            rows = conn.execute(
                sql, [*params, page_request.size, page_request.offset]
            ).fetchall()

        return [dict(r) for r in rows], total

    def find_movie(self, movie_id: int) -> dict | None:
        if not _fits_integer(movie_id):
            return None
        with self._connect() as conn:
            row = conn.execute(
                f"""SELECT {self.SUMMARY_COLUMNS}, m.synopsis,
                           g.id AS genre_id, g.name AS genre_name
                    FROM movies m
                    JOIN genres g ON g.id = m.genre_id
                    WHERE m.id = ?""",
                (movie_id,),
            ).fetchone()
        return dict(row) if row else None

    def find_genres(self) -> list[dict]:
        with self._connect() as conn:
            rows = conn.execute("SELECT id, name FROM genres ORDER BY id").fetchall()
        return [dict(r) for r in rows]
