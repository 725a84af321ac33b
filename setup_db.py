"""
setup_db.py — Build the MovieFlix catalog SQLite database from the seed CSVs.

Data sources (expected in the workspace):
  data/genres.csv
  data/movies.csv

Output: movies.db (or the path given as the first argument)
"""

import csv
import sqlite3
import sys
import time
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent
DB_PATH = BASE_DIR / "movies.db"

GENRES_CSV = BASE_DIR / "data" / "genres.csv"
MOVIES_CSV = BASE_DIR / "data" / "movies.csv"

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS genres (
    id   INTEGER PRIMARY KEY,
    name TEXT NOT NULL UNIQUE
);

CREATE TABLE IF NOT EXISTS movies (
    id        INTEGER PRIMARY KEY,
    title     TEXT NOT NULL,
    sub_title TEXT,
    year      INTEGER,
    img_url   TEXT,
    synopsis  TEXT,
    genre_id  INTEGER NOT NULL REFERENCES genres(id)
);

CREATE INDEX IF NOT EXISTS idx_movies_title ON movies(title);
CREATE INDEX IF NOT EXISTS idx_movies_genre ON movies(genre_id);
"""


def parse_int(raw: str) -> int | None:
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


def load_genres(cur: sqlite3.Cursor, path: Path = GENRES_CSV) -> set[int]:
    """Parse genres.csv -> genres. Returns set of loaded genre ids."""
    genre_ids = set()
    with open(path, encoding="utf-8", newline="") as f:
        for row in csv.DictReader(f):
            genre_id = int(row["id"])
            genre_ids.add(genre_id)
            cur.execute(
                "INSERT OR IGNORE INTO genres (id, name) VALUES (?, ?)",
                (genre_id, row["name"]),
            )
    return genre_ids


def load_movies(cur: sqlite3.Cursor, genre_ids: set[int], path: Path = MOVIES_CSV) -> int:
    """Parse movies.csv -> movies. Returns count of inserted rows."""
    inserted = 0
    with open(path, encoding="utf-8", newline="") as f:
        for row in csv.DictReader(f):
            genre_id = int(row["genre_id"])
            if genre_id not in genre_ids:
                raise ValueError(f"Movie {row['id']} references unknown genre {genre_id}")

            cur.execute(
                """INSERT OR IGNORE INTO movies
                   (id, title, sub_title, year, img_url, synopsis, genre_id)
                   VALUES (?,?,?,?,?,?,?)""",
                (
                    int(row["id"]),
                    row["title"],
                    row.get("sub_title") or None,
                    parse_int(row.get("year")),
                    row.get("img_url") or None,
                    row.get("synopsis") or None,
                    genre_id,
                ),
            )
            inserted += cur.rowcount
    return inserted


def build_database(db_path: Path = DB_PATH) -> None:
    """Create (or replace) the catalog database at ``db_path``."""
    db_path = Path(db_path)
    if db_path.exists():
        db_path.unlink()

    conn = sqlite3.connect(db_path)
    try:
        cur = conn.cursor()
        cur.executescript(SCHEMA_SQL)
        genre_ids = load_genres(cur)
        load_movies(cur, genre_ids)
        conn.commit()
    finally:
        conn.close()


def print_summary(cur: sqlite3.Cursor) -> None:
    print("\n=== Database Summary ===")
    for table in ("genres", "movies"):
        cur.execute(f"SELECT COUNT(*) FROM {table}")
        count = cur.fetchone()[0]
        print(f"  {table:10s}: {count:>6,} rows")

    print("\n=== Movies per genre ===")
    cur.execute("""
        SELECT g.name, COUNT(m.id)
        FROM genres g
        LEFT JOIN movies m ON m.genre_id = g.id
        GROUP BY g.id
        ORDER BY g.id
    """)
    for name, count in cur.fetchall():
        print(f"  {name:12s} {count}")


def main() -> None:
    db_path = Path(sys.argv[1]) if len(sys.argv) > 1 else DB_PATH

    for path in (GENRES_CSV, MOVIES_CSV):
        if not path.exists():
            print(f"ERROR: missing seed file {path}")
            sys.exit(1)

    start = time.time()
    build_database(db_path)
    print(f"Built {db_path} in {time.time() - start:.2f}s")

    conn = sqlite3.connect(db_path)
    try:
        print_summary(conn.cursor())
    finally:
        conn.close()


if __name__ == "__main__":
    main()
