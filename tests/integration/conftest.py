"""Fixtures and helpers for integration tests against a real database."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from pyjson2csv import convert
from pyjson2csv.schema import Options


@pytest.fixture(scope="session")
def duckdb_conn():
    duckdb = pytest.importorskip("duckdb")
    conn = duckdb.connect(":memory:")
    yield conn
    conn.close()


def write_csv(tmp_path: Path, json_text: str, options: Options, name: str = "out.csv") -> Path:
    """Convert ``json_text`` into a CSV file under ``tmp_path``."""
    path = tmp_path / name
    with open(path, "w", newline="", encoding="utf-8") as sink:
        convert(json_text.encode("utf-8"), sink, options)
    return path


def load_csv(conn: Any, path: Path, delimiter: str = ",") -> tuple[list[str], list[tuple[Any, ...]]]:
    """Read a CSV file with DuckDB as all-VARCHAR columns.

    Returns (column names, rows). Empty cells come back as ``None``.
    """
    result = conn.execute(
        f"SELECT * FROM read_csv('{path.as_posix()}', header = true, "
        f"delim = '{delimiter}', quote = '\"', escape = '\"', all_varchar = true)"
    )
    columns = [d[0] for d in result.description]
    return columns, result.fetchall()
