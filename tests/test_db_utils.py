import pytest

from telemetry_sidecar.db_utils import DatabaseConfigError, create_connection


def test_missing_database_url(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    with pytest.raises(DatabaseConfigError, match="'DATABASE_URL' not specified"):
        create_connection()


def test_connection_to_file(monkeypatch, tmp_path, capsys):
    db_path = str(tmp_path / "metrics.db")
    monkeypatch.setenv("DATABASE_URL", db_path)
    conn = create_connection()
    try:
        conn.execute("CREATE TABLE t (x INTEGER)")
        conn.execute("INSERT INTO t VALUES (7)")
        assert conn.execute("SELECT x FROM t").fetchall() == [(7,)]
    finally:
        conn.close()
    assert f"Using DATABASE_URL: {db_path}" in capsys.readouterr().out
    assert (tmp_path / "metrics.db").exists()


def test_unopenable_database(monkeypatch, tmp_path):
    db_path = str(tmp_path / "missing_dir" / "metrics.db")
    monkeypatch.setenv("DATABASE_URL", db_path)
    with pytest.raises(DatabaseConfigError, match="Can't open connection to db"):
        create_connection()