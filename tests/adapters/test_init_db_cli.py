"""Tests for the init_db_cli adapter."""

from src.adapters import init_db_cli


class _DummyConnection:
    def __init__(self) -> None:
        self.executed: list[str] = []

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False

    def exec_driver_sql(self, statement: str) -> None:
        self.executed.append(statement)


class _DummyEngine:
    def __init__(self, url: str) -> None:
        self.url = url
        self.connection = _DummyConnection()

    def connect(self):
        return self.connection


def test_main_creates_schema_and_checks_connection(monkeypatch):
    """The CLI should create tables, run SELECT 1 and log the URL."""
    engine = _DummyEngine("postgresql+psycopg://finance")
    schema_calls = []
    log_messages: list[str] = []

    class _Adapter:
        def get_finance_engine(self):
            return engine

    class _Logger:
        def info(self, msg: str) -> None:
            log_messages.append(msg)

    monkeypatch.setattr(init_db_cli, "build_database_adapter", _Adapter)
    monkeypatch.setattr(init_db_cli, "get_app_logger", _Logger)
    monkeypatch.setattr(init_db_cli, "ensure_schema", schema_calls.append)

    init_db_cli.main()

    assert schema_calls == [engine]
    assert engine.connection.executed == ["SELECT 1"]
    assert "postgresql+psycopg://finance" in log_messages[0]


def test_main_masks_password_in_log(monkeypatch):
    engine = _DummyEngine("postgresql+psycopg://wealth:secret@db/wealth")
    log_messages: list[str] = []

    class _Adapter:
        def get_finance_engine(self):
            return engine

    class _Logger:
        def info(self, msg: str) -> None:
            log_messages.append(msg)

    monkeypatch.setattr(init_db_cli, "build_database_adapter", _Adapter)
    monkeypatch.setattr(init_db_cli, "get_app_logger", _Logger)
    monkeypatch.setattr(init_db_cli, "ensure_schema", lambda engine: None)

    init_db_cli.main()

    assert "secret" not in log_messages[0]
    assert "wealth:***@db/wealth" in log_messages[0]
