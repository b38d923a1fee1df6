"""DDL for the finance tables and a helper to create them."""

from sqlalchemy.engine import Engine

CREATE_ACCOUNTS_SQL = """
CREATE TABLE IF NOT EXISTS accounts (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    account_type TEXT NOT NULL,
    category TEXT NOT NULL,
    name TEXT NOT NULL,
    balance NUMERIC NOT NULL DEFAULT 0,
    savings_amount NUMERIC,
    created_at TIMESTAMP,
    updated_at TIMESTAMP
)
"""

CREATE_CASH_FLOW_ITEMS_SQL = """
CREATE TABLE IF NOT EXISTS cash_flow_items (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    name TEXT NOT NULL,
    amount NUMERIC NOT NULL DEFAULT 0,
    flow_type TEXT NOT NULL,
    frequency TEXT NOT NULL DEFAULT 'monthly',
    inflow_category TEXT,
    outflow_category TEXT,
    linked_account_id TEXT REFERENCES accounts (id) ON DELETE SET NULL,
    notes TEXT,
    created_at TIMESTAMP,
    updated_at TIMESTAMP
)
"""

CREATE_BALANCE_SHEETS_SQL = """
CREATE TABLE IF NOT EXISTS balance_sheets (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    assets {json_type} NOT NULL DEFAULT '{{}}',
    liabilities {json_type} NOT NULL DEFAULT '{{}}',
    notes TEXT,
    created_at TIMESTAMP,
    updated_at TIMESTAMP
)
"""

CREATE_NET_WORTH_HISTORY_SQL = """
CREATE TABLE IF NOT EXISTS net_worth_history (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    month INTEGER NOT NULL,
    year INTEGER NOT NULL,
    net_worth NUMERIC NOT NULL,
    calculated_from_balance_sheet_id TEXT
        REFERENCES balance_sheets (id) ON DELETE SET NULL,
    recorded_at TIMESTAMP
)
"""

CREATE_INDEXES_SQL = (
    "CREATE INDEX IF NOT EXISTS ix_accounts_user_id ON accounts (user_id)",
    "CREATE INDEX IF NOT EXISTS ix_cash_flow_items_user_id "
    "ON cash_flow_items (user_id)",
    "CREATE INDEX IF NOT EXISTS ix_net_worth_history_user_period "
    "ON net_worth_history (user_id, year, month)",
)


def schema_statements(dialect_name: str) -> list[str]:
    """Return the DDL statements for a SQLAlchemy dialect name."""
    json_type = "JSONB" if dialect_name == "postgresql" else "TEXT"
    return [
        CREATE_ACCOUNTS_SQL,
        CREATE_CASH_FLOW_ITEMS_SQL,
        CREATE_BALANCE_SHEETS_SQL.format(json_type=json_type),
        CREATE_NET_WORTH_HISTORY_SQL,
        *CREATE_INDEXES_SQL,
    ]


def ensure_schema(engine: Engine) -> None:
    """Create the finance tables when they do not exist yet."""
    with engine.begin() as conn:
        for statement in schema_statements(engine.dialect.name):
            conn.exec_driver_sql(statement)


__all__ = ["schema_statements", "ensure_schema"]
