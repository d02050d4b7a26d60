#!/usr/bin/env python3
"""
Example: Run a migration script against an in-memory SQLite database

This script demonstrates how to use the DataLite Python SDK to split a
commented migration (including a trigger body) into statements and execute
them one at a time.
"""

from datalite import SQLScript
from datalite.providers import ExecutionConfig, SQLiteExecutor, open_connection

MIGRATION = """
-- Accounts and an audit trail
CREATE TABLE accounts (
    id      INTEGER PRIMARY KEY,
    owner   TEXT NOT NULL,
    balance INTEGER NOT NULL DEFAULT 0
);

CREATE TABLE audit (note TEXT);

/* Every insert is logged; the body holds its own semicolon */
CREATE TRIGGER accounts_audit AFTER INSERT ON accounts
BEGIN
    INSERT INTO audit VALUES ('new account; owner=' || NEW.owner);
END;

INSERT INTO accounts (owner, balance) VALUES ('O''Brien', 100);
SELECT note FROM audit;
"""


def main():
    script = SQLScript(MIGRATION)

    print(f"Parsed {len(script)} statements")
    for i, statement in enumerate(script, 1):
        first_line = statement.splitlines()[0]
        print(f"  {i}. {first_line}")

    connection = open_connection(":memory:")
    try:
        executor = SQLiteExecutor(connection)
        result = executor.execute_statements(list(script), ExecutionConfig(fetch_results=True))
    finally:
        connection.close()

    if result.status == "success":
        print(f"\n✓ Executed {result.successful_statements} statements")
        print(f"  Audit rows: {result.statement_results[-1].result_data}")
    else:
        print(f"\n✗ {result.error_message}")


if __name__ == "__main__":
    main()
