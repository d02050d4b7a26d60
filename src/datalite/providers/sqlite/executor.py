"""
SQLite SQL Executor

Executes script statements against a SQLite database through the standard
library sqlite3 module, one prepared statement at a time.
"""

import logging
import sqlite3
import time
from pathlib import Path
from uuid import uuid4

from datalite.providers.base.executor import ExecutionConfig, ExecutionResult, StatementResult

logger = logging.getLogger(__name__)


def open_connection(database: str | Path) -> sqlite3.Connection:
    """Open a database in autocommit mode

    The connection does not open implicit transactions, so BEGIN/COMMIT
    statements in a script keep their meaning.

    Args:
        database: Path to the database file, or ":memory:"

    Returns:
        Open sqlite3 connection
    """
    return sqlite3.connect(str(database), isolation_level=None)


class SQLiteExecutor:
    """Execute SQL statements against a SQLite connection

    Each statement is executed and all of its rows are fetched before the next
    statement starts. Execution is fail-fast: the first error stops the run
    and a partial result is returned.

    Attributes:
        connection: Open sqlite3 connection
    """

    def __init__(self, connection: sqlite3.Connection) -> None:
        self.connection = connection

    def execute_statements(self, statements: list[str], config: ExecutionConfig) -> ExecutionResult:
        """Execute SQL statements sequentially with fail-fast behavior

        Args:
            statements: List of SQL statements to execute
            config: Execution configuration

        Returns:
            ExecutionResult with detailed execution information
        """
        run_id = f"run_{uuid4().hex[:8]}"
        results: list[StatementResult] = []
        start_time = time.time()

        logger.info("Executing %d statement(s) [%s]", len(statements), run_id)

        for i, sql in enumerate(statements, 1):
            if config.dry_run:
                results.append(
                    StatementResult(statement_id=f"stmt_{i}", sql=sql, status="skipped")
                )
                continue

            result = self._execute_single_statement(sql, config, i)
            results.append(result)

            if result.status == "failed":
                logger.info(
                    "Statement %d/%d failed: %s", i, len(statements), result.error_message
                )
                successful_count = i - 1

                # "failed" if nothing succeeded, "partial" otherwise
                status = "failed" if successful_count == 0 else "partial"

                return ExecutionResult(
                    run_id=run_id,
                    total_statements=len(statements),
                    successful_statements=successful_count,
                    failed_statement_index=i - 1,
                    statement_results=results,
                    total_execution_time_ms=_elapsed_ms(start_time),
                    status=status,
                    error_message=f"Statement {i} failed: {result.error_message}",
                )

            logger.debug(
                "Statement %d/%d completed in %d ms", i, len(statements), result.execution_time_ms
            )

        return ExecutionResult(
            run_id=run_id,
            total_statements=len(statements),
            successful_statements=0 if config.dry_run else len(statements),
            failed_statement_index=None,
            statement_results=results,
            total_execution_time_ms=_elapsed_ms(start_time),
            status="success",
            error_message=None,
        )

    def _execute_single_statement(
        self, sql: str, config: ExecutionConfig, statement_num: int
    ) -> StatementResult:
        """Execute one statement and step it to completion"""
        exec_start = time.time()

        try:
            cursor = self.connection.execute(sql)
            try:
                rows = cursor.fetchall()
                columns = [column[0] for column in cursor.description or ()]
                rowcount = cursor.rowcount
            finally:
                cursor.close()
        except (sqlite3.Error, sqlite3.Warning) as e:
            return StatementResult(
                statement_id=f"stmt_{statement_num}",
                sql=sql,
                status="failed",
                execution_time_ms=_elapsed_ms(exec_start),
                error_message=str(e),
                error_code=getattr(e, "sqlite_errorname", None) or type(e).__name__,
            )

        result_data = None
        if config.fetch_results and columns:
            result_data = [dict(zip(columns, row)) for row in rows[: config.max_result_rows]]

        return StatementResult(
            statement_id=f"stmt_{statement_num}",
            sql=sql,
            status="success",
            execution_time_ms=_elapsed_ms(exec_start),
            rows_affected=rowcount if rowcount >= 0 else None,
            result_data=result_data,
        )


def _elapsed_ms(start: float) -> int:
    return int((time.time() - start) * 1000)
