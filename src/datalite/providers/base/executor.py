"""
Base SQL Executor Protocol

Defines the contract for executing the statements of an SQL script against
a database connection. Backends implement this protocol to support the
`datalite run` command.
"""

from typing import Literal, Protocol

from pydantic import BaseModel, Field


class ExecutionConfig(BaseModel):
    """Configuration for SQL execution

    Attributes:
        dry_run: If True, report statements as skipped without executing them
        fetch_results: If True, keep rows returned by each statement
        max_result_rows: Upper bound on rows kept per statement
    """

    dry_run: bool = Field(default=False, description="Preview without executing")
    fetch_results: bool = Field(default=False, description="Keep returned rows")
    max_result_rows: int = Field(default=100, ge=0, description="Rows kept per statement")


class StatementResult(BaseModel):
    """Result of single statement execution

    Attributes:
        statement_id: Identifier of the statement within the run
        sql: The SQL statement that was executed
        status: Execution status (success/failed/skipped)
        execution_time_ms: Time taken to execute in milliseconds
        error_message: Error details if execution failed
        error_code: Backend error name if execution failed
        rows_affected: Number of rows affected (if applicable)
        result_data: Rows returned by the statement (list of row dicts)
    """

    statement_id: str = Field(..., description="Statement identifier")
    sql: str = Field(..., description="SQL statement")
    status: Literal["success", "failed", "skipped"] = Field(..., description="Execution status")
    execution_time_ms: int = Field(default=0, description="Execution time in milliseconds")
    error_message: str | None = Field(None, description="Error message if failed")
    error_code: str | None = Field(None, description="Backend error name if failed")
    rows_affected: int | None = Field(None, description="Rows affected")
    result_data: list[dict[str, object]] | None = Field(
        None, description="Returned rows (for queries)"
    )


class ExecutionResult(BaseModel):
    """Result of a full script execution

    Attributes:
        run_id: Unique run identifier
        total_statements: Total number of statements to execute
        successful_statements: Number of statements that succeeded
        failed_statement_index: Index of the failed statement (if any)
        statement_results: Detailed results for each statement attempted
        total_execution_time_ms: Total execution time in milliseconds
        status: Overall execution status
        error_message: Summary error message (if failed)
    """

    run_id: str = Field(..., description="Run ID")
    total_statements: int = Field(..., description="Total statements")
    successful_statements: int = Field(default=0, description="Successful statements")
    failed_statement_index: int | None = Field(None, description="Failed statement index")
    statement_results: list[StatementResult] = Field(
        default_factory=list, description="Statement results"
    )
    total_execution_time_ms: int = Field(default=0, description="Total execution time (ms)")
    status: Literal["success", "failed", "partial"] = Field(..., description="Overall status")
    error_message: str | None = Field(None, description="Error summary")


class SQLExecutor(Protocol):
    """Protocol for executing SQL statements one at a time

    Each statement is prepared and fully stepped before the next one starts.
    Execution stops at the first failing statement.
    """

    def execute_statements(self, statements: list[str], config: ExecutionConfig) -> ExecutionResult:
        """Execute SQL statements sequentially

        Args:
            statements: List of SQL statements to execute, in order
            config: Execution configuration

        Returns:
            ExecutionResult with detailed execution information
        """
        ...
