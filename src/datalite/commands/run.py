"""
Run Command

Executes every statement of an SQL script against a SQLite database, in
order, stopping at the first failure.
"""

import logging
from contextlib import closing
from pathlib import Path

from datalite.commands._source import read_source
from datalite.core.script import SQLScript
from datalite.domain.errors import ScriptExecutionError
from datalite.models import ScriptOptions
from datalite.providers.base.executor import ExecutionConfig, ExecutionResult
from datalite.providers.sqlite.executor import SQLiteExecutor, open_connection

logger = logging.getLogger(__name__)

MEMORY_DATABASE = ":memory:"


def run_script(
    database: str | Path,
    source: str | Path,
    options: ScriptOptions | None = None,
    config: ExecutionConfig | None = None,
) -> ExecutionResult:
    """Execute a script against a database

    Args:
        database: SQLite database path (":memory:" for a throwaway database)
        source: Script path, or "-" for stdin
        options: Script processing options
        config: Execution configuration

    Returns:
        ExecutionResult of a fully successful run

    Raises:
        ScriptLoadError: If the script cannot be read
        ScriptExecutionError: If a statement fails (carries the partial result)
    """
    config = config or ExecutionConfig()
    script = SQLScript(read_source(source), options=options)

    # Dry runs never open the target database.
    target = MEMORY_DATABASE if config.dry_run else database
    logger.debug("Running %d statement(s) against %s", len(script), target)

    with closing(open_connection(target)) as connection:
        result = SQLiteExecutor(connection).execute_statements(list(script), config)

    if result.status != "success":
        raise ScriptExecutionError(
            result.error_message or "Script execution failed",
            code="statement_failed",
            result=result,
        )
    return result
