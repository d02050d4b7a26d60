"""
SQL Script

Loads SQL script text from a string, a file or a package resource and
exposes it as an ordered, immutable sequence of statements ready to be
executed one at a time.
"""

import logging
from collections.abc import Iterator, Sequence
from importlib import resources
from pathlib import Path
from typing import overload

from datalite.core.sql_utils import remove_comments, split_statements, trim_lines
from datalite.domain.errors import ScriptLoadError
from datalite.models import ScriptOptions

logger = logging.getLogger(__name__)


class SQLScript(Sequence[str]):
    """Ordered collection of the statements of an SQL script

    The text is cleaned and split once, at construction time, according to
    ``options``: comments are removed, blank lines are trimmed, then the
    result is split on top-level semicolons.

    Attributes:
        source: The text the script was built from
        options: Processing options used to build the statements
    """

    def __init__(self, text: str = "", *, options: ScriptOptions | None = None) -> None:
        self.source = text
        self.options = options or ScriptOptions()
        self._statements = tuple(_parse(text, self.options))
        logger.debug("Parsed SQL script into %d statement(s)", len(self._statements))

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        *,
        encoding: str = "utf-8",
        options: ScriptOptions | None = None,
    ) -> "SQLScript":
        """Load a script from a file

        Args:
            path: Path to the script file
            encoding: Text encoding of the file
            options: Processing options

        Returns:
            Parsed SQLScript

        Raises:
            ScriptLoadError: If the file is missing, unreadable or not valid text
        """
        return cls(read_script_text(path, encoding=encoding), options=options)

    @classmethod
    def from_resource(
        cls,
        package: str,
        name: str,
        *,
        extension: str | None = "sql",
        encoding: str = "utf-8",
        options: ScriptOptions | None = None,
    ) -> "SQLScript | None":
        """Load a script bundled as a package resource

        Args:
            package: Importable package that holds the resource
            name: Resource name, without extension
            extension: File extension appended to ``name`` (None for none)
            encoding: Text encoding of the resource
            options: Processing options

        Returns:
            Parsed SQLScript, or None if the resource does not exist

        Raises:
            ScriptLoadError: If the package cannot be imported, or the resource
                exists but cannot be read or decoded
        """
        filename = f"{name}.{extension}" if extension else name
        try:
            resource = resources.files(package).joinpath(filename)
        except ModuleNotFoundError as e:
            raise ScriptLoadError(
                f"SQL resource package not found: {package}", code="script_not_found"
            ) from e
        if not resource.is_file():
            logger.debug("SQL resource %s not found in package %s", filename, package)
            return None

        try:
            data = resource.read_bytes()
        except OSError as e:
            raise ScriptLoadError(
                f"Cannot read SQL resource {package}/{filename}: {e}", code="script_io_error"
            ) from e
        return cls(decode_script_text(data, encoding, f"{package}/{filename}"), options=options)

    @property
    def statements(self) -> tuple[str, ...]:
        return self._statements

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[str, ...]: ...

    def __getitem__(self, index: int | slice) -> str | tuple[str, ...]:
        return self._statements[index]

    def __len__(self) -> int:
        return len(self._statements)

    def __iter__(self) -> Iterator[str]:
        return iter(self._statements)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SQLScript):
            return NotImplemented
        return self._statements == other._statements

    def __hash__(self) -> int:
        return hash(self._statements)

    def __repr__(self) -> str:
        return f"SQLScript({len(self._statements)} statements)"


def read_script_text(path: str | Path, *, encoding: str = "utf-8") -> str:
    """Read the raw text of a script file

    Raises:
        ScriptLoadError: If the file is missing, unreadable or not valid text
    """
    script_path = Path(path)
    try:
        data = script_path.read_bytes()
    except FileNotFoundError as e:
        raise ScriptLoadError(
            f"SQL script not found: {script_path}", code="script_not_found"
        ) from e
    except OSError as e:
        raise ScriptLoadError(
            f"Cannot read SQL script {script_path}: {e}", code="script_io_error"
        ) from e

    logger.debug("Loaded SQL script from %s (%d bytes)", script_path, len(data))
    return decode_script_text(data, encoding, str(script_path))


def _parse(text: str, options: ScriptOptions) -> list[str]:
    if options.strip_comments:
        text = remove_comments(text)
    if options.trim_lines:
        text = trim_lines(text)
    return split_statements(text, strict_keywords=options.strict_keywords)


def decode_script_text(data: bytes, encoding: str, origin: str) -> str:
    """Decode raw script bytes, naming ``origin`` in the error message

    Raises:
        ScriptLoadError: If the bytes are not valid text in ``encoding``
    """
    try:
        return data.decode(encoding)
    except (UnicodeDecodeError, LookupError) as e:
        raise ScriptLoadError(
            f"SQL script {origin} is not valid {encoding} text: {e}", code="script_decode_error"
        ) from e
