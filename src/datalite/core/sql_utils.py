"""
SQL utilities - single-pass scanners for SQL script text.

Three independent transformations over plain text, with no database or
dialect dependency:

- remove_comments: drop ``--`` line comments and ``/* */`` block comments
- trim_lines: collapse blank lines and drop trailing horizontal whitespace
- split_statements: split a script on top-level semicolons

All three copy single-quoted literals verbatim and never raise on malformed
input (unterminated literals or comments, unbalanced BEGIN/END).
"""

from enum import Enum, auto

_BLANK_RUN = " \t\n"
_STATEMENT_GAP = " \t\r\n"
_LINE_COMMENT_END = "\r\n"
_WORD_EXTRA_CHARS = "_$"


class _State(Enum):
    """Scanner states shared by the transformations."""

    CODE = auto()
    LITERAL = auto()
    LINE_COMMENT = auto()
    BLOCK_COMMENT = auto()


def _literal_end(text: str, start: int) -> int:
    """Return the index just past the literal opened at ``start``.

    A doubled quote inside the literal is an escaped quote and does not close
    it. An unterminated literal runs to the end of ``text``.
    """
    length = len(text)
    pos = start + 1
    while pos < length:
        if text[pos] == "'":
            if pos + 1 < length and text[pos + 1] == "'":
                pos += 2
                continue
            return pos + 1
        pos += 1
    return length


def remove_comments(text: str) -> str:
    """Remove SQL comments while leaving string literals untouched.

    Line comments run from ``--`` up to, but not including, the next line
    break, so the break itself survives. Block comments run from ``/*`` to the
    first ``*/`` (no nesting); an unterminated block comment swallows the rest
    of the input.

    Args:
        text: SQL script text.

    Returns:
        The text with every comment removed.
    """
    output: list[str] = []
    length = len(text)
    state = _State.CODE
    pos = 0

    while pos < length:
        if state is _State.CODE:
            char = text[pos]
            if char == "'":
                state = _State.LITERAL
            elif text.startswith("--", pos):
                state = _State.LINE_COMMENT
                pos += 2
            elif text.startswith("/*", pos):
                state = _State.BLOCK_COMMENT
                pos += 2
            else:
                output.append(char)
                pos += 1

        elif state is _State.LITERAL:
            end = _literal_end(text, pos)
            output.append(text[pos:end])
            pos = end
            state = _State.CODE

        elif state is _State.LINE_COMMENT:
            while pos < length and text[pos] not in _LINE_COMMENT_END:
                pos += 1
            state = _State.CODE

        else:
            close = text.find("*/", pos)
            pos = length if close == -1 else close + 2
            state = _State.CODE

    return "".join(output)


def trim_lines(text: str) -> str:
    """Drop blank lines and trailing whitespace outside string literals.

    A run of spaces, tabs and line breaks that contains at least one line
    break becomes a single ``\\n`` followed by the indentation of the next
    line. The same run is dropped entirely at the start or end of the input,
    as is trailing horizontal whitespace at the end of the input. Literals are
    copied as-is, embedded line breaks included.

    Args:
        text: SQL script text.

    Returns:
        The normalised text.
    """
    output: list[str] = []
    length = len(text)
    pos = 0

    while pos < length:
        char = text[pos]

        if char == "'":
            end = _literal_end(text, pos)
            output.append(text[pos:end])
            pos = end
            continue

        if char not in _BLANK_RUN:
            output.append(char)
            pos += 1
            continue

        run_end = pos
        while run_end < length and text[run_end] in _BLANK_RUN:
            run_end += 1

        run = text[pos:run_end]
        if run_end == length:
            pass
        elif "\n" not in run:
            output.append(run)
        else:
            if pos > 0:
                output.append("\n")
            output.append(run[run.rfind("\n") + 1 :])
        pos = run_end

    return "".join(output)


def _is_word_char(char: str) -> bool:
    return char.isalnum() or char in _WORD_EXTRA_CHARS


def _match_keyword(text: str, pos: int, keyword: str, strict: bool) -> bool:
    """Case-insensitive match of ``keyword`` at ``pos``.

    In strict mode the keyword must not be glued to a neighbouring word
    character (``BEGINNING`` and ``BACKEND`` do not match).
    """
    end = pos + len(keyword)
    if text[pos:end].upper() != keyword:
        return False
    if not strict:
        return True
    if pos > 0 and _is_word_char(text[pos - 1]):
        return False
    return not (end < len(text) and _is_word_char(text[end]))


def _append_statement(statements: list[str], span: str) -> None:
    if span.strip():
        statements.append(span)


def split_statements(sql_text: str, *, strict_keywords: bool = True) -> list[str]:
    """Split an SQL script into statements on top-level semicolons.

    Semicolons inside single-quoted literals and inside ``BEGIN ... END``
    bodies (trigger definitions) do not split. ``BEGIN`` raises the nesting
    depth and ``END`` lowers it, never below zero. Each terminator and the
    whitespace that follows it are dropped; whitespace-only spans are
    skipped. A trailing statement without a semicolon is kept.

    Args:
        sql_text: SQL script text (raw or already cleaned).
        strict_keywords: Match ``BEGIN``/``END`` only as whole words. When
            False, any occurrence of the letters counts, e.g. inside
            ``BEGINNING`` or ``APPEND``.

    Returns:
        Non-empty statement strings, in source order.
    """
    statements: list[str] = []
    length = len(sql_text)
    depth = 0
    start = 0
    pos = 0

    while pos < length:
        char = sql_text[pos]

        if char == "'":
            pos = _literal_end(sql_text, pos)

        elif char == ";" and depth == 0:
            _append_statement(statements, sql_text[start:pos])
            pos += 1
            while pos < length and sql_text[pos] in _STATEMENT_GAP:
                pos += 1
            start = pos

        elif char in "bB" and _match_keyword(sql_text, pos, "BEGIN", strict_keywords):
            depth += 1
            pos += len("BEGIN")

        elif char in "eE" and _match_keyword(sql_text, pos, "END", strict_keywords):
            if depth > 0:
                depth -= 1
            pos += len("END")

        elif strict_keywords and _is_word_char(char):
            # Skip the rest of the word so keywords are only seen at word starts.
            pos += 1
            while pos < length and _is_word_char(sql_text[pos]):
                pos += 1

        else:
            pos += 1

    _append_statement(statements, sql_text[start:])
    return statements
