import minforth.errors
import minforth.lex


def create_error_message(
    line: str, error: minforth.errors.ForthError, lineno: int = 1
) -> str:
    """Describe `error`, pointing at the token that caused it if known.

    `line` is the source line that was evaluated. Token positions refer to the
    normalized line, so that is what gets shown."""
    kind = type(error).__name__
    if error.token is None:
        return f'{kind}: {error.message} in line {lineno}:\n{line.rstrip()}'
    column = error.token.start[1]
    normalized = minforth.lex.normalize(line).rstrip()
    return (
        f'{kind}: {error} at line {lineno}, column {column + 1}:\n'
        f'{normalized}\n'
        f'{" " * column + "^"}'
    )
