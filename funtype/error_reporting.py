import parsy

from funtype.tree import ZipShapeMismatch
from funtype.typecheck.errors import TypeApplicationError
from funtype.typecheck.types import format_ft


def create_parsing_failure_message(text: str, error: parsy.ParseError) -> str:
    position = error.index
    return (
        f'Expected {_expected(error)} at column {position + 1}:\n'
        f'{text}\n'
        f'{" " * position + "^"}'
    )


def _expected(error: parsy.ParseError) -> str:
    expected = sorted(error.expected)
    if len(expected) == 1:
        return expected[0]
    return 'one of ' + ', '.join(expected)


def create_type_error_message(
    error: TypeApplicationError | ZipShapeMismatch,
) -> str:
    if isinstance(error, ZipShapeMismatch):
        return (
            'The argument does not have the shape the function expects:\n'
            f'  {format_ft(error.left)}\n'
            'cannot be matched with\n'
            f'  {format_ft(error.right)}'
        )
    return str(error)
