"""Apply a function type to argument types from the command line.

    python -m funtype 'Seq a -> (a -> b) -> Seq b' 'Seq Num' 'Num -> Num'
"""

import argparse
import logging
import sys
from typing import List, Optional, Sequence

import parsy

from funtype.error_reporting import (
    create_parsing_failure_message,
    create_type_error_message,
)
from funtype.logging import JSONFormatter
from funtype.notation import parse_ft
from funtype.tree import ZipShapeMismatch
from funtype.typecheck import apply
from funtype.typecheck.context import ConflictPolicy, change_settings
from funtype.typecheck.errors import TypeApplicationError
from funtype.typecheck.types import FT, format_ft

arg_parser = argparse.ArgumentParser(
    prog='funtype',
    description='Apply a curried function type to argument types.',
)
arg_parser.add_argument('function', help='the type of the function')
arg_parser.add_argument(
    'arguments',
    nargs='*',
    help='types of the arguments, applied one at a time',
)
arg_parser.add_argument(
    '--conflicts',
    choices=[policy.value for policy in ConflictPolicy],
    default=ConflictPolicy.REJECT.value,
    help=(
        'what to do when a type variable is bound to two different types '
        '(default: %(default)s)'
    ),
)
arg_parser.add_argument(
    '--verbose',
    action='store_true',
    default=False,
    help='print internal logs',
)
arg_parser.add_argument(
    '--json-logs',
    action='store_true',
    default=False,
    help='format internal logs as JSON',
)


def _configure_logging(verbose: bool, json_logs: bool) -> None:
    if not verbose and not json_logs:
        return
    handler = logging.StreamHandler(sys.stderr)
    if json_logs:
        handler.setFormatter(JSONFormatter())
    root = logging.getLogger('funtype')
    root.addHandler(handler)
    root.setLevel(logging.DEBUG)


def _parse_all(texts: Sequence[str]) -> Optional[List[FT]]:
    types = []
    for text in texts:
        try:
            types.append(parse_ft(text))
        except parsy.ParseError as e:
            print('Parse Error:', file=sys.stderr)
            print(create_parsing_failure_message(text, e), file=sys.stderr)
            return None
    return types


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = arg_parser.parse_args(argv)
    _configure_logging(args.verbose, args.json_logs)

    types = _parse_all([args.function, *args.arguments])
    if types is None:
        return 1
    f, *xs = types

    with change_settings(conflict_policy=ConflictPolicy(args.conflicts)):
        print(format_ft(f))
        for x in xs:
            try:
                f = apply(f, x)
            except (TypeApplicationError, ZipShapeMismatch) as e:
                print(
                    f'Type Error applying to {format_ft(x)}:',
                    file=sys.stderr,
                )
                print(create_type_error_message(e), file=sys.stderr)
                return 1
            print(format_ft(f))
    return 0


if __name__ == '__main__':
    sys.exit(main())
