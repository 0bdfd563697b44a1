"""The minforth command line driver.

Run a file of minforth code line by line, or start the REPL when the input
is a terminal.
"""

import argparse
import sys
from typing import IO, AnyStr, Callable

from minforth.error_reporting import create_error_message
from minforth.errors import ForthError
from minforth.interpreter import Forth
import minforth.logging
import minforth.repl


filename = '<stdin>'


def file_type(mode: str) -> Callable[[str], IO[AnyStr]]:
    """Capture the filename and create a file object."""

    def func(name: str) -> IO[AnyStr]:
        global filename
        filename = name
        return open(name, mode=mode)

    return func


arg_parser = argparse.ArgumentParser(description='Run a minforth program.')
arg_parser.add_argument(
    'file',
    nargs='?',
    type=file_type('r'),
    default=sys.stdin,
    help='file to run',
)
arg_parser.add_argument(
    '--debug',
    action='store_true',
    default=False,
    help='log every push and pop (needs --verbose to be seen)',
)
arg_parser.add_argument(
    '--verbose',
    action='store_true',
    default=False,
    help='print internal logs to stderr as JSON',
)
arg_parser.add_argument(
    '--init-file',
    default=minforth.repl.DEFAULT_INIT_FILE,
    help='file to run when the REPL starts (default: %(default)s)',
)


def batch_main(args: argparse.Namespace) -> int:
    forth = Forth(should_log_stack=args.debug)
    try:
        for lineno, line in enumerate(args.file, 1):
            try:
                forth.evaluate(line)
            except ForthError as e:
                print(f'Error in {filename}:')
                print(create_error_message(line, e, lineno))
                return 1
    finally:
        args.file.close()
    print(forth.format_stack())
    return 0


def main() -> None:
    args = arg_parser.parse_args()
    minforth.logging.configure(args.verbose)
    # interactive mode
    if args.file.isatty():
        minforth.repl.repl(debug=args.debug, init_file_name=args.init_file)
    else:
        sys.exit(batch_main(args))


main()
