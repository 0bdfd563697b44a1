"""The interactive minforth loop."""

import sys
from typing import Optional

import minforth
from minforth.error_reporting import create_error_message
from minforth.errors import ForthError
from minforth.interpreter import Forth
import minforth.logging


_logger = minforth.logging.ForthLogger.get(__name__)

DEFAULT_INIT_FILE = '.minforth-rc.fs'


def print_exit_message() -> None:
    print('Bye!')


def _exec_init_file(forth: Forth, init_file_name: str) -> None:
    print('Running startup initialization file...')
    try:
        with open(init_file_name) as init_file:
            lines = [*init_file]
    except FileNotFoundError:
        print('No startup initialization file found.')
        return
    for lineno, line in enumerate(lines, 1):
        try:
            forth.evaluate(line)
        except ForthError as e:
            print(f'Error in {init_file_name}:\n')
            print(create_error_message(line, e, lineno))
            return


def _do_repl_loop(prompt: str, forth: Forth) -> None:
    while True:
        print(prompt, end='', flush=True)
        try:
            line = input()
        except EOFError:
            break
        try:
            forth.evaluate(line)
        except ForthError as e:
            _logger.debug('line failed', exc_info=e)
            print(create_error_message(line, e))
        print('Stack:', forth.format_stack())


def repl(
    forth: Optional[Forth] = None,
    debug=False,
    init_file_name: Optional[str] = DEFAULT_INIT_FILE,
) -> None:
    if forth is None:
        forth = Forth(should_log_stack=debug)

    intro_message = 'minforth REPL (version {} on Python {}).'.format(
        minforth.version, sys.version
    )
    print(intro_message)

    if init_file_name is not None:
        _exec_init_file(forth, init_file_name)

    prompt = '>>> '
    try:
        _do_repl_loop(prompt, forth)
    except KeyboardInterrupt:
        # catch ctrl-c to cleanly exit
        print()
    print_exit_message()
