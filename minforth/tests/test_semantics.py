from minforth.errors import (
    DivisionByZero,
    ForthError,
    InvalidWord,
    StackUnderflow,
    UnknownWord,
)
from minforth.interpreter import Forth
from minforth.resolve import VALUE_MAX, VALUE_MIN
import unittest

from hypothesis import given
from hypothesis.strategies import integers, lists

values = integers(min_value=VALUE_MIN, max_value=VALUE_MAX)


class TestForth(unittest.TestCase):
    def setUp(self) -> None:
        self.forth = Forth()

    def assertStack(self, expected: str) -> None:
        self.assertEqual(self.forth.format_stack(), expected)

    def test_fresh_stack_is_empty(self) -> None:
        self.assertStack('')
        self.assertEqual(self.forth.stack, [])

    def test_numbers(self) -> None:
        self.forth.evaluate('1 2 3')
        self.assertStack('1 2 3')

    @given(lists(values))
    def test_numbers_are_pushed_in_order(self, numbers) -> None:
        forth = Forth()
        forth.evaluate(' '.join(map(str, numbers)))
        self.assertEqual(forth.stack, numbers)

    def test_blank_line(self) -> None:
        self.forth.evaluate('1')
        self.forth.evaluate('   \n')
        self.assertStack('1')

    def test_stack_persists_between_lines(self) -> None:
        self.forth.evaluate('1 2')
        self.forth.evaluate('+ 4')
        self.assertStack('3 4')

    def test_arithmetic_operand_order(self) -> None:
        examples = {
            '9 2 +': '11',
            '9 2 -': '7',
            '9 2 *': '18',
            '9 2 /': '4',
            '-9 2 /': '-4',
            '1 2 + 4 *': '12',
            '8 3 4 - *': '-8',
        }
        for line, expected in examples.items():
            with self.subTest(line=line):
                forth = Forth()
                forth.evaluate(line)
                self.assertEqual(forth.format_stack(), expected)

    def test_stack_words(self) -> None:
        examples = {
            '1 dup': '1 1',
            '1 2 drop': '1',
            '1 2 swap': '2 1',
            '1 2 over': '1 2 1',
        }
        for line, expected in examples.items():
            with self.subTest(line=line):
                forth = Forth()
                forth.evaluate(line)
                self.assertEqual(forth.format_stack(), expected)

    def test_division_by_zero(self) -> None:
        with self.assertRaises(DivisionByZero):
            self.forth.evaluate('4 0 /')
        # both operands were consumed
        self.assertStack('')

    def test_underflow(self) -> None:
        for line in [
            'dup',
            'drop',
            'swap',
            '1 swap',
            'over',
            '1 over',
            '+',
            '1 +',
            '-',
            '1 -',
            '*',
            '1 *',
            '/',
            '1 /',
        ]:
            with self.subTest(line=line):
                with self.assertRaises(StackUnderflow):
                    Forth().evaluate(line)

    def test_case_insensitivity(self) -> None:
        for line in ['1 dup', '1 DUP', '1 Dup']:
            with self.subTest(line=line):
                forth = Forth()
                forth.evaluate(line)
                self.assertEqual(forth.format_stack(), '1 1')

    def test_custom_word_names_are_case_insensitive(self) -> None:
        self.forth.evaluate(': Foo 1 ;')
        self.forth.evaluate('FOO foo fOo')
        self.assertStack('1 1 1')

    def test_user_defined_words(self) -> None:
        self.forth.evaluate(': dup-twice dup dup ;')
        self.forth.evaluate('1 dup-twice')
        self.assertStack('1 1 1')

    def test_redefinition_does_not_change_earlier_uses(self) -> None:
        self.forth.evaluate(': foo 1 ; foo : foo 2 ; foo')
        self.assertStack('1 2')

    def test_redefinition_does_not_change_other_words(self) -> None:
        self.forth.evaluate(': foo 5 ;')
        self.forth.evaluate(': bar foo ;')
        self.forth.evaluate(': foo 6 ;')
        self.forth.evaluate('bar foo')
        self.assertStack('5 6')

    def test_redefining_builtins(self) -> None:
        self.forth.evaluate(': swap dup ;')
        self.forth.evaluate('1 swap')
        self.assertStack('1 1')

    def test_redefining_an_operator(self) -> None:
        self.forth.evaluate(': + 0 ; 1 2 +')
        self.forth.evaluate('+')
        self.assertStack('1 2 0 0')

    def test_redefinitions_are_per_instance(self) -> None:
        self.forth.evaluate(': + * ;')
        other = Forth()
        other.evaluate('3 4 +')
        self.assertEqual(other.format_stack(), '7')
        self.forth.evaluate('3 4 +')
        self.assertStack('12')

    def test_redefining_a_word_using_itself(self) -> None:
        self.forth.evaluate(': foo 10 ;')
        self.forth.evaluate(': foo 1 foo ;')
        self.forth.evaluate('foo')
        self.assertStack('1 1')

    def test_cannot_redefine_numbers(self) -> None:
        with self.assertRaises(InvalidWord):
            self.forth.evaluate(': 1 2 ;')
        self.forth.evaluate('1')
        self.assertStack('1')

    def test_malformed_definitions(self) -> None:
        for line in [':', ': foo', ': foo 1 2']:
            with self.subTest(line=line):
                with self.assertRaises(InvalidWord):
                    Forth().evaluate(line)

    def test_stray_semicolon_is_ignored(self) -> None:
        self.forth.evaluate('1 ; 2')
        self.forth.evaluate(';')
        self.assertStack('1 2')

    def test_unknown_word(self) -> None:
        with self.assertRaises(UnknownWord):
            self.forth.evaluate('1 2 foo')
        # the line is parsed before any of it runs
        self.assertStack('')

    def test_no_rollback(self) -> None:
        with self.assertRaises(StackUnderflow):
            self.forth.evaluate('1 2 drop drop drop 3')
        self.assertStack('')
        with self.assertRaises(UnknownWord):
            self.forth.evaluate(': foo 1 ; bar')
        self.forth.evaluate('foo')
        self.assertStack('1')

    def test_usable_after_errors(self) -> None:
        for line in ['drop', 'nothing', ': 5 ;', '1 0 /']:
            with self.subTest(line=line):
                with self.assertRaises(ForthError):
                    self.forth.evaluate(line)
        self.forth.evaluate('2 3 *')
        self.assertStack('6')

    def test_errors_are_forth_errors(self) -> None:
        for error in [DivisionByZero, InvalidWord, StackUnderflow, UnknownWord]:
            with self.subTest(error=error):
                self.assertTrue(issubclass(error, ForthError))

    def test_stack_property_is_a_copy(self) -> None:
        self.forth.evaluate('1 2')
        self.forth.stack.append(3)
        self.assertStack('1 2')
