"""minforth, a small Forth-like stack language.

    >>> from minforth.interpreter import Forth
    >>> forth = Forth()
    >>> forth.evaluate(': square dup * ; 7 square')
    >>> forth.format_stack()
    '49'
"""

version = '0.1.0'
