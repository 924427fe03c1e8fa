# coding= utf-8
"""
Implements MCL, a tiny line-oriented command language: a handful of fixed
commands for two-operand arithmetic, named integer variables, and loading,
listing, saving and running a program held in memory as numbered lines.

Usage should be as simple as:
    >>> import mcl
    >>> m = mcl.Machine()
    >>> m.eval('INI $A 10')
    'Variable $A initialized to 10'
    >>> m.eval('SUM $A,5')
    '15'

:meth:`Machine.execute` returns a :class:`Result` instead, whose status
tells a REPL whether the command went fine, reported a problem, or asked to
exit. Terminal handling lives in :file:`mcl_repl.py`; the machine itself
never reads input or prints anything.
"""
from mcl.config import Config, ConfigError, DEFAULTS, load_config
from mcl.errors import (MCLError, UserInputError, NotFoundError,
                        ResourceError, CapacityError)
from mcl.evaluator import Evaluator
from mcl.lexer import Scanner, Token, next_token, tokenize, normalize_case
from mcl.machine import Machine, Result, OK, DIAGNOSTIC, EXIT
from mcl.store import Program, ProgramLine, Variable, VariableStore
