# coding= utf-8
"""
LIST's argument grammar.

LIST takes a terse, position-sensitive argument pattern rather than words:
`$$,0` lists program lines while `$$` lists program files, and `1,$` lists
directories while `$,1` lists mounts. Parsing and choosing a report are
kept apart so the choice can be read (and tested) as a plain table.

    pattern     report
    -------     ------
    $INF        system information
    $$,T        variables
    $$,0        program lines
    $$          program files in the current directory
    1,$ or $1   directories in the current directory
    $,1         mounted filesystems
    $,2         libraries
    (other)     usage
"""
from collections import namedtuple

from mcl.lexer import Scanner, SIGIL

ListArgs = namedtuple('ListArgs', 'sigils suffix first second trailing_sigil')

INFO = 'info'
VARIABLES = 'variables'
PROGRAM_LINES = 'program_lines'
PROGRAM_FILES = 'program_files'
DIRECTORIES = 'directories'
MOUNTS = 'mounts'
LIBRARIES = 'libraries'
USAGE = 'usage'

# First matching row wins.
RULES = (
    (INFO,          lambda a: a.suffix == 'INF'),
    (VARIABLES,     lambda a: a.suffix == 'T'),
    (PROGRAM_LINES, lambda a: a.sigils == 2 and a.second == 0),
    (PROGRAM_FILES, lambda a: a.sigils == 2 and a.second is None),
    (DIRECTORIES,   lambda a: a.first == 1 and (a.sigils == 1 or a.trailing_sigil)),
    (MOUNTS,        lambda a: a.sigils == 1 and a.second == 1),
    (LIBRARIES,     lambda a: a.sigils == 1 and a.second == 2),
    (USAGE,         lambda a: True),
)

USAGE_TEXT = [
    'LIST command format:',
    'LIST 1,$     - List directories',
    'LIST $,1     - List disks/mounts',
    'LIST $$,0    - List program lines',
    'LIST $,2     - List libraries',
    'LIST $INF    - Show system info',
    'LIST $$,T    - List variables',
    'LIST $$      - List programs',
]

LIBRARIES_TEXT = [
    'Available libraries:',
    'STDIO.LIB - Standard I/O functions',
    'MATH.LIB - Mathematical functions',
    'STRING.LIB - String manipulation',
    'FILE.LIB - File operations',
]


def parse_list_args(text, evaluator):
    """
    Pick LIST's arguments apart into a :class:`ListArgs`.

    `sigils` counts the sigils leading the arguments; `trailing_sigil` is set
    when a bare sigil stands in for the second parameter instead. Parameters
    that aren't given are None.
    """
    scanner = Scanner(text)
    scanner.parse_whitespace()

    suffix = None
    first = None
    sigils = scanner.parse_sigils()
    if sigils:
        if scanner.parse_keyword('INF'):
            suffix = 'INF'
        elif scanner.peek() == ',':
            pass
        elif scanner.peek() is not None and scanner.peek().isdigit():
            first = evaluator.evaluate_from(scanner)
        elif scanner.parse_keyword('T'):
            suffix = 'T'
    elif scanner.peek() is not None and scanner.peek().isdigit():
        first = evaluator.evaluate_from(scanner)

    scanner.parse_whitespace()
    scanner.parse_char(',')
    scanner.parse_whitespace()

    second = None
    trailing_sigil = False
    if scanner.is_finished:
        pass
    elif scanner.peek() == SIGIL and not scanner.rest.strip(SIGIL).strip():
        trailing_sigil = True
    elif sigils and suffix is None and first is None and scanner.parse_keyword('T'):
        suffix = 'T'
    else:
        second = evaluator.evaluate_from(scanner)

    return ListArgs(sigils, suffix, first, second, trailing_sigil)


def resolve(args):
    for report, matches in RULES:
        if matches(args):
            return report
