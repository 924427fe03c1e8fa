# coding= utf-8
import inspect
import logging
from collections import namedtuple

from mcl import listing
from mcl import system as default_system
from mcl.config import DEFAULTS
from mcl.errors import MCLError, NotFoundError, UserInputError
from mcl.evaluator import Evaluator
from mcl.lexer import Scanner, IDENTIFIER, SIGIL_TOKEN, UNKNOWN, END, SIGIL
from mcl.store import VariableStore, read_program, write_state

logger = logging.getLogger(__name__)

# Result statuses
OK = 'ok'
DIAGNOSTIC = 'diagnostic'
EXIT = 'exit'

Result = namedtuple('Result', 'status output')

HELP_TEXT = [
    'MCL Commands:',
    'SUM <expr>,<expr>     - Add two values',
    'SYB <expr>,<expr>     - Subtract two values',
    'INI $<var> [value]    - Initialize variable',
    'LIST 1,$              - List directories',
    'LIST $,1              - List disks/mounts',
    'LIST $$,0             - List program lines',
    'LIST $,2              - List libraries',
    'LIST $INF             - Show system info',
    'LIST $$,T             - List variables',
    'LIST $$               - List programs',
    'LD 0,$<filename>      - Load program',
    'SAVE [filename]       - Save state',
    'ED $NUM<line>         - Edit/show line',
    '$RUN                  - Run loaded program',
    'EXIT                  - Exit MCL',
]

FAREWELL = 'Goodbye from MCL!'


def _verb(*names):
    """
    Marks a :class:`Machine` method as the handler for the given command
    verbs, to be picked up by the Machine's __init__. Handlers are called
    with the text following the verb.
    """
    def decorator(func):
        func.verbs = names
        return func
    return decorator


def _program_verb(*names):
    """ As :func:`_verb`, but for the verbs a running program may use. """
    def decorator(func):
        func.program_verbs = names
        return func
    return decorator


class Machine(object):
    """
    An MCL interpreter: a variable store, at most one loaded program, and
    the commands that work on them.

    Feed it one line at a time through :meth:`execute`, which hands back a
    :class:`Result`. Nothing a command does can stop the machine; even EXIT
    only asks, by returning a result with the EXIT status, and leaves it to
    the caller to actually go away.

    A Machine is not thread-safe. Callers sharing one between threads must
    serialize their calls.
    """
    def __init__(self, config=None, system=None):
        self.config = config or DEFAULTS
        self.system = system or default_system
        self.variables = VariableStore(self.config.max_variables)
        self.program = None
        self.evaluator = Evaluator(self.variables, self._diagnose)
        self.verbs = {}
        self.program_verbs = {}

        self._output = []
        self._status = OK

        for name, method in inspect.getmembers(self, inspect.ismethod):
            for verb in getattr(method, 'verbs', ()):
                self.verbs[verb] = method
            for verb in getattr(method, 'program_verbs', ()):
                self.program_verbs[verb] = method

    @property
    def program_loaded(self):
        return self.program is not None

    def _emit(self, line):
        self._output.append(line)

    def _diagnose(self, line):
        self._status = DIAGNOSTIC
        self._emit(line)

    def execute(self, line=''):
        """
        Run a single command line, returning its :class:`Result`.

        The line is expected to be case-normalized already (see
        :func:`mcl.lexer.normalize_case`).
        """
        self._output = []
        self._status = OK

        verb, args = self._split_verb(line)
        if verb is None:
            return Result(OK, '')

        handler = self.verbs.get(verb)
        if handler is None:
            self._diagnose('Unknown command: %s' % line.strip())
            self._emit('Type HELP for available commands')
            return self._result()

        logger.debug('dispatching %s', verb)
        try:
            if handler(args) == EXIT:
                self._status = EXIT
        except MCLError as e:
            self._diagnose(e.message)

        return self._result()

    def eval(self, line=''):
        return self.execute(line).output

    def _result(self):
        return Result(self._status, '\n'.join(self._output))

    def _split_verb(self, line):
        """ Returns (verb, rest of line), or (None, '') for a blank line. """
        scanner = Scanner(line)
        token = scanner.next_token()

        if token.kind == END:
            return None, ''
        if token.kind == SIGIL_TOKEN:
            word = scanner.next_token()
            if word.kind == IDENTIFIER:
                return SIGIL + word.value.upper(), scanner.rest
            return SIGIL, scanner.rest
        if token.kind in (IDENTIFIER, UNKNOWN):
            return str(token.value).upper(), scanner.rest
        return str(token.value), scanner.rest

    def _two_operands(self, args):
        scanner = Scanner(args)
        left = self.evaluator.evaluate_from(scanner)
        scanner.parse_whitespace()
        scanner.parse_char(',')
        right = self.evaluator.evaluate_from(scanner)
        return left, right

    @_verb('SUM')
    def _sum(self, args):
        left, right = self._two_operands(args)
        self._emit(str(left + right))

    @_verb('SYB')
    def _subtract(self, args):
        left, right = self._two_operands(args)
        self._emit(str(left - right))

    @_verb('INI')
    @_program_verb('INI')
    def _init_variable(self, args):
        scanner = Scanner(args)
        scanner.parse_whitespace()
        if not scanner.parse_char(SIGIL):
            raise UserInputError('Variable name must start with $')

        name = scanner.parse_name()
        if not name:
            raise UserInputError('Variable name missing after $')
        if len(name) > self.config.max_name_length:
            raise UserInputError('Variable name longer than %d characters'
                                 % self.config.max_name_length)

        scanner.parse_whitespace()
        value = 0
        if not scanner.is_finished:
            value = self.evaluator.evaluate_from(scanner)

        self.variables.set(name, value)
        self._emit('Variable $%s initialized to %d' % (name, value))

    @_verb('LIST')
    def _list(self, args):
        report = listing.resolve(listing.parse_list_args(args, self.evaluator))
        getattr(self, '_list_' + report)()

    def _list_info(self):
        info = self.system.system_info()
        self._emit('MCL System Information:')
        self._emit('System: %s %s' % (info.system, info.release))
        self._emit('Machine: %s' % info.machine)
        self._emit('Node: %s' % info.node)
        self._emit('Time: %s' % info.time)
        self._emit('Variables: %d/%d' % (len(self.variables), self.variables.capacity))
        self._emit('Program loaded: %s' % ('Yes' if self.program_loaded else 'No'))
        if self.program_loaded:
            self._emit('Program: %s (%d lines)' % (self.program.source, len(self.program)))

    def _list_variables(self):
        self._emit('Variables:')
        for variable in self.variables:
            self._emit('$%s = %d' % (variable.name, variable.value))

    def _list_program_lines(self):
        self._emit('Program lines:')
        for line in self.program or ():
            self._emit('%d %s' % line)

    def _list_program_files(self):
        names = self.system.program_files('.', self.config.program_extensions)
        self._emit('Programs/Scripts:')
        for name in names:
            self._emit(name)

    def _list_directories(self):
        names = self.system.directories('.')
        self._emit('Directories:')
        for name in names:
            self._emit(name + '/')

    def _list_mounts(self):
        mounts = self.system.mounts()
        self._emit('Mounted filesystems:')
        for mount in mounts:
            self._emit('%s on %s (%s)' % mount)

    def _list_libraries(self):
        for line in listing.LIBRARIES_TEXT:
            self._emit(line)

    def _list_usage(self):
        for line in listing.USAGE_TEXT:
            self._emit(line)

    @_verb('LD')
    def _load(self, args):
        scanner = Scanner(args)
        scanner.parse_whitespace()

        if scanner.parse_sigils() == 2:
            scanner.parse_whitespace()
            scanner.parse_char(',')
            scanner.parse_whitespace()
            self._emit('Loading from disk: %s' % scanner.rest)
            raise MCLError('Disk loading not implemented in this version')

        # LD 0,$<file>: the leading number is accepted and ignored.
        self.evaluator.evaluate_from(scanner)
        scanner.parse_whitespace()
        scanner.parse_char(',')
        scanner.parse_whitespace()
        scanner.parse_char(SIGIL)
        filename = scanner.parse_rest_of_line().strip()

        self.program = read_program(filename,
                                    max_lines=self.config.max_program_lines,
                                    line_base=self.config.line_base,
                                    line_step=self.config.line_step)
        logger.debug('loaded %s', filename)
        self._emit('Program loaded: %s (%d lines)' % (filename, len(self.program)))

    @_verb('SAVE')
    def _save(self, args):
        filename = args.strip() or self.config.default_save_file
        write_state(filename, self.variables, self.program)
        self._emit('State saved to: %s' % filename)

    @_verb('ED')
    def _edit(self, args):
        scanner = Scanner(args)
        scanner.parse_whitespace()
        if not (scanner.parse_char(SIGIL) and scanner.parse_keyword('NUM')):
            raise UserInputError('ED requires $NUM<line number>')

        line_number = self.evaluator.evaluate_from(scanner)
        line = self.program.find_line(line_number) if self.program_loaded else None
        if line is None:
            raise NotFoundError('Line %d not found' % line_number)
        self._emit('%d %s' % line)

    @_verb('$RUN')
    def _run(self, args):
        if not self.program_loaded:
            raise UserInputError('No program loaded')

        self._emit('Running program: %s' % self.program.source)
        for line in self.program:
            self._emit('Executing line %d: %s' % line)
            try:
                self._run_line(line)
            except MCLError as e:
                self._diagnose(e.message)
        self._emit('Program execution completed')

    def _run_line(self, line):
        scanner = Scanner(line.content)
        token = scanner.next_token()
        handler = None
        if token.kind == IDENTIFIER:
            handler = self.program_verbs.get(token.value.upper())
        if handler is None:
            self._diagnose('Unknown program command: %s' % line.content)
            return
        handler(scanner.rest)

    @_program_verb('PRINT')
    def _print(self, args):
        self._emit('OUTPUT: %s' % args.lstrip())

    @_verb('HELP', '?')
    def _help(self, args):
        for line in HELP_TEXT:
            self._emit(line)

    @_verb('EXIT', 'QUIT')
    def _exit(self, args):
        self._emit(FAREWELL)
        return EXIT
