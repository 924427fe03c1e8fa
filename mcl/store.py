# coding= utf-8
"""
The interpreter's two stores: named integer variables, and the currently
loaded program. Both are bounded; the bounds come from :class:`mcl.Config`.
"""
import io
import logging
from collections import namedtuple

from mcl.errors import CapacityError, ResourceError

logger = logging.getLogger(__name__)

ProgramLine = namedtuple('ProgramLine', 'line_number content')


class Variable(object):
    def __init__(self, name, value=0):
        self.name = name
        self.value = value

    def __repr__(self):
        return 'Variable(%r, %r)' % (self.name, self.value)


class VariableStore(object):
    """
    Insertion-ordered variables, at most one per name, never deleted.

    Names are case-sensitive. Creating a variable once the store holds
    `capacity` of them raises :exc:`CapacityError` and leaves the store as
    it was.
    """
    def __init__(self, capacity=256):
        self.capacity = capacity
        self._variables = []

    def __len__(self):
        return len(self._variables)

    def __iter__(self):
        return iter(self._variables)

    def find(self, name):
        for variable in self._variables:
            if variable.name == name:
                return variable
        return None

    def create(self, name):
        if len(self._variables) >= self.capacity:
            logger.debug('refusing variable %r: store full at %d', name, self.capacity)
            raise CapacityError('Maximum variables exceeded')
        variable = Variable(name)
        self._variables.append(variable)
        return variable

    def set(self, name, value):
        variable = self.find(name)
        if variable is None:
            variable = self.create(name)
        variable.value = value
        return variable


class Program(object):
    """ A loaded program: where it came from, and its numbered lines in load order. """
    def __init__(self, source, lines=()):
        self.source = source
        self.lines = list(lines)

    def __len__(self):
        return len(self.lines)

    def __iter__(self):
        return iter(self.lines)

    def find_line(self, line_number):
        for line in self.lines:
            if line.line_number == line_number:
                return line
        return None


def read_program(path, max_lines=100, line_base=10, line_step=10):
    """
    Read a program file into a :class:`Program`.

    Lines are numbered line_base, line_base + line_step, ... and anything
    past `max_lines` is dropped. Raises :exc:`ResourceError` if the file
    can't be read, in which case nothing has been changed anywhere.
    """
    lines = []
    try:
        with io.open(path, 'r', encoding='utf-8') as source:
            for index, content in enumerate(source):
                if index >= max_lines:
                    logger.debug('%s: truncated at %d lines', path, max_lines)
                    break
                lines.append(ProgramLine(line_base + line_step * index,
                                         content.rstrip('\r\n')))
    except (OSError, ValueError) as e:
        logger.debug('cannot read %s: %s', path, e)
        raise ResourceError("Cannot load file '%s'" % path)

    logger.debug('read %d lines from %s', len(lines), path)
    return Program(path, lines)


def format_state(variables, program=None):
    """
    Render the save-file text: one re-issuable INI line per variable, then
    the program (if any) as comments only. Loading the file back with LD
    does not restore the program.
    """
    out = ['# MCL State File', '# Variables']
    for variable in variables:
        out.append('INI $%s %d' % (variable.name, variable.value))
    if program is not None:
        out.append('# Program: %s' % program.source)
        for line in program:
            out.append('# %d %s' % line)
    return '\n'.join(out) + '\n'


def write_state(path, variables, program=None):
    try:
        with io.open(path, 'w', encoding='utf-8') as target:
            target.write(format_state(variables, program))
    except (OSError, ValueError) as e:
        logger.debug('cannot write %s: %s', path, e)
        raise ResourceError("Cannot save to file '%s'" % path)
    logger.debug('saved state to %s', path)
