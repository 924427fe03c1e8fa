# coding= utf-8
import re
from collections import namedtuple

SIGIL = '$'

# Token kinds
SIGIL_TOKEN = 'SIGIL'
IDENTIFIER = 'IDENTIFIER'
NUMBER = 'NUMBER'
COMMA = 'COMMA'
END = 'END'
UNKNOWN = 'UNKNOWN'

Token = namedtuple('Token', 'kind value')

_WHITESPACE = r'\s*'
_DIGITS = r'[0-9]+'
_NAME = r'[A-Za-z0-9_]+'
_IDENTIFIER = r'[A-Za-z][A-Za-z0-9_$]*'


class Scanner(object):
    """
    A cursor over one line of MCL text.

    Each parse_* method consumes (advancing self.pos) whatever it matched and
    returns it, or returns None without moving if nothing matched. Unlike a
    token stream, the scanner never looks further ahead than it is asked to:
    the command handlers each have their own small argument grammar and
    pick it apart one piece at a time.

    Running off the end of the text is not an error; every parse_* method
    simply finds nothing there.
    """
    def __init__(self, text):
        self.text = text
        self.pos = 0

    @property
    def is_finished(self):
        return self.pos >= len(self.text)

    @property
    def rest(self):
        return self.text[self.pos:]

    def peek(self):
        if self.is_finished:
            return None
        return self.text[self.pos]

    def _consume(self, pattern):
        """
        Consume some characters based on a regex, which is only ever matched
        at the current position.
        """
        found = re.match(pattern, self.text[self.pos:])
        if found is None or not found.group():
            return None
        self.pos += found.end()
        return found.group()

    def parse_whitespace(self):
        return self._consume(_WHITESPACE)

    def parse_char(self, char):
        if self.peek() == char:
            self.pos += 1
            return char
        return None

    def parse_sigils(self):
        """ Consume a run of sigils, returning how many there were. """
        run = self._consume(re.escape(SIGIL) + '+')
        return len(run) if run else 0

    def parse_number(self):
        digits = self._consume(_DIGITS)
        if digits is None:
            return None
        return int(digits)

    def parse_name(self):
        return self._consume(_NAME)

    def parse_keyword(self, keyword):
        """ Consume `keyword` if it comes next, ignoring case. """
        if self.text[self.pos:self.pos + len(keyword)].upper() == keyword:
            self.pos += len(keyword)
            return keyword
        return None

    def parse_rest_of_line(self):
        rest = self.rest
        self.pos = len(self.text)
        return rest

    def next_token(self):
        self.parse_whitespace()
        char = self.peek()

        if char is None:
            return Token(END, None)
        if char == SIGIL:
            self.pos += 1
            return Token(SIGIL_TOKEN, SIGIL)
        if char == ',':
            self.pos += 1
            return Token(COMMA, ',')

        number = self.parse_number()
        if number is not None:
            return Token(NUMBER, number)

        identifier = self._consume(_IDENTIFIER)
        if identifier is not None:
            return Token(IDENTIFIER, identifier)

        self.pos += 1
        return Token(UNKNOWN, char)

    def generate(self):
        while True:
            token = self.next_token()
            yield token
            if token.kind == END:
                return


def next_token(text):
    """ Lex one token off the front of `text`, returning (token, remaining text). """
    scanner = Scanner(text)
    token = scanner.next_token()
    return token, scanner.rest


def tokenize(text):
    return list(Scanner(text).generate())


def normalize_case(line):
    """
    Upper-case a line the way the interactive prompt does before dispatch.

    Letters inside a sigil-led run (from a '$' up to the next whitespace or
    comma) keep their case, so variable names and file names survive.
    """
    out = []
    in_sigil_run = False
    for char in line.rstrip('\r\n'):
        if char == SIGIL:
            in_sigil_run = True
        elif char.isspace() or char == ',':
            in_sigil_run = False
        out.append(char if in_sigil_run else char.upper())
    return ''.join(out)
