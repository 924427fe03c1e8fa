# coding= utf-8
"""
Operand evaluation. An MCL operand is either a decimal literal or a `$name`
variable reference; there is no further expression grammar.
"""
from mcl.lexer import Scanner, SIGIL


class Evaluator(object):
    """
    Resolves operands against a :class:`mcl.store.VariableStore`.

    Evaluation never fails: an unknown variable is reported through `report`
    (any callable taking a message) and counts as 0, and anything that is
    neither a sigil nor a digit silently counts as 0 without consuming it.
    """
    def __init__(self, variables, report=None):
        self.variables = variables
        self.report = report

    def evaluate(self, text):
        """ Returns (value, remaining text). """
        scanner = Scanner(text)
        value = self.evaluate_from(scanner)
        return value, scanner.rest

    def evaluate_from(self, scanner):
        scanner.parse_whitespace()

        if scanner.parse_char(SIGIL):
            name = scanner.parse_name() or ''
            variable = self.variables.find(name)
            if variable is not None:
                return variable.value
            self._report('Error: Variable $%s not found' % name)
            return 0

        number = scanner.parse_number()
        if number is not None:
            return number

        return 0

    def _report(self, message):
        if self.report is not None:
            self.report(message)
