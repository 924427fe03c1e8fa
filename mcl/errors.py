# coding= utf-8
"""
Everything that can go wrong while running an MCL command.

Handlers raise these; :meth:`mcl.Machine.execute` catches them, appends the
message to whatever output the command already produced and carries on with
the next line. Nothing here ever stops the interpreter.
"""


class MCLError(Exception):
    prefix = 'Error: '

    @property
    def message(self):
        return self.prefix + str(self)


class UserInputError(MCLError): pass


class NotFoundError(MCLError):
    prefix = ''


class ResourceError(MCLError): pass


class CapacityError(ResourceError): pass
