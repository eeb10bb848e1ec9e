"""Exception types for addrbook."""


class AddrbookError(Exception):
    """Base class for addrbook errors."""


class TerminalError(AddrbookError):
    """Raw mode could not be acquired or a terminal control call failed."""


class ParseError(AddrbookError):
    """A command line was empty, malformed or named an unknown command."""


class SignalSetupError(AddrbookError):
    """The interrupt handler could not be registered."""
