"""Exceptions raised by cue2json."""


class Cue2JsonError(Exception):
    """Base class for all cue2json errors."""


class PreconditionError(Cue2JsonError):
    """A check that must pass before any work starts has failed."""


class EngineError(Cue2JsonError):
    """The parsing engine failed to complete an operation."""


class EngineInitError(EngineError):
    """The parsing engine could not be started."""
