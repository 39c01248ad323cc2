"""Exceptions raised by teatimer."""


class TeaTimerError(Exception):
    """Base class for fatal teatimer errors."""


class HandlerInstallError(TeaTimerError):
    """The SIGINT handler could not be registered."""
