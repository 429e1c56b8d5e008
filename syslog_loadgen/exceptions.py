# syslog_loadgen/exceptions.py
"""Error types raised by the load generator.

Every core failure is terminal for a run; nothing here is retried.
"""


class LoadgenError(Exception):
    """Base class for all load generator errors."""


class ConfigurationError(LoadgenError, ValueError):
    """Invalid length, option or config file value."""


class ResolutionError(LoadgenError):
    """The target host/service could not be resolved to any address."""


class ConnectError(LoadgenError, ConnectionError):
    """None of the resolved candidate addresses accepted a connection."""


class ClockError(LoadgenError):
    """The wall clock or the local time conversion is unavailable."""


class WriteError(LoadgenError, OSError):
    """Writing an event to the connection failed."""


class EventSizeError(LoadgenError):
    """A composed event is longer than the maximum message size."""
