# syslog_loadgen/__init__.py
"""
Syslog Load Generator - flood a syslog receiver with timestamped events.

This package opens one connection to a syslog receiver and sends RFC 3339
timestamped events as fast as the socket accepts them, reporting the
achieved throughput once per interval.
"""

__version__ = '1.0.0'

from .config import load_config, validate_config, AppConfig
from .exceptions import (
    LoadgenError,
    ConfigurationError,
    ResolutionError,
    ConnectError,
    ClockError,
    WriteError,
    EventSizeError,
)
from .generator import SyslogGenerator, GeneratorStats
from .senders import (
    MessageSender,
    SocketSender,
    ConsoleSender,
    connect,
    create_sender
)
from .templates import (
    EVENT_TEMPLATES,
    EventComposer,
    TemplateBodyGenerator,
    FillerBodyGenerator,
    create_body_generator
)
from .timestamps import TimestampGenerator

__all__ = [
    'load_config',
    'validate_config',
    'AppConfig',
    'LoadgenError',
    'ConfigurationError',
    'ResolutionError',
    'ConnectError',
    'ClockError',
    'WriteError',
    'EventSizeError',
    'SyslogGenerator',
    'GeneratorStats',
    'MessageSender',
    'SocketSender',
    'ConsoleSender',
    'connect',
    'create_sender',
    'EVENT_TEMPLATES',
    'EventComposer',
    'TemplateBodyGenerator',
    'FillerBodyGenerator',
    'create_body_generator',
    'TimestampGenerator',
]
