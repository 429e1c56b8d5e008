# syslog_loadgen/templates.py
"""Syslog event templates, body generators and the event composer."""

import random
import string
from abc import ABC, abstractmethod
from typing import Dict, Optional, Tuple, Type

from .exceptions import ConfigurationError, EventSizeError
from .timestamps import TIMESTAMP_LENGTH

# Fixed syslog header: user-level facility, notice severity
PRIORITY = 13
HOSTNAME = 'localhost.localdomain'
APP_TAG = 'my.app'

HEADER_LENGTH = len(f"<{PRIORITY}>") + TIMESTAMP_LENGTH + len(f" {HOSTNAME} {APP_TAG}: ")

MAX_EVENT_LENGTH = 1024
# Header, at least one body character and the newline
MIN_EVENT_LENGTH = HEADER_LENGTH + 2

# Total event length drawn by the filler strategy when none is configured
FILLER_LENGTH_BAND = (100, 225)

EVENT_TEMPLATES: Tuple[str, ...] = (
    "Teardown UDP connection for faddr 80.58.4.34/37074 gaddr "
    "10.0.0.187/53 laddr 192.168.0.2/53",
    "192.168.0.2 Accessed URL 212.227.109.224:/scriptlib/ClientStdScripts.js",
    "Built outbound TCP connection 152083 for faddr 212.227.109.224/80 "
    "gaddr 10.0.0.187/56684 laddr 192.168.0.2/56684",
    "Teardown TCP connection 151957 faddr 212.227.109.224/80 gaddr "
    "10.0.0.187/56613 laddr 192.168.0.2/56613 duration 0:04:56 "
    "bytes 11069 (TCP Reset-I)",
    "Deny TCP (no connection) from 192.168.0.2/2799 to "
    "192.168.202.1/2244 flags SYN ACK on interface inside",
    "Built UDP connection for faddr 211.9.32.235/32770 gaddr "
    "10.0.0.187/53 laddr 192.168.0.2/53",
    "Authen Session End: user '', sid 1, elapsed 313 seconds",
    "Deny icmp src outside:Some-Cisco dst inside:10.0.0.187 "
    "(type 3, code 1) by access-group \"outside_access_in\"",
)


def body_length_for(event_length: int) -> int:
    """Number of body characters (newline excluded) for a total event length."""
    if not MIN_EVENT_LENGTH <= event_length <= MAX_EVENT_LENGTH:
        raise EventSizeError(
            f"Event length {event_length} outside "
            f"[{MIN_EVENT_LENGTH}, {MAX_EVENT_LENGTH}]"
        )
    return event_length - HEADER_LENGTH - 1


class BodyGenerator(ABC):
    """Abstract base class for event body strategies."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    @abstractmethod
    def generate(self, event_length: Optional[int] = None) -> bytes:
        """Return a newline-terminated body for an event of ``event_length``
        total characters, or a self-chosen length when it is None/0."""


class TemplateBodyGenerator(BodyGenerator):
    """Concatenate random firewall/VPN log lines up to the wanted length."""

    def __init__(self, rng: Optional[random.Random] = None):
        super().__init__(rng)
        self._templates = tuple(t.encode('ascii') for t in EVENT_TEMPLATES)

    def generate(self, event_length: Optional[int] = None) -> bytes:
        if not event_length:
            return self.rng.choice(self._templates) + b"\n"

        body_length = body_length_for(event_length)
        body = bytearray()
        while len(body) < body_length:
            body += self.rng.choice(self._templates)

        # The last template is cut to land exactly on the length
        del body[body_length:]
        body += b"\n"
        return bytes(body)


class FillerBodyGenerator(BodyGenerator):
    """Fill the body with a single repeated uppercase letter."""

    def generate(self, event_length: Optional[int] = None) -> bytes:
        if not event_length:
            event_length = self.rng.randint(*FILLER_LENGTH_BAND)

        letter = self.rng.choice(string.ascii_uppercase).encode('ascii')
        return letter * body_length_for(event_length) + b"\n"


BODY_GENERATORS: Dict[str, Type[BodyGenerator]] = {
    'template': TemplateBodyGenerator,
    'filler': FillerBodyGenerator,
}


def create_body_generator(name: str, rng: Optional[random.Random] = None) -> BodyGenerator:
    """Factory function to create a body generator by strategy name."""
    try:
        generator_class = BODY_GENERATORS[name.lower()]
    except KeyError:
        raise ConfigurationError(
            f"Unknown body strategy '{name}', expected one of: "
            f"{', '.join(sorted(BODY_GENERATORS))}"
        ) from None
    return generator_class(rng)


class EventComposer:
    """Assemble complete syslog events from a timestamp and a body."""

    def __init__(self, body_generator: BodyGenerator, event_length: Optional[int] = None):
        self.body_generator = body_generator
        self.event_length = event_length
        self._header_tail = f" {HOSTNAME} {APP_TAG}: ".encode('ascii')

    def compose(self, timestamp: str) -> bytes:
        """Return ``<13>{timestamp} localhost.localdomain my.app: {body}``."""
        event = bytearray(f"<{PRIORITY}>{timestamp}".encode('ascii'))
        event += self._header_tail
        event += self.body_generator.generate(self.event_length)

        if len(event) > MAX_EVENT_LENGTH:
            raise EventSizeError(
                f"Composed event is {len(event)} bytes, maximum is {MAX_EVENT_LENGTH}"
            )
        return bytes(event)
