# syslog_loadgen/senders.py
"""Connection setup and output handlers for syslog events."""

import socket
import sys
import logging
from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Tuple
from colorama import Fore, Style, init

from .exceptions import ConnectError, ResolutionError, WriteError

# Initialize colorama for Windows compatibility
init(autoreset=True)

logger = logging.getLogger(__name__)

SOCKET_TYPES = {
    'tcp': socket.SOCK_STREAM,
    'udp': socket.SOCK_DGRAM,
}

AddrInfo = Tuple[int, int, int, str, tuple]


def connect(
    host: str,
    service: str,
    protocol: str = 'tcp',
    resolver: Callable[..., List[AddrInfo]] = socket.getaddrinfo,
    socket_factory: Callable[..., socket.socket] = socket.socket,
) -> socket.socket:
    """Resolve ``host``/``service`` and connect to the first usable address.

    Both IPv4 and IPv6 candidates are tried, in resolver order. Candidates
    that cannot be created or connected are skipped. Raises ResolutionError
    when nothing resolves and ConnectError when every candidate fails.
    """
    try:
        candidates = resolver(host, service, socket.AF_UNSPEC, SOCKET_TYPES[protocol])
    except (socket.gaierror, UnicodeError) as e:
        # malformed host names fail in the idna codec before any lookup
        raise ResolutionError(f"Cannot resolve {host}:{service}: {e}") from e

    if not candidates:
        raise ResolutionError(f"Cannot resolve {host}:{service}: no addresses returned")

    for family, socktype, proto, _canonname, sockaddr in candidates:
        try:
            sock = socket_factory(family, socktype, proto)
        except OSError as e:
            logger.warning(f"Error while creating socket for {sockaddr[0]}: {e}")
            continue

        try:
            sock.connect(sockaddr)
        except OSError as e:
            sock.close()
            logger.warning(f"It was not possible to connect to {sockaddr[0]} port {sockaddr[1]}: {e}")
            continue

        logger.info(f"{protocol.upper()} connection established: {sockaddr[0]}:{sockaddr[1]}")
        print(f"\n{Fore.GREEN}A connection with the target ({sockaddr[0]}) "
              f"has been established. Sending events...{Style.RESET_ALL}\n")
        return sock

    raise ConnectError(f"It was not possible to connect to {host}:{service}")


class MessageSender(ABC):
    """Abstract base class for event senders."""

    @abstractmethod
    def send(self, event: bytes) -> None:
        """Send one complete event, raising WriteError on failure."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Clean up resources."""
        pass


class SocketSender(MessageSender):
    """Write events to an already connected TCP or UDP socket."""

    def __init__(self, sock: socket.socket):
        self.socket: Optional[socket.socket] = sock

    def send(self, event: bytes) -> None:
        """Write the whole event; any failure ends the run."""
        try:
            self.socket.sendall(event)
        except OSError as e:
            raise WriteError(f"Sending event failed: {e}") from e

    def close(self) -> None:
        """Close the socket."""
        if self.socket:
            self.socket.close()
            self.socket = None


class ConsoleSender(MessageSender):
    """Print events to a stream instead of sending them (dry run)."""

    def __init__(self, stream=None):
        self.stream = stream if stream is not None else sys.stdout

    def send(self, event: bytes) -> None:
        try:
            self.stream.write(f"{Style.DIM}{event.decode('ascii')}{Style.RESET_ALL}")
        except OSError as e:
            raise WriteError(f"Writing event failed: {e}") from e

    def close(self) -> None:
        """Flush the stream; it is not ours to close."""
        self.stream.flush()


def create_sender(config, resolver=socket.getaddrinfo, socket_factory=socket.socket) -> MessageSender:
    """Factory function to create the sender selected in the config."""
    mode = config.output.mode.lower()

    if mode == 'console':
        return ConsoleSender()

    target = config.target
    sock = connect(target.host, target.port, target.protocol,
                   resolver=resolver, socket_factory=socket_factory)
    return SocketSender(sock)
