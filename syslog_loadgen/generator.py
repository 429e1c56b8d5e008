# syslog_loadgen/generator.py
"""Send loop driving timestamp generation, composition and writes."""

import logging
from dataclasses import dataclass
from typing import Optional

from .config import AppConfig
from .exceptions import ClockError
from .senders import MessageSender
from .templates import EventComposer
from .timestamps import TimestampGenerator

logger = logging.getLogger(__name__)


@dataclass
class GeneratorStats:
    """Throughput counters for one run of the send loop.

    Counting starts at the first second boundary, so ``seconds_elapsed`` is
    the number of whole seconds since that boundary.
    """
    started: bool = False
    seconds_elapsed: int = 0
    events_sent: int = 0
    reports: int = 0

    def record_second(self) -> None:
        """Record an observed second boundary."""
        if self.started:
            self.seconds_elapsed += 1
        else:
            self.started = True

    def record_event(self) -> None:
        """Record a sent event, once measurement has started."""
        if self.started:
            self.events_sent += 1

    def get_rate(self) -> int:
        """Average events per second, integer division."""
        if self.seconds_elapsed > 0:
            return self.events_sent // self.seconds_elapsed
        return 0

    def format_report(self) -> str:
        return f"{self.reports:4d} {self.events_sent:10d} events sent, avg: {self.get_rate()} events/sec"

    def get_summary(self) -> str:
        """Get a formatted summary of statistics."""
        lines = [
            "\n" + "=" * 60,
            "GENERATOR STATISTICS",
            "=" * 60,
            f"Seconds Measured: {self.seconds_elapsed:,}",
            f"Events Sent:      {self.events_sent:,}",
            f"Average Rate:     {self.get_rate():,} events/sec",
            "=" * 60,
        ]
        return "\n".join(lines)


class SyslogGenerator:
    """Send syslog events as fast as the connection accepts them."""

    def __init__(
        self,
        config: AppConfig,
        sender: MessageSender,
        composer: EventComposer,
        clock: Optional[TimestampGenerator] = None,
    ):
        self.config = config
        self.sender = sender
        self.composer = composer
        self.clock = clock if clock is not None else TimestampGenerator()
        self.stats = GeneratorStats()

    def start(self) -> None:
        """Run the send loop.

        There is no normal termination: the loop ends on KeyboardInterrupt
        or by propagating ClockError, WriteError or EventSizeError. The
        sender is closed in every case.
        """
        self.stats = GeneratorStats()
        interval = self.config.generator.stats_interval

        logger.info(f"Starting generator: length={self.config.generator.length or 'random'}, "
                    f"body={self.config.generator.body}, interval={interval}s")

        try:
            while True:
                try:
                    timestamp, second_changed = self.clock.next()
                except ClockError:
                    logger.error("It was not possible to generate a new timestamp")
                    raise

                if second_changed:
                    self.stats.record_second()

                event = self.composer.compose(timestamp)
                self.sender.send(event)
                self.stats.record_event()

                if (second_changed
                        and self.stats.seconds_elapsed >= 1
                        and self.stats.seconds_elapsed % interval == 0):
                    self.stats.reports += 1
                    print(self.stats.format_report(), flush=True)

        except KeyboardInterrupt:
            print("\n\nReceived interrupt signal...")
            print(self.stats.get_summary())
        finally:
            self.stop()

    def stop(self) -> None:
        """Close the sender."""
        if self.sender:
            self.sender.close()
            logger.debug("Sender closed")
