# syslog_loadgen/main.py
"""Main entry point for the syslog load generator."""

import argparse
import logging
import random
import sys
import time
from typing import List, Optional
from colorama import Fore, Style

from syslog_loadgen.config import load_config, validate_config
from syslog_loadgen.exceptions import (
    ClockError,
    ConfigurationError,
    ConnectError,
    EventSizeError,
    ResolutionError,
    WriteError,
)
from syslog_loadgen.generator import SyslogGenerator
from syslog_loadgen.senders import create_sender
from syslog_loadgen.templates import (
    MAX_EVENT_LENGTH,
    MIN_EVENT_LENGTH,
    EventComposer,
    create_body_generator,
)
from syslog_loadgen.timestamps import TimestampGenerator

EXIT_FAILURE = 1
EXIT_USAGE = 2


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog='syslog-loadgen',
        description='Send syslog events to a receiver as fast as it accepts them',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Flood the local syslog port with one-template events
  syslog-loadgen

  # Fixed 120 character events to a remote receiver
  syslog-loadgen 192.168.1.100 514 --length 120

  # Filler bodies of random length, over UDP
  syslog-loadgen logs.example.com syslog --body filler --protocol udp

  # Print events instead of sending them
  syslog-loadgen --mode console --length 80
        """
    )

    # Target options
    target_group = parser.add_argument_group('Target Options')
    target_group.add_argument(
        'host',
        nargs='?',
        default=None,
        help='Receiver host name or address (default: from config or 127.0.0.1)'
    )
    target_group.add_argument(
        'port',
        nargs='?',
        default=None,
        help='Receiver port or service name (default: from config or 514)'
    )
    target_group.add_argument(
        '--protocol', '-p',
        choices=['tcp', 'udp'],
        default=None,
        help='Transport protocol (default: from config or tcp)'
    )
    target_group.add_argument(
        '--mode', '-m',
        choices=['socket', 'console'],
        default=None,
        help='Send to the receiver or print to the console (default: socket)'
    )

    # Generation options
    gen_group = parser.add_argument_group('Generation Options')
    gen_group.add_argument(
        '--length', '-l',
        type=int,
        default=None,
        help=f'Length (in chars) of the events to send [{MIN_EVENT_LENGTH}-{MAX_EVENT_LENGTH}]'
    )
    gen_group.add_argument(
        '--body', '-b',
        choices=['template', 'filler'],
        default=None,
        help='Event body strategy (default: from config or template)'
    )
    gen_group.add_argument(
        '--interval', '-i',
        type=int,
        default=None,
        help='Seconds between throughput reports (default: 1)'
    )
    gen_group.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Seed for the random generator (default: current time)'
    )

    # Configuration
    config_group = parser.add_argument_group('Configuration')
    config_group.add_argument(
        '--config',
        default='config.yaml',
        help='Path to configuration file (default: config.yaml)'
    )
    config_group.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )

    return parser


def report_fatal(message: str) -> None:
    print(f"{Fore.RED}{message}{Style.RESET_ALL}", file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    # Load configuration and override it with command line arguments
    try:
        config = load_config(args.config)

        if args.host:
            config.target.host = args.host
        if args.port:
            config.target.port = args.port
        if args.protocol:
            config.target.protocol = args.protocol
        if args.mode:
            config.output.mode = args.mode
        if args.length is not None:
            config.generator.length = args.length
        if args.body:
            config.generator.body = args.body
        if args.interval is not None:
            config.generator.stats_interval = args.interval
        if args.seed is not None:
            config.generator.seed = args.seed

        validate_config(config)
    except ConfigurationError as e:
        report_fatal(f"Invalid configuration: {e}")
        parser.print_usage(sys.stderr)
        return EXIT_USAGE

    # Seeded once for the whole process
    seed = config.generator.seed if config.generator.seed is not None else time.time_ns()
    rng = random.Random(seed)
    logging.debug(f"Random generator seeded with {seed}")

    composer = EventComposer(
        create_body_generator(config.generator.body, rng),
        config.generator.length
    )

    try:
        sender = create_sender(config)
    except (ResolutionError, ConnectError) as e:
        logging.error(f"Connection error: {e}")
        report_fatal(str(e))
        return EXIT_FAILURE

    generator = SyslogGenerator(config, sender, composer, TimestampGenerator())
    try:
        generator.start()
    except (ClockError, WriteError, EventSizeError) as e:
        logging.error(f"Generator error: {e}")
        report_fatal(str(e))
        return EXIT_FAILURE

    return 0


if __name__ == '__main__':
    sys.exit(main())
