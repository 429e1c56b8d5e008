# syslog_loadgen/config.py
"""Configuration loader and validator."""

import yaml
import os
from dataclasses import dataclass, field
from typing import Optional

from .exceptions import ConfigurationError
from .templates import BODY_GENERATORS, MAX_EVENT_LENGTH, MIN_EVENT_LENGTH

PROTOCOLS = ('tcp', 'udp')
OUTPUT_MODES = ('socket', 'console')


@dataclass
class TargetConfig:
    host: str = "127.0.0.1"
    port: str = "514"
    protocol: str = "tcp"


@dataclass
class GeneratorConfig:
    length: Optional[int] = None
    body: str = "template"
    stats_interval: int = 1
    seed: Optional[int] = None


@dataclass
class OutputConfig:
    mode: str = "socket"


@dataclass
class AppConfig:
    target: TargetConfig = field(default_factory=TargetConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


def load_config(config_path: str = "config.yaml") -> AppConfig:
    """Load configuration from YAML file."""

    # Default configuration
    default_config = {
        'target': {'host': '127.0.0.1', 'port': '514', 'protocol': 'tcp'},
        'generator': {
            'length': None,
            'body': 'template',
            'stats_interval': 1,
            'seed': None
        },
        'output': {'mode': 'socket'}
    }

    if os.path.exists(config_path):
        try:
            with open(config_path, 'r') as f:
                file_config = yaml.safe_load(f) or {}
        except OSError as e:
            raise ConfigurationError(f"Cannot read {config_path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Cannot parse {config_path}: {e}") from e

        if not isinstance(file_config, dict):
            raise ConfigurationError(f"{config_path} must contain a mapping")

        unknown_sections = set(file_config) - set(default_config)
        if unknown_sections:
            raise ConfigurationError(
                f"Unknown section(s) in {config_path}: {', '.join(sorted(map(str, unknown_sections)))}"
            )

        # Merge configurations
        for key in default_config:
            if key in file_config:
                section = file_config[key] or {}
                if not isinstance(section, dict):
                    raise ConfigurationError(f"Section '{key}' must be a mapping")
                unknown = set(section) - set(default_config[key])
                if unknown:
                    raise ConfigurationError(
                        f"Unknown option(s) in '{key}': {', '.join(sorted(unknown))}"
                    )
                default_config[key].update(section)

    # Service names and port numbers are both accepted
    default_config['target']['port'] = str(default_config['target']['port'])

    return AppConfig(
        target=TargetConfig(**default_config['target']),
        generator=GeneratorConfig(**default_config['generator']),
        output=OutputConfig(**default_config['output'])
    )


def validate_config(config: AppConfig) -> AppConfig:
    """Check a configuration before it reaches the generator.

    Raises ConfigurationError describing the first invalid value found.
    """
    length = config.generator.length
    if length is not None:
        if isinstance(length, bool) or not isinstance(length, int):
            raise ConfigurationError(f"Invalid event length: {length!r}")
        if not MIN_EVENT_LENGTH <= length <= MAX_EVENT_LENGTH:
            raise ConfigurationError(
                f"Invalid event length {length}, "
                f"must be between {MIN_EVENT_LENGTH} and {MAX_EVENT_LENGTH}"
            )

    if config.generator.body not in BODY_GENERATORS:
        raise ConfigurationError(f"Unknown body strategy: {config.generator.body}")

    interval = config.generator.stats_interval
    if isinstance(interval, bool) or not isinstance(interval, int) or interval < 1:
        raise ConfigurationError(f"Invalid statistics interval: {interval!r}")

    if config.target.protocol not in PROTOCOLS:
        raise ConfigurationError(f"Unknown protocol: {config.target.protocol}")

    if config.output.mode not in OUTPUT_MODES:
        raise ConfigurationError(f"Unknown output mode: {config.output.mode}")

    if config.output.mode == 'socket' and not (config.target.host and config.target.port):
        raise ConfigurationError("A target host and port are required")

    return config
