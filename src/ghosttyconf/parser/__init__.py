"""Configuration text parsing with line and span fidelity."""

from ghosttyconf.parser.config_parser import ConfigParser, parse_document

__all__ = [
    "ConfigParser",
    "parse_document",
]
