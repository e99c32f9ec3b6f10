"""Exceptions raised by display sinks."""


class SinkUnavailable(Exception):
    """The display behind a sink is gone and cannot take more text."""
