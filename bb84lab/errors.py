from __future__ import annotations


class BB84Error(Exception):
    """Base class for errors raised by the simulator."""


class ConfigError(BB84Error, ValueError):
    """A run configuration field is missing or out of range."""


class EmptyKeyError(BB84Error):
    """The cipher was asked to use a zero-length key."""


class DegenerateSiftError(BB84Error):
    """No photon survived sifting, so there is nothing to sample."""


class ExportError(BB84Error, ValueError):
    """An exported run could not be parsed back."""
