"""
Errors raised by the diamonds pipeline.
"""


class DiamondsError(Exception):
    """Base class for generation and rendering failures."""


class InvalidInputError(DiamondsError, ValueError):
    """Options give no source of colors (neither explicit colors nor a random count)."""


class UnsupportedLayerError(DiamondsError, TypeError):
    """Serializer was handed something that is not a known layer kind."""
    def __init__(self, layer: object):
        super().__init__(f"Unsupported layer: {layer!r}")
        self.layer = layer
