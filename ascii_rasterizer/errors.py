"""Exceptions raised by the rasterizer."""


class ConversionError(Exception):
    """Base class for every failure reported by a conversion."""


class InvalidConfiguration(ConversionError, ValueError):
    """Channel weights, ramp, width or colors are unusable."""


class InvalidInput(ConversionError, ValueError):
    """The source bitmap is empty or could not be decoded."""


class RenderingUnavailable(ConversionError, RuntimeError):
    """The drawing surface for the output bitmap could not be created.

    This points at the environment rather than the request, so callers
    should not retry it.
    """
