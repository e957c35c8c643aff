"""Sample-by-sample audio and clock processors: bit crusher, clipper, clock divider and remainder folder."""

__version__ = "0.1.0"
__all__ = ["dsp", "bcrush", "clip", "clockdiv", "remainder", "registry"]