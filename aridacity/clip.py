"""Clipper with an inner push/pull dead zone and an outer limit."""

from collections.abc import Sequence
from dataclasses import dataclass

from .dsp import clamp


def _voltage(voltages, channel):
    """Voltage of ``channel``, or 0 V where the cable carries fewer channels."""
    return voltages[channel] if channel < len(voltages) else 0.0


@dataclass
class ClipInputs:
    """Per-channel voltages at the clipper's jacks; an empty sequence is unplugged."""

    audio: Sequence[float] = ()
    gain: Sequence[float] = ()
    push_size: Sequence[float] = ()
    push_position: Sequence[float] = ()
    limit_size: Sequence[float] = ()
    limit_position: Sequence[float] = ()


@dataclass
class Clipper:
    """Polyphonic clipper.

    Signals inside the push zone are pushed to its edge, or pulled to zero
    when ``pull`` is set; with ``limit_enabled`` the result is clamped to the
    outer limit.
    """

    pull: bool = False
    limit_enabled: bool = True
    gain: float = 1.0
    push: float = 0.0
    limit: float = 1.0

    def process(self, inputs):
        """Return the output voltage of every audio channel."""
        return [
            self._clip(inputs, channel, voltage)
            for channel, voltage in enumerate(inputs.audio)
        ]

    def _clip(self, inputs, channel, voltage):
        push_size = self.push + _voltage(inputs.push_size, channel) / 10.0
        push_center = _voltage(inputs.push_position, channel) / 5.0
        push_high = push_center + push_size
        push_low = push_center - push_size

        limit = self.limit + _voltage(inputs.limit_size, channel) / 10.0
        limit_center = _voltage(inputs.limit_position, channel) / 5.0

        level = voltage / 5.0
        level *= self.gain + _voltage(inputs.gain, channel) / 10.0

        if push_low < level < push_high:
            if self.pull:
                level = 0.0
            else:
                level = push_high if level > 0.0 else push_low

        if self.limit_enabled:
            level = clamp(level, limit_center - limit, limit_center + limit)
        return level * 5.0