"""Bit crusher: sample-rate reduction, amplitude quantisation and bitwise mangling."""

from collections.abc import Sequence
from dataclasses import dataclass, field

from .dsp import SchmittTrigger, clamp

MAX_RESOLUTION = 12.8
MIN_SAMPLE_STEP = 100.0


def _voltage(voltages, channel):
    """Voltage of ``channel``, or 0 V where the cable carries fewer channels."""
    return voltages[channel] if channel < len(voltages) else 0.0


def _to_int32(value):
    """Wrap an integer to a signed 32-bit value."""
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _shift_count(value):
    return int(value) & 31


@dataclass
class BCrushInputs:
    """Voltages at the crusher's jacks; ``None`` marks an unplugged optional jack."""

    audio: Sequence[float] = ()
    sample_rate: float = 0.0
    clock_hold: float | None = None
    resolution: Sequence[float] = ()
    gain: Sequence[float] | None = None
    shift_left: Sequence[float] | None = None
    shift_right: Sequence[float] | None = None
    and_mask: Sequence[float] | None = None
    or_mask: Sequence[float] | None = None
    xor_mask: Sequence[float] | None = None
    invert: Sequence[float] | None = None


@dataclass
class BitCrusher:
    """Polyphonic bit crusher that holds its output between updates."""

    sample_rate_param: float = 1.0
    resolution_param: float = 10.0
    output: list[float] = field(default_factory=list, init=False)
    _hold: SchmittTrigger = field(default_factory=SchmittTrigger, init=False, repr=False)
    _elapsed: float = field(default=0.0, init=False, repr=False)

    def process(self, inputs, sample_rate):
        """Advance one sample and return the output voltage of every channel."""
        if self._due(inputs, sample_rate):
            self.output = [
                self._crush(inputs, channel, voltage)
                for channel, voltage in enumerate(inputs.audio)
            ]
        return list(self.output)

    def _due(self, inputs, sample_rate):
        if inputs.clock_hold is not None:
            return self._hold.process(inputs.clock_hold)
        step = (self.sample_rate_param + inputs.sample_rate / 10.0) * sample_rate
        self._elapsed += clamp(step, MIN_SAMPLE_STEP, sample_rate)
        if self._elapsed >= sample_rate:
            self._elapsed -= sample_rate
            return True
        return False

    def _crush(self, inputs, channel, voltage):
        res = max(
            (self.resolution_param + _voltage(inputs.resolution, channel)) * MAX_RESOLUTION,
            1.0,
        )
        level = voltage / 5.0
        if inputs.gain is not None:
            level *= _voltage(inputs.gain, channel) / 5.0

        quant = _to_int32(int(level * res))
        if inputs.shift_left is not None:
            amount = abs(_voltage(inputs.shift_left, channel) / 100.0) * res
            quant = _to_int32(quant << _shift_count(amount))
        if inputs.shift_right is not None:
            amount = (_voltage(inputs.shift_right, channel) / 100.0) * res
            quant >>= _shift_count(amount)
        if inputs.and_mask is not None:
            quant &= _to_int32(int(_voltage(inputs.and_mask, channel) / 10.0 * res))
        if inputs.or_mask is not None:
            quant |= _to_int32(int(_voltage(inputs.or_mask, channel) / 10.0 * res))
        if inputs.xor_mask is not None:
            quant ^= _to_int32(int(_voltage(inputs.xor_mask, channel) / 10.0 * res))
        if inputs.invert is not None and abs(_voltage(inputs.invert, channel)) > 1.0:
            quant = ~quant

        return quant / res * 5.0