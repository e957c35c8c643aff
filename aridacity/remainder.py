"""Wavefolder that folds audio by taking its remainder against a divisor."""

import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from .dsp import clamp, crossfade

MIN_DIVISOR = 0.01


def _round_half_away(value):
    """Round to the nearest integer, halves away from zero."""
    return math.copysign(math.floor(abs(value) + 0.5), value)


@dataclass
class RemainderInputs:
    """Voltages at the folder's jacks; ``audio`` holds every polyphonic channel."""

    audio: Sequence[float] = ()
    gain: float = 0.0
    feedback: float = 0.0
    shape: float = 0.0
    mix: float = 0.0
    fold: float = 0.0


@dataclass
class Remainder:
    """Monophonic remainder folder with feedback, shape and dry/wet mix."""

    gain: float = 1.0
    feedback: float = 0.0
    shape: float = 0.0
    mix: float = 1.0
    fold: float = 5.0
    gain_cv: float = 0.0
    feedback_cv: float = 0.0
    shape_cv: float = 0.0
    mix_cv: float = 0.0
    _last_wet: float = field(default=0.0, init=False, repr=False)

    def process(self, inputs):
        """Advance one sample and return the output voltage."""
        dry = sum(inputs.audio)
        gain = self.gain + self.gain_cv * inputs.gain
        divisor = self.fold + inputs.fold

        level = dry * gain
        feedback = self.feedback + self.feedback_cv * inputs.feedback / 10.0
        level += self._last_wet * feedback

        wet = 0.0
        if abs(divisor) > MIN_DIVISOR:
            shape = clamp(self.shape + self.shape_cv * inputs.shape / 10.0, 0.0, 1.0)
            remainder = math.trunc(level / divisor) * divisor
            divisor *= 2.0
            signed = _round_half_away(level / divisor) * divisor
            wet = level - crossfade(remainder, signed, shape)
        self._last_wet = wet

        mix = clamp(self.mix + self.mix_cv * inputs.mix / 10.0, 0.0, 1.0)
        return crossfade(dry, wet, mix)