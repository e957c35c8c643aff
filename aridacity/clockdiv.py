"""Clock divider and 16-step sequencer driven by a clock input."""

from dataclasses import dataclass, field

from .dsp import SchmittTrigger

NUM_TICKS = 16


@dataclass
class ClockDivider:
    """Sixteen outputs that follow the clock, either divided or sequenced.

    In divider mode output ``d`` (0-based) passes the clock whenever the step
    counter is a multiple of ``d + 1``. In sequencer mode only the output at
    the current step passes it. The counter runs from 1 to 16.
    """

    seq_mode: bool = False
    divide_by_one: bool = False
    index: int = field(default=1, init=False)
    _clock: SchmittTrigger = field(default_factory=SchmittTrigger, init=False, repr=False)
    _reset: SchmittTrigger = field(default_factory=SchmittTrigger, init=False, repr=False)
    _reset_pending: bool = field(default=False, init=False, repr=False)

    def process(self, clock, reset=0.0, seq=None):
        """Advance one sample and return the 16 output voltages.

        ``seq`` is the modulation input, or ``None`` when it is unplugged;
        when plugged its voltage replaces the clock's on the outputs.
        """
        if self._clock.process(clock):
            self.index += 1
            if self._reset_pending or self.index > NUM_TICKS:
                self.index = 1
                self._reset_pending = False

        if self._reset.process(reset):
            self._reset_pending = True

        if not self._clock.is_high():
            return [0.0] * NUM_TICKS

        value = clock if seq is None else seq

        if self.seq_mode:
            return [value if d == self.index - 1 else 0.0 for d in range(NUM_TICKS)]
        if self.divide_by_one and self.index == 1:
            return [value] * NUM_TICKS
        return [value if self.index % (d + 1) == 0 else 0.0 for d in range(NUM_TICKS)]

    def reset(self):
        """Return the step counter to the first step; settings are kept."""
        self.index = 1

    def to_json(self):
        """Return the persistent settings as a JSON-ready mapping."""
        return {"divideByOne": self.divide_by_one}

    def from_json(self, data):
        """Restore settings saved by :meth:`to_json`; missing keys are ignored."""
        if "divideByOne" in data:
            self.divide_by_one = bool(data["divideByOne"])