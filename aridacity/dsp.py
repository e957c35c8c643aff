"""Small signal helpers shared by the modules."""

from dataclasses import dataclass, field


def clamp(value, low, high):
    """Limit ``value`` to the range ``[low, high]``; ``low`` wins if the range is empty."""
    return max(min(value, high), low)


def crossfade(a, b, position):
    """Blend linearly from ``a`` (position 0) to ``b`` (position 1)."""
    return a + (b - a) * position


@dataclass
class SchmittTrigger:
    """Edge detector with hysteresis.

    The trigger starts in the high state, so a signal that is already high
    when it is first seen does not fire.
    """

    low_threshold: float = 0.0
    high_threshold: float = 1.0
    _high: bool = field(default=True, init=False, repr=False)

    def process(self, value):
        """Feed one sample; return True on a rising edge."""
        if self._high:
            if value <= self.low_threshold:
                self._high = False
            return False
        if value >= self.high_threshold:
            self._high = True
            return True
        return False

    def reset(self):
        """Return to the initial (high) state."""
        self._high = True

    def is_high(self):
        """Whether the trigger is currently in its high state."""
        return self._high