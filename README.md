# aridacity

Four small processors for modular-style audio work. Each one works one
sample at a time and keeps its own state between calls. You pass it the
input voltages for one sample, and it returns the output voltages for that
sample.

- **`BitCrusher`** (`aridacity.bcrush`): a polyphonic bit crusher.
  - It lowers the sample rate and quantises the amplitude.
  - It can also apply shift, AND, OR, XOR and NOT operations to the
    quantised value.
  - Between updates it holds its last output. An update comes either from
    its internal rate, or from a rising edge on the `clock_hold` input when
    that input is plugged in.
- **`Clipper`** (`aridacity.clip`): a polyphonic clipper.
  - It applies gain first.
  - Signals that fall inside an inner "push" band are pushed out to the edge
    of the band. With `pull` set, they are pulled to zero instead.
  - With `limit_enabled` set, the result is clamped to an outer limit band.
- **`ClockDivider`** (`aridacity.clockdiv`): sixteen outputs that follow a
  clock input.
  - In divider mode, output `d` (counting from 0) passes the clock whenever
    the step counter is a multiple of `d + 1`.
  - In sequencer mode (`seq_mode=True`), only the output at the current step
    passes it.
- **`Remainder`** (`aridacity.remainder`): a monophonic wavefolder.
  - It sums all audio channels and folds the result by taking its remainder
    against a divisor.
  - It has feedback, a shape control and a dry/wet mix. Each of these has an
    attenuverter for its CV input.

`aridacity.dsp` holds the shared helpers:

- `clamp(value, low, high)` limits a value to a range.
- `crossfade(a, b, position)` blends linearly from `a` to `b`.
- `SchmittTrigger` is an edge detector. Its thresholds default to 0 V and 1 V.
  It starts in the high state, so a signal that is already high when first
  seen does not fire.

## Installation

```
pip install .
```

The package has no runtime dependencies. To run the tests:

```
pip install .[test]
pytest
```

## Finding processors by name

`aridacity.registry` builds processors by name:

```python
from aridacity.registry import model_names, create

print(model_names())          # ('ClockDiv', 'BCrush', 'Clip', 'Remainder')
crusher = create("BCrush")    # a fresh BitCrusher with default settings
```

An unknown name raises `KeyError`.

## Clock divider

```python
from aridacity.clockdiv import ClockDivider

divider = ClockDivider()
for clock in [0.0, 10.0] * 4:
    outputs = divider.process(clock, 0.0, None)  # 16 voltages
```

Each rising clock edge advances the step counter. The counter runs from 1
to 16 and then wraps back to 1.

While the clock is low, every output is 0 V. The third argument is the
modulation input. When it is not `None`, its voltage goes to the active
outputs in place of the clock voltage.

A rising edge on the reset input (the second argument) does not act at once.
Instead, the next clock edge returns the counter to 1.

With `divide_by_one` set, all outputs pass the clock while the counter is
on step 1. `reset()` returns the counter to step 1 and keeps the settings.
`to_json()` returns `{"divideByOne": ...}`, and `from_json(data)` restores
that setting from such a mapping.

## Per-sample processing

`BitCrusher`, `Clipper` and `Remainder` take their inputs as one object per
sample: `BCrushInputs`, `ClipInputs` and `RemainderInputs`. Each processor's
knob settings are plain attributes of the processor.

```python
from aridacity.bcrush import BitCrusher, BCrushInputs
from aridacity.clip import Clipper, ClipInputs
from aridacity.remainder import Remainder, RemainderInputs

crusher = BitCrusher(resolution_param=2.0)
crushed = crusher.process(BCrushInputs(audio=[3.0, -1.5]), 48000.0)

clipper = Clipper(push=0.2, limit=0.8)
clipped = clipper.process(ClipInputs(audio=[0.5, 4.0]))

folder = Remainder(gain=3.0, fold=2.0)
folded = folder.process(RemainderInputs(audio=[4.0]))
```

How each input type treats its fields:

- **`BCrushInputs`**: an optional jack that is not plugged in is `None`.
- **`ClipInputs`**: an empty sequence counts as unplugged.
- **Both of the above**: a channel missing from a shorter sequence reads as 0 V.
- **`RemainderInputs`**: every field except `audio` is a single voltage.

`BitCrusher.process` also takes the engine sample rate. It returns a list
with one voltage per audio channel.

## What the package does not do

The package reads no audio devices or files and writes none. It has no
panels, knobs or other user interface, and no command-line tool. The caller
supplies every input voltage and every setting for each sample, and does
whatever it likes with the voltages that come back.