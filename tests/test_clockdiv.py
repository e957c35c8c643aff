import pytest

from aridacity.clockdiv import ClockDivider

HIGH = 10.0


def pulse(divider, **kwargs):
    divider.process(0.0, **kwargs)
    return divider.process(HIGH, **kwargs)


def test_initial_high_clock_does_not_advance():
    divider = ClockDivider()
    out = divider.process(HIGH)
    assert divider.index == 1
    assert out[0] == HIGH
    assert all(v == 0.0 for v in out[1:])


def test_low_clock_clears_all_outputs():
    divider = ClockDivider()
    divider.process(HIGH)
    out = divider.process(0.0)
    assert out == [0.0] * 16


def test_pulse_advances_index():
    divider = ClockDivider()
    divider.process(HIGH)
    out = pulse(divider)
    assert divider.index == 2
    assert out[0] == HIGH and out[1] == HIGH
    assert out[2] == 0.0


def test_full_cycle_fire_counts():
    divider = ClockDivider()
    outputs = [divider.process(HIGH)]
    for _ in range(15):
        outputs.append(pulse(divider))
    assert divider.index == 16
    for d in range(16):
        fired = sum(1 for out in outputs if out[d] == HIGH)
        assert fired == 16 // (d + 1)


def test_index_wraps_after_sixteen():
    divider = ClockDivider()
    divider.process(HIGH)
    for _ in range(16):
        pulse(divider)
    assert divider.index == 1


def test_sequencer_mode_single_active_output():
    divider = ClockDivider(seq_mode=True)
    divider.process(HIGH)
    for step in range(20):
        out = pulse(divider)
        active = [d for d, v in enumerate(out) if v != 0.0]
        assert active == [divider.index - 1]


def test_seq_input_overrides_value():
    divider = ClockDivider()
    out = divider.process(HIGH, seq=3.5)
    assert out[0] == 3.5


def test_reset_input_restarts_on_next_clock():
    divider = ClockDivider()
    divider.process(HIGH)
    pulse(divider)
    pulse(divider)
    assert divider.index == 3
    divider.process(0.0, reset=0.0)
    divider.process(0.0, reset=HIGH)
    divider.process(HIGH)
    assert divider.index == 1


def test_divide_by_one_sets_all_outputs_on_first_step():
    divider = ClockDivider(divide_by_one=True)
    out = divider.process(HIGH)
    assert out == [HIGH] * 16


def test_reset_method():
    divider = ClockDivider()
    divider.process(HIGH)
    pulse(divider)
    divider.reset()
    assert divider.index == 1


@pytest.mark.parametrize("flag", [True, False])
def test_json_round_trip(flag):
    saved = ClockDivider(divide_by_one=flag).to_json()
    restored = ClockDivider(divide_by_one=not flag)
    restored.from_json(saved)
    assert restored.divide_by_one is flag
    assert saved == {"divideByOne": flag}


def test_from_json_missing_key_keeps_setting():
    divider = ClockDivider(divide_by_one=True)
    divider.from_json({})
    assert divider.divide_by_one is True