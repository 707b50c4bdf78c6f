"""Tests for animation - ping-pong phase oscillator."""
import pytest

from animation import DECREASING, INCREASING, PhaseOscillator, ping_pong


class FakeClock:
    def __init__(self, now=100.0):
        self.now = now

    def __call__(self):
        return self.now


class TestPingPong:
    def test_starts_at_zero(self):
        assert ping_pong(0.0, 30.0) == 0.0

    def test_reaches_one_at_midpoint(self):
        assert ping_pong(30.0, 30.0) == pytest.approx(1.0)

    def test_back_to_zero_after_full_cycle(self):
        assert ping_pong(60.0, 30.0) == pytest.approx(0.0)

    def test_linear_both_ways(self):
        assert ping_pong(15.0, 30.0) == pytest.approx(0.5)
        assert ping_pong(45.0, 30.0) == pytest.approx(0.5)
        assert ping_pong(6.0, 30.0) == pytest.approx(0.2)
        assert ping_pong(54.0, 30.0) == pytest.approx(0.2)

    def test_repeats_forever(self):
        assert ping_pong(615.0, 30.0) == pytest.approx(ping_pong(15.0, 30.0))
        assert ping_pong(3630.0, 30.0) == pytest.approx(1.0)

    def test_never_leaves_unit_range(self):
        for step in range(0, 2000):
            value = ping_pong(step * 0.137, 30.0)
            assert 0.0 <= value <= 1.0

    def test_negative_elapsed_clamps_to_start(self):
        assert ping_pong(-5.0, 30.0) == 0.0

    @pytest.mark.parametrize("half_period", [0, -1.0])
    def test_rejects_non_positive_half_period(self, half_period):
        with pytest.raises(ValueError):
            ping_pong(1.0, half_period)


class TestPhaseOscillator:
    def test_follows_clock(self):
        clock = FakeClock()
        osc = PhaseOscillator(half_period=30.0, clock=clock)
        assert osc.value() == 0.0

        clock.now += 30.0
        assert osc.value() == pytest.approx(1.0)

        clock.now += 15.0
        assert osc.value() == pytest.approx(0.5)

    def test_direction_reverses_at_bounds(self):
        clock = FakeClock()
        osc = PhaseOscillator(half_period=30.0, clock=clock)
        assert osc.direction == INCREASING

        clock.now += 29.0
        assert osc.direction == INCREASING

        clock.now += 2.0
        assert osc.direction == DECREASING

        clock.now += 30.0
        assert osc.direction == INCREASING

    def test_rejects_non_positive_half_period(self):
        with pytest.raises(ValueError):
            PhaseOscillator(half_period=0)
