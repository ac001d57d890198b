import pytest

from core.pacing import FramePacer


class FakeClock:
    def __init__(self):
        self.now = 0.0
        self.slept = []

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.slept.append(seconds)
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


def test_sleeps_for_remaining_budget(clock):
    pacer = FramePacer(60, 5, clock=clock, sleep=clock.sleep)
    pacer.begin_tick()
    clock.now += 0.004
    wait_ms = pacer.end_tick()
    assert wait_ms == pytest.approx(1000.0 / 60 - 4.0)
    assert clock.slept[-1] == pytest.approx(wait_ms / 1000.0)


def test_overrunning_tick_still_sleeps_floor(clock):
    pacer = FramePacer(60, 5, clock=clock, sleep=clock.sleep)
    pacer.begin_tick()
    clock.now += 0.050
    assert pacer.end_tick() == pytest.approx(5.0)


def test_floor_applies_near_budget(clock):
    pacer = FramePacer(60, 5, clock=clock, sleep=clock.sleep)
    assert pacer.remaining_ms(15.0) == pytest.approx(5.0)
    assert pacer.remaining_ms(0.0) == pytest.approx(1000.0 / 60)


def test_each_tick_measured_from_its_own_start(clock):
    pacer = FramePacer(50, 5, clock=clock, sleep=clock.sleep)
    for _ in range(3):
        pacer.begin_tick()
        clock.now += 0.010
        assert pacer.end_tick() == pytest.approx(10.0)
