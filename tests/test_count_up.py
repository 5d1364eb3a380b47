from uangkas.utils.core.count_up import count_up_frames, count_up_many, count_up_value


class FakeClock:
    def __init__(self):
        self.t = 0.0

    def now(self):
        return self.t

    def sleep(self, dt):
        self.t += dt


def test_value_formula():
    assert count_up_value(100, 0.0) == 0
    assert count_up_value(100, 0.4) == 50
    assert count_up_value(100, 5.0) == 100
    assert count_up_value(7, 0.1, duration=0) == 7


def test_frames_rise_monotonically_and_end_at_target():
    clock = FakeClock()
    frames = list(count_up_frames(100, 0.8, fps=10, clock=clock.now, sleep=clock.sleep))
    assert frames[0] == 0
    assert frames[-1] == 100
    assert all(a < b for a, b in zip(frames, frames[1:]))
    assert clock.t <= 1.0


def test_frames_for_zero_target():
    clock = FakeClock()
    assert list(count_up_frames(0, clock=clock.now, sleep=clock.sleep)) == [0]


def test_many_counters_share_one_clock():
    clock = FakeClock()
    frames = list(count_up_many([10, 200, 0], 0.8, fps=10, clock=clock.now, sleep=clock.sleep))
    assert frames[0] == (0, 0, 0)
    assert frames[-1] == (10, 200, 0)
    assert len(frames) == len(set(frames))
    assert clock.t <= 1.0
