import pytest

from skyraid.frame_driver import FrameDriver


def test_one_step_per_frame_with_clamped_delta():
    deltas = []
    fd = FrameDriver(nominal_ms=16.0, max_delta_ms=100.0)
    fd.attach(deltas.append)
    fd.on_frame(1000.0)
    fd.on_frame(1017.0)
    fd.on_frame(1500.0)
    fd.on_frame(1400.0)  # clock went backwards
    assert deltas == [16.0, 17.0, 100.0, 0.0]
    assert fd.frames == 4


def test_unattached_driver_does_nothing():
    fd = FrameDriver(nominal_ms=16.0)
    assert fd.on_frame(0.0) is None
    assert fd.frames == 0


def test_detach_inside_step_takes_effect_after_it():
    fd = FrameDriver(nominal_ms=16.0)
    calls = []

    def step(dt):
        calls.append(dt)
        if len(calls) == 2:
            fd.detach()
            assert fd.attached  # still mid-step
        return len(calls)

    fd.attach(step)
    ran = fd.run(float(t) for t in range(0, 1000, 16))
    assert ran == 2
    assert len(calls) == 2
    assert not fd.attached


def test_drives_lifecycle_steps(core):
    core.start()
    fd = FrameDriver(nominal_ms=core.config.frame_ms)
    fd.attach(lambda dt: core.step(dt_ms=dt))
    fd.run([0.0, 20.0, 40.0])
    assert core.run.steps == 3
    assert core.run.level.elapsed_ms == pytest.approx(core.config.frame_ms + 40.0)
