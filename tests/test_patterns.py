import asyncio

import pytest

from pixeltools.led import FramePattern, PatternTask, Rgb, find_pattern, patterns_for
from pixeltools.led.patterns import PATTERNS, matrix_size
from pixeltools.led.patterns.ring import clock, spinning_dot
from pixeltools.led.patterns.strip import color_wipe, meteor


ALL_PATTERNS = [(arrangement, pattern) for arrangement, group in PATTERNS.items() for pattern in group]


@pytest.mark.parametrize("arrangement,pattern", ALL_PATTERNS, ids=lambda value: getattr(value, "name", value))
@pytest.mark.parametrize("count", [1, 8, 16, 30])
def test_every_pattern_yields_one_valid_color_per_led(arrangement, pattern, count):
    pattern.init(count)
    for frame in range(0, 60, 7):
        colors = pattern.colors_for_frame(frame, count)
        assert len(colors) == count
        for color in colors:
            assert isinstance(color, Rgb)
            for channel in color.as_tuple():
                assert isinstance(channel, int)
                assert 0 <= channel <= 255


def test_pattern_sets_are_distinct():
    names = [pattern.name for _, pattern in ALL_PATTERNS]
    assert len(names) == len(set(names))
    assert all(pattern.interval_ms > 0 for _, pattern in ALL_PATTERNS)


def test_find_pattern_is_case_insensitive():
    assert find_pattern("ring", "rotate rainbow").name == "Rotate Rainbow"
    with pytest.raises(ValueError):
        find_pattern("strip", "Rotate Rainbow")


def test_patterns_for_unknown_arrangement():
    with pytest.raises(ValueError):
        patterns_for("cube")


def test_matrix_size():
    assert [matrix_size(n) for n in (1, 2, 4, 5, 16, 17)] == [1, 2, 2, 3, 4, 5]


def test_spinning_dot_moves_one_step_per_frame():
    white = Rgb(255, 255, 255)
    assert spinning_dot(0, 4).index(white) == 0
    assert spinning_dot(5, 4).index(white) == 1


def test_clock_hour_hand_wins_on_overlap():
    assert clock(0, 8)[0] == Rgb(255, 0, 0)


def test_color_wipe_and_meteor():
    assert color_wipe(1, 4) == [Rgb(255, 0, 0)] * 2 + [Rgb(0, 0, 0)] * 2
    assert color_wipe(4, 4)[0] == Rgb(0, 255, 0)
    trail = meteor(3, 5)
    assert trail[3] == Rgb(255, 255, 255)
    assert trail[0] == Rgb(20, 20, 100)
    assert trail[4] == Rgb(0, 0, 0)


def test_wrong_color_count_is_an_error():
    broken = FramePattern("Broken", 10, lambda frame, count: [])
    with pytest.raises(RuntimeError):
        broken.colors_for_frame(0, 3)


def test_init_calls_setup():
    seen = []
    pattern = FramePattern("Setup", 10, lambda frame, count: [Rgb()] * count, setup=seen.append)
    pattern.init(12)
    assert seen == [12]


def test_pattern_task_runs_bounded_frames():
    frames = []

    async def on_frame(colors):
        frames.append(colors)

    async def run():
        task = PatternTask()
        pattern = FramePattern("Dot", 0, spinning_dot)
        await task.start(pattern, 3, on_frame, frames=3)
        await task.wait()
        assert not task.running

    asyncio.run(run())
    assert frames == [spinning_dot(i, 3) for i in range(3)]


def test_pattern_task_cancel_stops_loop():
    frames = []

    async def on_frame(colors):
        frames.append(colors)

    async def run():
        task = PatternTask()
        await task.start(FramePattern("Dot", 5, spinning_dot), 4, on_frame)
        await asyncio.sleep(0.05)
        assert task.running
        assert task.pattern.name == "Dot"
        await task.cancel()
        assert not task.running
        assert task.pattern is None
        count = len(frames)
        await asyncio.sleep(0.03)
        assert len(frames) == count

    asyncio.run(run())
    assert frames


def test_starting_a_pattern_replaces_the_previous_one():
    seen = []

    async def on_frame(colors):
        seen.append(len(colors))

    async def run():
        task = PatternTask()
        await task.start(FramePattern("Slow", 1000, spinning_dot), 2, on_frame)
        await asyncio.sleep(0.01)
        await task.start(FramePattern("Fast", 0, spinning_dot), 5, on_frame, frames=2)
        await task.wait()

    asyncio.run(run())
    assert seen == [2, 5, 5]
