import random

from justdivide.components.difficulty import DIFFICULTY_VALUES, Difficulty
from justdivide.systems.tile_source import TileSource


def test_next_value_stays_inside_tier():
    source = TileSource(random.Random(7))
    for difficulty in Difficulty:
        allowed = set(DIFFICULTY_VALUES[difficulty])
        drawn = {source.next_value(difficulty) for _ in range(500)}
        assert drawn <= allowed
        # 500 uniform draws cover every value of every tier with overwhelming probability.
        assert drawn == allowed


def test_hard_tier_never_spawns_two():
    source = TileSource(random.Random(3))
    assert all(source.next_value(Difficulty.HARD) != 2 for _ in range(300))


def test_refill_queue_tops_up_to_three():
    source = TileSource(random.Random(1))
    queue = [5]
    added = source.refill_queue(queue, Difficulty.EASY)
    assert len(queue) == 3
    assert queue[0] == 5
    assert queue[1:] == added


def test_refill_queue_leaves_full_queue_alone():
    source = TileSource(random.Random(1))
    queue = [2, 3, 4]
    assert source.refill_queue(queue, Difficulty.MEDIUM) == []
    assert queue == [2, 3, 4]


def test_seeded_sources_are_reproducible():
    a = TileSource(random.Random(99))
    b = TileSource(random.Random(99))
    assert [a.next_value(Difficulty.HARD) for _ in range(20)] == [b.next_value(Difficulty.HARD) for _ in range(20)]
