import numpy as np
import pytest
from unittest.mock import Mock

from fitsim.core import create_rng, create_strategy, parse_strategy
from fitsim.exceptions import ConfigurationError
from fitsim.memory import (
    BestFitStrategy,
    FirstFitStrategy,
    FreeList,
    NextFitStrategy,
    RandomFitStrategy,
    WorstFitStrategy,
)
from fitsim.types import AllocationStrategy, IPlacementStrategy, ZeroSizePolicy

BLOCKS = [100, 500, 200, 300, 600]
REQUESTS = [212, 417, 112, 426]


def replay(strategy, requests):
    return [strategy.attempt(size) for size in requests]


def changed_block(before, after, size):
    """Return the index of the block that served ``size``."""
    if len(after) == len(before) - 1:
        for i, block in enumerate(before):
            if i == len(after) or after[i] != block:
                assert block == size
                return i
    for i, (old, new) in enumerate(zip(before, after)):
        if old != new:
            assert old - new == size
            return i
    return None


class TestFirstFit:
    def test_end_to_end_example(self):
        free_list = FreeList(BLOCKS)
        strategy = FirstFitStrategy(free_list)

        assert replay(strategy, REQUESTS) == [True, True, True, False]
        assert free_list.sizes() == (100, 176, 200, 300, 183)

    def test_picks_first_qualifying_block(self):
        free_list = FreeList([10, 50, 40, 60])
        FirstFitStrategy(free_list).attempt(30)

        assert free_list.sizes() == (10, 20, 40, 60)

    def test_deterministic(self):
        runs = []
        for _ in range(3):
            free_list = FreeList(BLOCKS)
            outcome = replay(FirstFitStrategy(free_list), REQUESTS * 3)
            runs.append((outcome, free_list.sizes()))

        assert runs[0] == runs[1] == runs[2]

    def test_failure_leaves_list_unchanged(self):
        free_list = FreeList([10, 20])

        assert FirstFitStrategy(free_list).attempt(21) is False
        assert free_list.sizes() == (10, 20)


class TestNextFit:
    def test_wrap_around_fails_after_full_circle(self):
        free_list = FreeList([50, 50, 200])
        strategy = NextFitStrategy(free_list)

        assert strategy.attempt(200) is True
        assert free_list.sizes() == (50, 50)

        assert strategy.attempt(200) is False
        assert free_list.sizes() == (50, 50)

    def test_end_to_end_example(self):
        free_list = FreeList(BLOCKS)
        strategy = NextFitStrategy(free_list)

        assert replay(strategy, REQUESTS) == [True, True, True, False]
        assert free_list.sizes() == (100, 176, 200, 300, 183)

    def test_resumes_after_previous_block(self):
        free_list = FreeList([100, 100, 100])
        strategy = NextFitStrategy(free_list)

        replay(strategy, [10, 10, 10])

        assert free_list.sizes() == (90, 90, 90)

    def test_wraps_to_head(self):
        free_list = FreeList([100, 20, 100])
        strategy = NextFitStrategy(free_list)

        strategy.attempt(50)
        strategy.attempt(50)
        strategy.attempt(50)

        assert free_list.sizes() == (20, 50)

    def test_cursor_stays_on_index_after_removal(self):
        free_list = FreeList([30, 40, 50])
        strategy = NextFitStrategy(free_list)

        strategy.attempt(30)
        assert strategy.cursor == 0

        strategy.attempt(10)
        assert free_list.sizes() == (30, 50)

    def test_failure_clears_cursor(self):
        free_list = FreeList([100, 100])
        strategy = NextFitStrategy(free_list)

        strategy.attempt(10)
        assert strategy.cursor == 1

        assert strategy.attempt(500) is False
        assert strategy.cursor is None

    def test_reset_clears_cursor(self):
        free_list = FreeList([100, 100])
        strategy = NextFitStrategy(free_list)
        strategy.attempt(10)

        strategy.reset()

        assert strategy.cursor is None

    def test_empty_list_fails(self):
        assert NextFitStrategy(FreeList()).attempt(1) is False


class TestBestFit:
    def test_end_to_end_example(self):
        free_list = FreeList(BLOCKS)

        assert replay(BestFitStrategy(free_list), REQUESTS) == [True, True, True, True]
        assert free_list.sizes() == (100, 83, 88, 88, 174)

    def test_tie_breaks_on_earliest_block(self):
        free_list = FreeList([80, 60, 90, 60])
        BestFitStrategy(free_list).attempt(50)

        assert free_list.sizes() == (80, 10, 90, 60)

    def test_chosen_block_is_minimal_candidate(self):
        rng = np.random.default_rng(7)
        free_list = FreeList(rng.integers(0, 400, size=40).tolist())
        strategy = BestFitStrategy(free_list)

        for size in rng.integers(1, 300, size=60).tolist():
            before = free_list.sizes()
            candidates = [block for block in before if block >= size]
            if strategy.attempt(size):
                index = changed_block(before, free_list.sizes(), size)
                assert before[index] == min(candidates)
            else:
                assert not candidates


class TestWorstFit:
    def test_end_to_end_example(self):
        free_list = FreeList(BLOCKS)

        assert replay(WorstFitStrategy(free_list), REQUESTS) == [True, True, True, False]
        assert free_list.sizes() == (100, 83, 200, 300, 276)

    def test_tie_breaks_on_earliest_block(self):
        free_list = FreeList([80, 90, 10, 90])
        WorstFitStrategy(free_list).attempt(50)

        assert free_list.sizes() == (80, 40, 10, 90)

    def test_chosen_block_is_maximal_candidate(self):
        rng = np.random.default_rng(11)
        free_list = FreeList(rng.integers(0, 400, size=40).tolist())
        strategy = WorstFitStrategy(free_list)

        for size in rng.integers(1, 300, size=60).tolist():
            before = free_list.sizes()
            candidates = [block for block in before if block >= size]
            if strategy.attempt(size):
                index = changed_block(before, free_list.sizes(), size)
                assert before[index] == max(candidates)
            else:
                assert not candidates


class TestRandomFit:
    def setup_method(self):
        self.rng = Mock()

    def test_selects_candidate_by_index(self):
        self.rng.integers.return_value = 1
        free_list = FreeList([10, 50, 5, 70, 60])

        assert RandomFitStrategy(free_list, self.rng).attempt(40) is True

        self.rng.integers.assert_called_once_with(3)
        assert free_list.sizes() == (10, 50, 5, 30, 60)

    def test_no_candidates_skips_generator(self):
        free_list = FreeList([10, 20])

        assert RandomFitStrategy(free_list, self.rng).attempt(30) is False
        self.rng.integers.assert_not_called()
        assert free_list.sizes() == (10, 20)

    def test_zero_size_requests_always_succeed(self):
        free_list = FreeList([10, 20, 30])
        strategy = RandomFitStrategy(free_list, create_rng(3))

        assert all(replay(strategy, [0] * 50))
        assert free_list.sizes() == (10, 20, 30)

    def test_chosen_block_is_a_candidate(self):
        rng = np.random.default_rng(5)
        free_list = FreeList(rng.integers(1, 400, size=30).tolist())
        strategy = RandomFitStrategy(free_list, create_rng(5))

        for size in rng.integers(1, 300, size=50).tolist():
            before = free_list.sizes()
            if strategy.attempt(size):
                index = changed_block(before, free_list.sizes(), size)
                assert before[index] >= size
            else:
                assert all(block < size for block in before)

    def test_same_seed_same_choices(self):
        outcomes = []
        for _ in range(2):
            free_list = FreeList(BLOCKS)
            replay(RandomFitStrategy(free_list, create_rng(42)), REQUESTS)
            outcomes.append(free_list.sizes())

        assert outcomes[0] == outcomes[1]


@pytest.mark.parametrize("kind", list(AllocationStrategy))
class TestCommonContract:
    def make(self, kind, free_list, policy=ZeroSizePolicy.SCAN):
        return create_strategy(kind, free_list, create_rng(0), policy)

    def test_implements_protocol(self, kind):
        strategy = self.make(kind, FreeList())

        assert isinstance(strategy, IPlacementStrategy)
        assert strategy.kind is kind

    def test_instances_have_no_dict(self, kind):
        strategy = self.make(kind, FreeList())

        assert not hasattr(strategy, "__dict__")

    def test_each_success_removes_exactly_the_request(self, kind):
        rng = np.random.default_rng(int(kind))
        free_list = FreeList(rng.integers(0, 500, size=25).tolist())
        strategy = self.make(kind, free_list)

        for size in rng.integers(0, 400, size=80).tolist():
            before = free_list.total()
            before_sizes = free_list.sizes()
            if strategy.attempt(size):
                assert free_list.total() == before - size
            else:
                assert free_list.sizes() == before_sizes
            assert all(block >= 0 for block in free_list)

    def test_empty_pool_fails(self, kind):
        assert self.make(kind, FreeList()).attempt(1) is False

    def test_zero_size_scan_needs_a_block(self, kind):
        assert self.make(kind, FreeList()).attempt(0) is False

    def test_zero_size_trivial_always_succeeds(self, kind):
        free_list = FreeList()
        strategy = self.make(kind, free_list, ZeroSizePolicy.TRIVIAL)

        assert strategy.attempt(0) is True
        assert free_list.is_empty


class TestStrategyRegistry:
    def test_random_fit_requires_generator(self):
        with pytest.raises(ConfigurationError, match="random generator"):
            create_strategy(AllocationStrategy.RANDOM_FIT, FreeList())

    def test_unknown_kind_is_rejected(self):
        with pytest.raises(ConfigurationError, match="Unknown allocation strategy"):
            create_strategy(99, FreeList())

    @pytest.mark.parametrize("name, expected", [
        ("first-fit", AllocationStrategy.FIRST_FIT),
        ("Next Fit", AllocationStrategy.NEXT_FIT),
        ("BEST_FIT", AllocationStrategy.BEST_FIT),
        ("worst-fit", AllocationStrategy.WORST_FIT),
        ("random-fit", AllocationStrategy.RANDOM_FIT),
    ])
    def test_parse_strategy(self, name, expected):
        assert parse_strategy(name) is expected

    def test_parse_unknown_strategy(self):
        with pytest.raises(ConfigurationError, match="expected one of"):
            parse_strategy("buddy")
