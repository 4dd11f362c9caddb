import pytest

from sweeper.sweeper_algorithm.utils import coverage_percentage, estimate_remaining


class TestCoveragePercentage:
    def test_denominator_subtracts_static_obstacles(self) -> None:
        assert coverage_percentage(8, 3, 3, 1) == pytest.approx(100.0)
        assert coverage_percentage(3, 3, 3, 3) == pytest.approx(50.0)

    def test_all_obstacles_gives_zero(self) -> None:
        assert coverage_percentage(0, 2, 2, 4) == 0.0
        assert coverage_percentage(0, 0, 0, 0) == 0.0


class TestEstimateRemaining:
    def test_scales_elapsed_by_remaining_cells(self) -> None:
        assert estimate_remaining(2.0, 4, 3, 3, 1) == pytest.approx(2.0)

    def test_zero_before_first_cell(self) -> None:
        assert estimate_remaining(5.0, 0, 3, 3, 0) == 0.0

    def test_never_negative(self) -> None:
        assert estimate_remaining(1.0, 9, 3, 3, 1) == 0.0
