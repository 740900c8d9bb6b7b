"""Tests for adding ranges to filter specifications."""

import itertools

import hypothesis
import hypothesis.strategies
import pytest

from torchbands.filter_range import (
    LESS,
    AllRange,
    BandPass,
    BandStop,
    CombinedSpecification,
    HighPass,
    LowPass,
    PassAggregate,
    RangeConflictError,
    StopAggregate,
    UnsupportedVariantError,
    add,
    compare_ranges,
    from_ranges,
    render,
)
from torchbands.testing.strategies import band_stop_ranges, pass_ranges


class TestEndToEnd:
    """Test complete specification builds."""

    def test_trace(self):
        spec = LowPass(10)

        spec = spec.add(BandPass(20, 30))
        assert isinstance(spec, PassAggregate)
        assert render(spec) == ("[0, 10]", "[20, 30]")

        spec = spec.add(HighPass(10000))
        assert render(spec) == ("[0, 10]", "[20, 30]", "[10000, inf)")

        spec = spec.add(BandStop(35, 38))
        assert isinstance(spec, CombinedSpecification)
        assert render(spec.pass_side) == (
            "[0, 10]",
            "[20, 30]",
            "[10000, inf)",
        )
        assert render(spec.stop_side) == ("stop:[35, 38]",)

        spec = spec.add(BandPass(1, 30))
        assert render(spec.pass_side) == ("[0, 30]", "[10000, inf)")

        spec = spec.add(BandStop(60, 80))
        assert render(spec) == (
            "[0, 30]",
            "[10000, inf)",
            "stop:[35, 38]",
            "stop:[60, 80]",
        )

    def test_demo_sequence(self):
        mix = from_ranges(
            BandPass(20, 30), LowPass(10), HighPass(10000), BandStop(35, 38)
        )
        mix = mix.add(BandPass(20, 30))
        assert str(mix) == "[0, 10] [20, 30] [10000, inf) stop:[35, 38]"

        mix = mix.add(BandPass(30, 31))
        assert str(mix) == "[0, 10] [20, 31] [10000, inf) stop:[35, 38]"

        mix = mix.add(BandPass(50, 100))
        mix = mix.add(BandPass(1, 30))
        assert render(mix.pass_side) == (
            "[0, 31]",
            "[50, 100]",
            "[10000, inf)",
        )

        mix = mix.add(BandStop(310, 400))
        mix = mix.add(BandStop(310, 400))
        assert render(mix.stop_side) == ("stop:[35, 38]", "stop:[310, 400]")

        mix = mix.add(BandStop(390, 500))
        assert render(mix.stop_side) == ("stop:[35, 38]", "stop:[310, 500]")

    def test_collapse_to_all_range_then_reject_stop(self):
        mix = from_ranges(LowPass(10), BandPass(20, 30), HighPass(10000))

        mix = mix.add(BandPass(10, 30))
        assert render(mix) == ("[0, 30]", "[10000, inf)")

        mix = mix.add(BandPass(30, 10000))
        assert mix is AllRange()

        with pytest.raises(RangeConflictError) as excinfo:
            mix.add(BandStop(60, 80))
        assert (excinfo.value.low, excinfo.value.high) == (60.0, 80.0)


class TestPrimitivePairs:
    """Test the pairwise rules between two primitives."""

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            (LowPass(10), LowPass(20), LowPass(20)),
            (LowPass(20), LowPass(10), LowPass(20)),
            (HighPass(100), HighPass(50), HighPass(50)),
            (LowPass(10), BandPass(5, 20), LowPass(20)),
            (LowPass(30), BandPass(5, 20), LowPass(30)),
            (HighPass(100), BandPass(50, 150), HighPass(50)),
            (BandPass(20, 30), BandPass(22, 25), BandPass(20, 30)),
            (BandPass(22, 25), BandPass(20, 30), BandPass(20, 30)),
            (BandPass(20, 30), BandPass(30, 40), BandPass(20, 40)),
            (BandPass(0, 5), BandPass(2, 3), LowPass(5)),
            (BandStop(10, 20), BandStop(15, 30), BandStop(10, 30)),
            (BandStop(10, 20), BandStop(12, 14), BandStop(10, 20)),
        ],
    )
    def test_overlapping_merge(self, a, b, expected):
        assert add(a, b) == expected

    @pytest.mark.parametrize(
        "a, b",
        [
            (LowPass(5), HighPass(5)),
            (HighPass(5), LowPass(10)),
            (HighPass(0), LowPass(3)),
            (LowPass(3), AllRange()),
            (AllRange(), AllRange()),
        ],
    )
    def test_whole_axis_collapses(self, a, b):
        assert add(a, b) is AllRange()

    def test_disjoint_pass_forms_sorted_aggregate(self):
        spec = BandPass(30, 40).add(BandPass(10, 20))
        assert isinstance(spec, PassAggregate)
        assert spec.ranges == (BandPass(10, 20), BandPass(30, 40))

    def test_low_and_high_pass_disjoint(self):
        spec = HighPass(6).add(LowPass(5))
        assert spec.ranges == (LowPass(5), HighPass(6))

    def test_disjoint_stop_forms_sorted_aggregate(self):
        spec = BandStop(30, 40).add(BandStop(10, 20))
        assert isinstance(spec, StopAggregate)
        assert spec.ranges == (BandStop(10, 20), BandStop(30, 40))

    def test_pass_and_stop_combine(self):
        spec = BandStop(35, 38).add(BandPass(20, 30))
        assert isinstance(spec, CombinedSpecification)
        assert spec.pass_side == BandPass(20, 30)
        assert spec.stop_side == BandStop(35, 38)

    def test_pass_and_stop_conflict(self):
        with pytest.raises(RangeConflictError) as excinfo:
            LowPass(10).add(BandStop(5, 20))
        assert (excinfo.value.low, excinfo.value.high) == (5.0, 10.0)

    def test_receiver_unchanged(self):
        a = LowPass(10)
        a.add(BandPass(20, 30))
        assert a == LowPass(10)


class TestAggregates:
    """Test adding to pass and stop aggregates."""

    def test_bridge_collapses_to_primitive(self):
        spec = from_ranges(LowPass(10), BandPass(20, 30))
        assert spec.add(BandPass(5, 25)) == LowPass(30)

    def test_stop_bridge_collapses_to_primitive(self):
        spec = from_ranges(BandStop(10, 20), BandStop(30, 40))
        assert spec.add(BandStop(20, 30)) == BandStop(10, 40)

    def test_insert_between(self):
        spec = from_ranges(LowPass(10), HighPass(100))
        spec = spec.add(BandPass(40, 50))
        assert spec.ranges == (LowPass(10), BandPass(40, 50), HighPass(100))

    def test_pass_aggregate_absorbed(self):
        spec = from_ranges(LowPass(10), BandPass(20, 30))
        assert spec.add(AllRange()) is AllRange()

    def test_pass_aggregate_with_stop(self):
        spec = from_ranges(LowPass(10), BandPass(20, 30))
        spec = spec.add(BandStop(12, 18))
        assert isinstance(spec, CombinedSpecification)
        assert isinstance(spec.pass_side, PassAggregate)

    def test_stop_aggregate_with_pass(self):
        spec = from_ranges(BandStop(10, 20), BandStop(30, 40))
        spec = spec.add(BandPass(22, 28))
        assert isinstance(spec, CombinedSpecification)
        assert spec.pass_side == BandPass(22, 28)
        assert isinstance(spec.stop_side, StopAggregate)

    def test_stop_aggregate_rejects_all_range(self):
        spec = from_ranges(BandStop(1, 2), BandStop(5, 6))
        with pytest.raises(RangeConflictError) as excinfo:
            spec.add(AllRange())
        assert (excinfo.value.low, excinfo.value.high) == (1.0, 2.0)

    def test_aggregate_unchanged_after_add(self):
        spec = from_ranges(LowPass(10), BandPass(20, 30))
        spec.add(HighPass(100))
        assert render(spec) == ("[0, 10]", "[20, 30]")


class TestBoundVariants:
    """Test that a pass range takes the variant its bounds imply."""

    def test_whole_axis_high_pass_is_all_range(self):
        assert from_ranges(HighPass(0)) is AllRange()
        assert from_ranges(HighPass(0)) is from_ranges(HighPass(0), LowPass(0))

    def test_whole_axis_band_added_to_aggregate(self):
        spec = from_ranges(BandPass(20, 30), BandPass(40, 50))
        assert spec.add(HighPass(0)) is AllRange()

    def test_band_from_zero_is_low_pass(self):
        assert from_ranges(BandPass(0, 5)) == LowPass(5)

    def test_disjoint_band_from_zero(self):
        direct = from_ranges(BandPass(20, 30), BandPass(0, 5))
        merged = from_ranges(BandPass(20, 30), BandPass(0, 3), BandPass(3, 5))
        assert direct == merged
        assert direct.ranges == (LowPass(5), BandPass(20, 30))

    def test_receiver_from_zero(self):
        spec = BandPass(0, 5).add(BandPass(20, 30))
        assert spec.ranges == (LowPass(5), BandPass(20, 30))

    def test_combined_pass_side(self):
        direct = from_ranges(BandStop(10, 20), BandPass(0, 5))
        merged = from_ranges(BandStop(10, 20), BandPass(0, 3), BandPass(3, 5))
        assert direct == merged
        assert direct.pass_side == LowPass(5)

    def test_whole_axis_conflicts_with_stop(self):
        with pytest.raises(RangeConflictError):
            from_ranges(BandStop(10, 20), HighPass(0))

    @hypothesis.given(
        hypothesis.strategies.lists(pass_ranges(), min_size=1, max_size=8)
    )
    def test_shape_order_independent(self, ranges):
        assert from_ranges(*ranges) == from_ranges(*reversed(ranges))


class TestCombined:
    """Test adding to combined specifications."""

    def test_conflict_symmetry(self):
        spec = from_ranges(BandPass(20, 30), HighPass(10000))

        accepted = spec.add(BandStop(35, 38))
        assert render(accepted.stop_side) == ("stop:[35, 38]",)

        with pytest.raises(RangeConflictError) as excinfo:
            spec.add(BandStop(10, 2000))
        assert (excinfo.value.low, excinfo.value.high) == (20.0, 30.0)
        assert "[20, 30]" in str(excinfo.value)

        with pytest.raises(RangeConflictError) as excinfo:
            accepted.add(BandStop(10, 2000))
        assert (excinfo.value.low, excinfo.value.high) == (20.0, 30.0)

    def test_pass_conflicting_with_stop_side(self):
        spec = from_ranges(LowPass(10), BandStop(35, 38))
        with pytest.raises(RangeConflictError) as excinfo:
            spec.add(BandPass(30, 36))
        assert (excinfo.value.low, excinfo.value.high) == (35.0, 36.0)

    def test_failed_add_keeps_previous_handle(self):
        spec = from_ranges(LowPass(10), BandStop(35, 38))
        before = render(spec)
        with pytest.raises(RangeConflictError):
            spec.add(BandStop(0, 100))
        assert render(spec) == before

    def test_all_range_rejected(self):
        spec = from_ranges(LowPass(10), BandStop(35, 38), BandStop(50, 60))
        with pytest.raises(RangeConflictError) as excinfo:
            spec.add(AllRange())
        assert (excinfo.value.low, excinfo.value.high) == (35.0, 38.0)

    def test_pass_merge_inside_combined(self):
        spec = from_ranges(LowPass(10), BandStop(35, 38), BandPass(5, 20))
        assert spec.pass_side == LowPass(20)
        assert spec.stop_side == BandStop(35, 38)


class TestAllRange:
    """Test the absorbing whole-axis range."""

    @hypothesis.given(pass_ranges())
    def test_absorbs_pass(self, p):
        assert AllRange().add(p) is AllRange()

    @hypothesis.given(band_stop_ranges())
    def test_rejects_stop(self, s):
        with pytest.raises(RangeConflictError) as excinfo:
            AllRange().add(s)
        assert (excinfo.value.low, excinfo.value.high) == (s.low, s.high)

    @hypothesis.given(band_stop_ranges())
    def test_stop_rejects_all_range(self, s):
        with pytest.raises(RangeConflictError) as excinfo:
            s.add(AllRange())
        assert (excinfo.value.low, excinfo.value.high) == (s.low, s.high)


class TestMergeClosure:
    """Test that merged specifications stay sorted and disjoint."""

    @staticmethod
    def _check_closure(spec, inputs):
        members = spec.ranges
        for x, y in zip(members, members[1:]):
            assert compare_ranges(x, y) == LESS
        for r in inputs:
            assert any(m.low <= r.low and r.high <= m.high for m in members)
        lows = {r.low for r in inputs}
        highs = {r.high for r in inputs}
        for m in members:
            assert m.low in lows
            assert m.high in highs

    @hypothesis.given(
        hypothesis.strategies.lists(pass_ranges(), min_size=1, max_size=12)
    )
    def test_pass(self, ranges):
        self._check_closure(from_ranges(*ranges), ranges)

    @hypothesis.given(
        hypothesis.strategies.lists(band_stop_ranges(), min_size=1, max_size=12)
    )
    def test_stop(self, ranges):
        self._check_closure(from_ranges(*ranges), ranges)

    @hypothesis.given(
        hypothesis.strategies.lists(pass_ranges(), min_size=1, max_size=8)
    )
    def test_pass_order_independent(self, ranges):
        forward = from_ranges(*ranges)
        backward = from_ranges(*reversed(ranges))
        assert render(forward) == render(backward)

    @hypothesis.given(
        hypothesis.strategies.lists(band_stop_ranges(), min_size=1, max_size=8)
    )
    def test_stop_order_independent(self, ranges):
        forward = from_ranges(*ranges)
        backward = from_ranges(*reversed(ranges))
        assert forward == backward


class TestOrderIndependence:
    """Test that insertion order does not change the final specification."""

    @pytest.mark.parametrize(
        "ranges",
        list(
            itertools.permutations(
                [LowPass(10), BandPass(20, 30), HighPass(10000), BandStop(35, 38)]
            )
        ),
    )
    def test_final_shape(self, ranges):
        assert render(from_ranges(*ranges)) == (
            "[0, 10]",
            "[20, 30]",
            "[10000, inf)",
            "stop:[35, 38]",
        )


class TestUnsupported:
    """Test rejection of unknown shapes."""

    def test_non_range_argument(self):
        with pytest.raises(UnsupportedVariantError):
            add(LowPass(1), "[0, 10]")

    def test_unknown_specification(self):
        with pytest.raises(UnsupportedVariantError):
            add([LowPass(1)], LowPass(2))

    def test_is_type_error(self):
        with pytest.raises(TypeError):
            from_ranges(None)
