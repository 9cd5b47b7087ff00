import pytest

from reconviz.axis import build_axis, nice_step, tick_label
from reconviz.error import ConfigurationError, InvalidRegionError, NotInViewportError
from reconviz.region import Region

MULTI = ['chr9:30000000-40000000', 'chr10:40000000-60000000', 'chr17:0-15000000']


class TestBuildAxis:
    def test_empty(self):
        with pytest.raises(InvalidRegionError):
            build_axis([])

    def test_start_equal_end(self):
        with pytest.raises(InvalidRegionError):
            build_axis([('chr1', 100, 100)])

    def test_single_region_fills_width(self):
        axis = build_axis([('chr1', 0, 1000)], width=1000, region_gap=10)
        assert axis.scale == 1
        assert axis.slot(0) == (0, 1000)

    def test_gap_between_regions(self):
        axis = build_axis([('chr1', 0, 1000), ('chr2', 0, 1000)], width=1010, region_gap=10)
        assert axis.scale == 0.5
        assert axis.slot(0) == (0, 500)
        assert axis.slot(1) == (510, 1010)

    def test_slots_proportional_to_length(self):
        axis = build_axis(MULTI, width=1000, region_gap=10)
        widths = [right - left for left, right in axis.region_boundaries()]
        assert widths[1] == pytest.approx(2 * widths[0])
        assert widths[2] == pytest.approx(1.5 * widths[0])
        assert axis.region_boundaries()[-1][1] == pytest.approx(1000)

    def test_slots_do_not_overlap_and_keep_order(self):
        axis = build_axis(MULTI + ['chr9:0-1000000'], width=800, region_gap=5)
        bounds = axis.region_boundaries()
        for (_, prev_right), (next_left, _) in zip(bounds, bounds[1:]):
            assert next_left == pytest.approx(prev_right + 5)

    def test_idempotent(self):
        first = build_axis(MULTI, width=1000, region_gap=10)
        second = build_axis(MULTI, width=1000, region_gap=10)
        assert first.offsets == second.offsets
        assert first.scale == second.scale
        assert first == second

    def test_invalid_width(self):
        with pytest.raises(ConfigurationError):
            build_axis(MULTI, width=0)

    def test_negative_gap(self):
        with pytest.raises(ConfigurationError):
            build_axis(MULTI, region_gap=-1)

    def test_gaps_consume_width(self):
        with pytest.raises(ConfigurationError):
            build_axis(MULTI, width=20, region_gap=10)


class TestMap:
    def test_boundaries_round_trip(self):
        axis = build_axis(MULTI, width=1000, region_gap=10)
        for index, region in enumerate(axis.regions):
            left, right = axis.slot(index)
            assert axis.map(region.chr, region.start) == (index, pytest.approx(left))
            assert axis.map(region.chr, region.end) == (index, pytest.approx(right))

    def test_monotonic_within_region(self):
        axis = build_axis(MULTI, width=1000, region_gap=10)
        xs = [axis.map('chr10', pos).x for pos in range(40000000, 60000001, 1000000)]
        assert all([a < b for a, b in zip(xs, xs[1:])])

    def test_chr_prefix_insensitive(self):
        axis = build_axis(MULTI)
        assert axis.map('10', 50000000) == axis.map('chr10', 50000000)

    def test_outside(self):
        axis = build_axis(MULTI)
        assert axis.map('chr10', 1) is None
        assert axis.map('chr1', 35000000) is None
        assert not axis.contains('chr1', 35000000)

    def test_convert_pos_raises(self):
        axis = build_axis(MULTI)
        with pytest.raises(NotInViewportError):
            axis.convert_pos('chr10', 1)
        with pytest.raises(IndexError):
            axis.convert_pos('chr10', 1)

    def test_same_chromosome_twice(self):
        axis = build_axis(['chr1:0-100', 'chr2:0-100', 'chr1:1000-1100'], width=320, region_gap=10)
        assert axis.map('chr1', 50).region_index == 0
        assert axis.map('chr1', 1050).region_index == 2
        assert axis.map('chr1', 500) is None

    def test_reversed_region_order(self):
        axis = build_axis(['chr2:0-100', 'chr1:0-100'], width=210, region_gap=10)
        assert axis.map('chr1', 0).x > axis.map('chr2', 100).x

    def test_overlap_first_region_wins(self):
        axis = build_axis(['chr1:0-1000', 'chr1:500-1500'], width=2010, region_gap=10)
        assert axis.map('chr1', 700).region_index == 0
        assert axis.map('chr1', 1200).region_index == 1


class TestClip:
    def test_spanning_regions(self):
        axis = build_axis(['chr1:0-1000', 'chr1:2000-3000'], width=2010, region_gap=10)
        pieces = axis.clip('chr1', 500, 2500)
        assert len(pieces) == 2
        assert pieces[0].region_index == 0
        assert pieces[0].x_start == pytest.approx(axis.map('chr1', 500).x)
        assert pieces[0].x_end == pytest.approx(axis.slot(0)[1])
        assert pieces[1].x_start == pytest.approx(axis.slot(1)[0])
        assert pieces[1].x_end == pytest.approx(axis.map('chr1', 2500).x)

    def test_between_regions(self):
        axis = build_axis(['chr1:0-1000', 'chr1:2000-3000'], width=2010, region_gap=10)
        assert axis.clip('chr1', 1200, 1800) == []

    def test_overlapping_regions_not_drawn_twice(self):
        axis = build_axis(['chr1:0-1000', 'chr1:500-1500'], width=2010, region_gap=10)
        pieces = axis.clip('chr1', 0, 1500)
        assert [(p.region_index, p.genomic.start, p.genomic.end) for p in pieces] == [(0, 0, 1000), (1, 1001, 1500)]

    def test_contained_in_earlier_region(self):
        axis = build_axis(['chr1:0-1000', 'chr1:500-1500'], width=2010, region_gap=10)
        pieces = axis.clip('chr1', 600, 700)
        assert [p.region_index for p in pieces] == [0]


class TestLabelsAndTicks:
    def test_chromosome_labels_merge_consecutive(self):
        axis = build_axis(['chr1:0-100', 'chr1:200-300', 'chr2:0-100', 'chr1:500-600'], width=430, region_gap=10)
        labels = axis.chromosome_labels()
        assert [name for name, _, _ in labels] == ['chr1', 'chr2', 'chr1']
        assert labels[0][1] == 0
        assert labels[0][2] == pytest.approx(axis.slot(1)[1])

    def test_ticks_inside_regions(self):
        axis = build_axis(MULTI)
        ticks = axis.ticks()
        assert ticks
        for tick in ticks:
            region = axis.regions[tick.region_index]
            assert region.start <= tick.pos <= region.end
        assert '35' in [t.label for t in ticks if t.region_index == 0]

    def test_small_region_ticks_distinct(self):
        axis = build_axis(['chr1:140000000-140000800'])
        labels = [t.label for t in axis.ticks()]
        assert labels == ['140', '140.0002', '140.0004', '140.0006', '140.0008']

    def test_tick_label(self):
        assert tick_label(45000000, 5000000) == '45'
        assert tick_label(45500000, 500000) == '45.5'
        assert tick_label(140000050, 50) == '140.00005'
        assert tick_label(7, 1) == '0.000007'

    def test_nice_step(self):
        assert nice_step(0.5) == 1
        assert nice_step(3) == 5
        assert nice_step(1500000) == 2000000
        assert nice_step(10) == 10

    def test_repr(self):
        axis = build_axis([Region('chr1', 0, 10)])
        assert repr(axis) == 'CompositeAxis(chr1:0-10, width=1000)'
