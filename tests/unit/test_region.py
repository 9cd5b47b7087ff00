import logging

import pytest

from reconviz.error import InvalidRegionError
from reconviz.region import ReferenceName, Region, parse_region, validate_regions


class TestReferenceName:
    def test_chr_prefix_equivalence(self):
        assert ReferenceName('chr1') == '1'
        assert ReferenceName('1') == 'chr1'
        assert ReferenceName('chrX') != 'chrY'
        assert hash(ReferenceName('chr1')) == hash(ReferenceName('1'))

    def test_rank(self):
        names = ['chrY', '10', 'chr2', 'chrM', 'GL000220.1', 'chrX', '1']
        assert sorted(names, key=lambda n: ReferenceName(n).rank) == [
            '1',
            'chr2',
            '10',
            'chrX',
            'chrY',
            'chrM',
            'GL000220.1',
        ]


class TestRegion:
    def test_span(self):
        assert Region('chr1', 100, 200).span == 100

    def test_start_equal_end(self):
        with pytest.raises(InvalidRegionError):
            Region('chr1', 100, 100)

    def test_end_before_start(self):
        with pytest.raises(InvalidRegionError):
            Region('chr1', 200, 100)

    def test_negative_start(self):
        with pytest.raises(InvalidRegionError):
            Region('chr1', -1, 100)

    def test_non_integer(self):
        with pytest.raises(InvalidRegionError):
            Region('chr1', 'a', 100)

    def test_missing_chromosome(self):
        with pytest.raises(InvalidRegionError):
            Region('', 1, 100)

    def test_contains_position_is_inclusive(self):
        region = Region('chr10', 40, 55)
        assert region.contains_position('10', 40)
        assert region.contains_position('chr10', 55)
        assert not region.contains_position('chr10', 56)
        assert not region.contains_position('chr1', 45)

    def test_eq(self):
        assert Region('chr1', 1, 10) == Region('1', 1, 10)
        assert Region('chr1', 1, 10) != Region('chr1', 1, 11)

    def test_str(self):
        assert str(Region('chr1', 1, 10)) == 'chr1:1-10'


class TestParseRegion:
    def test_with_separators(self):
        assert parse_region('chr10:40,000,000-55,000,000') == Region('chr10', 40000000, 55000000)

    def test_plain(self):
        assert parse_region('X:1-100') == Region('X', 1, 100)

    def test_malformed(self):
        with pytest.raises(InvalidRegionError):
            parse_region('chr10:40000000')
        with pytest.raises(InvalidRegionError):
            parse_region('chr10')


class TestValidateRegions:
    def test_empty(self):
        with pytest.raises(InvalidRegionError):
            validate_regions([])

    def test_mixed_inputs(self):
        regions = validate_regions([Region('chr1', 0, 10), ('chr2', 5, 20), 'chr3:1-5'])
        assert regions == [Region('chr1', 0, 10), Region('chr2', 5, 20), Region('chr3', 1, 5)]

    def test_identical_regions(self):
        with pytest.raises(InvalidRegionError) as err:
            validate_regions(['chr1:1-100', 'chr2:1-100', 'chr1:1-100'])
        assert 'region #2' in str(err.value)
        assert 'region #0' in str(err.value)

    def test_degenerate_region_names_index(self):
        with pytest.raises(InvalidRegionError) as err:
            validate_regions([('chr1', 1, 100), ('chr2', 50, 50)])
        assert 'region #1' in str(err.value)

    def test_wrong_shape(self):
        with pytest.raises(InvalidRegionError):
            validate_regions([('chr1', 1)])

    def test_overlap_is_allowed_with_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger='reconviz'):
            regions = validate_regions(['chr1:1-100', 'chr1:50-150'])
        assert len(regions) == 2
        assert 'overlaps' in caplog.text

    def test_same_chromosome_repeated(self):
        regions = validate_regions(['chr1:1-100', 'chr2:1-100', 'chr1:500-600'])
        assert [str(r.chr) for r in regions] == ['chr1', 'chr2', 'chr1']
