import pytest

from reconviz.constants import ARC_KIND
from reconviz.error import ConfigurationError, InvalidRegionError
from reconviz.file_io import (
    read_annotations,
    read_copy_number,
    read_cytobands,
    read_genes,
    read_regions,
    read_structural_variants,
)
from reconviz.layout import build_profile_layout

from ..util import get_data, settings


@pytest.fixture(scope='module')
def inputs():
    return {
        'regions': read_regions(get_data('regions.tab')),
        'copy_number': read_copy_number(get_data('copy_number.tab')),
        'svs': read_structural_variants(get_data('svs_paired.tab')),
        'cytobands': read_cytobands(get_data('cytoBand.txt')),
        'genes': read_genes(get_data('genes.tab')),
        'annotations': read_annotations(get_data('annotations.tab')),
    }


class TestBuildProfileLayout:
    def test_all_layers(self, inputs):
        layout = build_profile_layout(settings=settings(label_interchr_SV=True), **inputs)
        assert len(layout.axis) == 3
        # the chr3 segment is outside the regions
        assert len(layout.segments) == 5
        assert [arc.kind for arc in layout.arcs] == [ARC_KIND.INTER, ARC_KIND.INTRA, ARC_KIND.PARTIAL]
        assert layout.arcs[-1].label == 'chr2:10,000,000'
        assert {band.chr for band in layout.bands} == {'chr9', 'chr10', 'chr17'}
        assert [gene.name for gene in layout.genes] == ['PAX5', 'RET', 'NCOA4', 'TP53']
        assert len(layout.annotations) == 5
        assert layout.has_annotations
        assert [name for name, _, _ in layout.chromosome_labels] == ['chr9', 'chr10', 'chr17']
        assert len(layout.sv_labels) == 4

    def test_copy_number_ceiling(self, inputs):
        config = settings()
        layout = build_profile_layout(inputs['regions'], config, copy_number=inputs['copy_number'])
        high = [seg for seg in layout.segments if seg.total_cn == 20]
        assert len(high) == 1
        assert high[0].clipped
        assert high[0].y_total == pytest.approx(config.cn_height)
        assert all([seg.y_total <= config.cn_height for seg in layout.segments])

    def test_optional_layers_omitted(self, inputs):
        layout = build_profile_layout(inputs['regions'], settings())
        assert layout.segments == []
        assert layout.arcs == []
        assert layout.bands == []
        assert layout.genes == []
        assert not layout.has_annotations

    def test_fixed_annotation_range(self, inputs):
        layout = build_profile_layout(
            inputs['regions'], settings(ann_y_range='0,1'), annotations=inputs['annotations']
        )
        assert layout.annotation_range == (0, 1)
        assert [p.clamped for p in layout.annotations] == [False, False, False, False, True]

    def test_deterministic(self, inputs):
        first = build_profile_layout(settings=settings(), **inputs)
        second = build_profile_layout(settings=settings(), **inputs)
        assert first.segments == second.segments
        assert [a.endpoints for a in first.arcs] == [a.endpoints for a in second.arcs]

    def test_empty_regions(self):
        with pytest.raises(InvalidRegionError):
            build_profile_layout([], settings())

    def test_gap_too_wide(self, inputs):
        with pytest.raises(ConfigurationError):
            build_profile_layout(inputs['regions'], settings(width=20, region_gap=10))

    def test_negative_label_offset(self):
        with pytest.raises(ConfigurationError):
            build_profile_layout(['chr10:40000000-55000000'], settings(pos_SVtype_description=-5))
