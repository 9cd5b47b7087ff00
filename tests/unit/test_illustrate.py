from collections import namedtuple

import pytest
from svgwrite import Drawing

from reconviz.constants import SVTYPE
from reconviz.error import ConfigurationError
from reconviz.file_io import read_copy_number, read_cytobands, read_genes, read_regions, read_structural_variants
from reconviz.illustrate.constants import DEFAULTS, DiagramSettings, cast_range
from reconviz.illustrate.diagram import draw_rearrangement_profile, legend_swatches
from reconviz.illustrate.elements import arc_path, cn_ticks
from reconviz.illustrate.scatter import thin_points
from reconviz.illustrate.util import fill_kwargs, split_alpha
from reconviz.layout import build_profile_layout
from reconviz.overlay import AnnotationPoint, PlotPoint

from ..util import get_data


class TestDiagramSettings:
    def test_defaults(self):
        ds = DiagramSettings()
        assert ds.width == 1000
        assert ds.max_cn == 4
        assert ds.sv_track_spacing == pytest.approx(50)
        assert ds.sv_class_color[SVTYPE.DEL] == '#4DBBD5'

    def test_dotted_alias(self):
        ds = DiagramSettings(**{'max.cn': '6', 'label.interchr.SV': 'true'})
        assert ds.max_cn == 6
        assert ds.label_interchr_SV is True

    def test_unknown_option(self):
        with pytest.raises(ConfigurationError):
            DiagramSettings(not_an_option=1)

    def test_option_given_twice(self):
        with pytest.raises(ConfigurationError):
            DiagramSettings(**{'max_cn': 5, 'max.cn': 6})

    def test_negative_size(self):
        with pytest.raises(ConfigurationError):
            DiagramSettings(cn_height=-1)
        with pytest.raises(ConfigurationError):
            DiagramSettings(size_title=-1)

    def test_negative_label_offset(self):
        with pytest.raises(ConfigurationError) as err:
            DiagramSettings(**{'pos.SVtype.description': -5})
        assert 'pos_SVtype_description' in str(err.value)
        assert DEFAULTS.define('pos_SVtype_description') in str(err.value)

    def test_bad_value(self):
        with pytest.raises(ConfigurationError):
            DiagramSettings(width='wide')
        with pytest.raises(ConfigurationError):
            DiagramSettings(ann_density=2)
        with pytest.raises(ConfigurationError):
            DiagramSettings(width=None)

    def test_nullable(self):
        assert DiagramSettings(title='null').title is None
        assert DiagramSettings(ann_y_range=[0, 2]).ann_y_range == (0, 2)

    def test_immutable(self):
        ds = DiagramSettings()
        with pytest.raises(AttributeError):
            ds.width = 10

    def test_define(self):
        assert DEFAULTS.define('max.cn') == DEFAULTS.define('max_cn')
        assert 'ceiling' in DEFAULTS.define('max_cn')
        assert 'max_cn' in DEFAULTS
        assert 'max.cn' in DEFAULTS
        assert DEFAULTS.max_cn == 4

    def test_cast_range(self):
        assert cast_range('-1,1') == (-1, 1)
        with pytest.raises(ValueError):
            cast_range('1')


class TestColorHelpers:
    def test_split_alpha(self):
        assert split_alpha('#00000080') == ('#000000', 128 / 255)
        assert split_alpha('#000000') == ('#000000', 1)

    def test_fill_kwargs(self):
        assert fill_kwargs('red') == {'fill': 'red'}
        assert fill_kwargs('#FF000000', 'stroke') == {'stroke': '#FF0000', 'stroke_opacity': 0}


class TestElements:
    def test_arc_path(self):
        Arc = namedtuple('Arc', ['endpoints', 'control'])
        assert arc_path(Arc(((10, 350), (20.5, 350)), (15.25, 360))) == 'M 10 -350 Q 15.25 -360 20.5 -350'

    def test_cn_ticks(self):
        assert cn_ticks(6) == [0, 2, 4, 6]
        assert cn_ticks(1) == [0, 1]

    def test_thin_points(self):
        points = [
            PlotPoint(0, 10, 10, 0.1, False),
            PlotPoint(0, 10.1, 10, 0.1, False),
            PlotPoint(0, 50, 10, 0.1, False),
        ]
        assert thin_points(points, 1, 0.5) == [points[0], points[2]]
        assert thin_points(points, 1, 1) == points

    def test_legend_swatches(self):
        labels = [label for _, label in legend_swatches(DiagramSettings())]
        assert labels[:2] == ['total copy number', 'minor copy number']
        assert 'DEL (Deletion-like)' in labels


class TestDrawRearrangementProfile:
    @pytest.fixture(scope='class')
    def layout(self):
        return build_profile_layout(
            read_regions(get_data('regions.tab')),
            DiagramSettings(label_interchr_SV=True, title='sample 1'),
            copy_number=read_copy_number(get_data('copy_number.tab')),
            svs=read_structural_variants(get_data('svs_paired.tab')),
            cytobands=read_cytobands(get_data('cytoBand.txt')),
            genes=read_genes(get_data('genes.tab')),
            annotations=[AnnotationPoint('chr9', 35000000, 0.5), AnnotationPoint('chr10', 45000000, 0.7)],
        )

    def test_drawing(self, layout):
        canvas, legend = draw_rearrangement_profile(layout)
        assert isinstance(canvas, Drawing)
        assert canvas.attribs['height'] > 0
        assert set(legend.values()) >= {'#4DBBD5', '#E64B35', '#00A087', '#3C5488'}
        svg = canvas.tostring()
        assert 'chr2:10,000,000' in svg
        assert 'sample 1' in svg
        assert 'TP53' in svg
        assert 'legend' in svg

    def test_without_legend(self, layout):
        canvas, legend = draw_rearrangement_profile(layout, show_legend=False)
        assert 'class="legend"' not in canvas.tostring()
        assert legend

    def test_regions_only(self):
        layout = build_profile_layout(['chr1:0-1000'], DiagramSettings())
        canvas, _ = draw_rearrangement_profile(layout)
        assert canvas.attribs['height'] > 0
