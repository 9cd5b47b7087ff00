import argparse

from colour import Color

from ..constants import GIEMSA_STAIN, SVTYPE, float_fraction
from ..error import ConfigurationError
from ..util import cast_boolean, cast_null


def cast_range(value):
    """
    cast an input to a (min, max) pair of floats

    Example:
        >>> cast_range('0,10')
        (0.0, 10.0)
    """
    if isinstance(value, str):
        value = value.split(',')
    low, high = [float(v) for v in value]
    return (low, high)


class OptionNamespace:
    """
    holds the documented defaults for the drawing options. Each option may be given under its own name or
    under any of its aliases (ex. the dotted form max.cn)
    """

    def __init__(self):
        self._values = {}
        self._defns = {}
        self._types = {}
        self._nullable = set()
        self._aliases = {}

    def add(self, attr, value, defn=None, cast_type=None, nullable=False, aliases=None):
        """
        Add an option to the name space

        Args:
            attr (str): name of the option
            value: the default value
            defn (str): the definition, used in help menus
            cast_type (callable): the function used to cast input values
            nullable (bool): True if the option can have a None value
            aliases (list of str): alternate names accepted for the option
        """
        self._values[attr] = value
        self._types[attr] = cast_type if cast_type else type(value)
        if defn:
            self._defns[attr] = defn
        if nullable:
            self._nullable.add(attr)
        for alias in aliases or []:
            self._aliases[alias] = attr

    def __contains__(self, attr):
        return attr in self._values or attr in self._aliases

    def __getitem__(self, attr):
        return self._values[self.resolve(attr)]

    def __getattr__(self, attr):
        if attr.startswith('_'):
            raise AttributeError(attr)
        try:
            return self[attr]
        except ConfigurationError:
            raise AttributeError(attr)

    def keys(self):
        return list(self._values.keys())

    def items(self):
        return list(self._values.items())

    def define(self, attr):
        return self._defns.get(self.resolve(attr), '')

    def resolve(self, attr):
        """
        Returns:
            str: the option name for an option name or alias

        Raises:
            ConfigurationError: the name is not a recognized option
        """
        if attr in self._values:
            return attr
        if attr in self._aliases:
            return self._aliases[attr]
        raise ConfigurationError(f'unrecognized option: {attr}')

    def cast(self, attr, value):
        """
        cast an input value to the type of the option

        Raises:
            ConfigurationError: the value cannot be cast
        """
        attr = self.resolve(attr)
        if value is None:
            if attr in self._nullable:
                return None
            raise ConfigurationError(f'option {attr} cannot be None')
        if attr in self._nullable:
            try:
                return cast_null(value)
            except TypeError:
                pass
        cast_type = self._types[attr]
        try:
            if cast_type == bool:
                return cast_boolean(value)
            return cast_type(value)
        except (TypeError, ValueError, argparse.ArgumentTypeError) as err:
            raise ConfigurationError(f'invalid value for option {attr}: {value!r} ({err})')


DEFAULTS = OptionNamespace()
DEFAULTS.add('width', 1000, defn='The drawing width in pixels, including the gaps between regions', cast_type=float)
DEFAULTS.add('cn_height', 300, defn='The height (in pixels) of the copy number panel', cast_type=float)
DEFAULTS.add('region_gap', 10, defn='The horizontal gap (in pixels) between consecutive regions', cast_type=float)
DEFAULTS.add(
    'max_cn', 4, defn='Copy number values above this ceiling are drawn at the ceiling', cast_type=float,
    aliases=['max.cn'],
)
DEFAULTS.add(
    'scaling_cn_SVs', 1 / 6,
    defn='Spacing between the rearrangement class tracks as a fraction of the copy number panel height',
    cast_type=float, aliases=['scaling.cn.SVs'],
)
DEFAULTS.add(
    'curvature_intrachr_SVs', -0.15,
    defn='Curvature of arcs joining breakends in the same region. Negative values bend the arc upwards',
    cast_type=float, aliases=['curvature.intrachr.SVs'],
)
DEFAULTS.add(
    'curvature_interchr_SVs', 0.08,
    defn='Curvature of arcs joining breakends in different regions, and of stubs of partially displayed variants',
    cast_type=float, aliases=['curvature.interchr.SVs'],
)
DEFAULTS.add(
    'upper_limit_karyotype', -0.1,
    defn='Top of the karyotype track as a fraction of the copy number panel height (negative is below the baseline)',
    cast_type=float, aliases=['upper.limit.karyotype'],
)
DEFAULTS.add(
    'karyotype_rel_size', 0.1, defn='Height of the karyotype track as a fraction of the copy number panel height',
    cast_type=float, aliases=['karyotype.rel.size'],
)
DEFAULTS.add(
    'label_interchr_SV', False,
    defn='Label stubs of partially displayed variants with the position of the breakend that is not displayed',
    cast_type=bool, aliases=['label.interchr.SV'],
)
DEFAULTS.add(
    'scale_separation_SV_type_labels', 1 / 23,
    defn='Minimum horizontal separation of labels in the same tier as a fraction of the drawing width',
    cast_type=float, aliases=['scale.separation.SV.type.labels'],
)
DEFAULTS.add(
    'pos_SVtype_description', 1000000,
    defn='Genomic offset (bp) from the start of the first region at which the rearrangement class names are written',
    cast_type=int, aliases=['pos.SVtype.description'],
)
DEFAULTS.add(
    'ann_rel_size', 0.4, defn='Height of the annotation panel as a fraction of the copy number panel height',
    cast_type=float, aliases=['ann.rel.size'],
)
DEFAULTS.add('ann_dot_size', 1, defn='Radius (in pixels) of the annotation points', cast_type=float, aliases=['ann.dot.size'])
DEFAULTS.add('ann_dot_col', 'black', defn='Color of the annotation points', aliases=['ann.dot.col'])
DEFAULTS.add('ann_y_title', 'Annotation', defn='Title of the annotation panel y axis', aliases=['ann.y.title'])
DEFAULTS.add(
    'ann_y_range', None, defn='The (min,max) range of the annotation panel, defaults to the range of the values',
    cast_type=cast_range, nullable=True, aliases=['ann.y.range'],
)
DEFAULTS.add(
    'ann_density', 1.0,
    defn='Maximum fraction of an annotation point that may be covered by the previous point before it is skipped',
    cast_type=float_fraction, aliases=['ann.density'],
)
DEFAULTS.add(
    'ann_ymax_color', '#FF0000', defn='Color of annotation points clamped to the edge of the range',
    aliases=['ann.ymax.color'],
)
DEFAULTS.add('color_total_cn', '#000000', defn='Color of the total copy number segments', aliases=['color.total.cn'])
DEFAULTS.add('color_minor_cn', '#8491B4B2', defn='Color of the minor copy number segments', aliases=['color.minor.cn'])
DEFAULTS.add('title', None, defn='The drawing title', cast_type=str, nullable=True)
DEFAULTS.add('size_title', 16, defn='Font size of the title', cast_type=float, aliases=['size.title'])
DEFAULTS.add('size_chr_labels', 12, defn='Font size of the chromosome labels', cast_type=float, aliases=['size.chr.labels'])
DEFAULTS.add('size_gene_label', 9, defn='Font size of the gene labels', cast_type=float, aliases=['size.gene.label'])
DEFAULTS.add('color_gene_label', '#000000', defn='Color of the gene labels', aliases=['color.gene.label'])
DEFAULTS.add('color_DEL', '#4DBBD5', defn='Color of deletion-like rearrangements', aliases=['color.DEL'])
DEFAULTS.add('color_DUP', '#E64B35', defn='Color of duplication-like rearrangements', aliases=['color.DUP'])
DEFAULTS.add('color_h2hINV', '#00A087', defn='Color of head-to-head inversions', aliases=['color.h2hINV'])
DEFAULTS.add('color_t2tINV', '#3C5488', defn='Color of tail-to-tail inversions', aliases=['color.t2tINV'])
DEFAULTS.add(
    'sv_stub_length', 0.03,
    defn='Horizontal length of the stub drawn for partially displayed variants as a fraction of the drawing width',
    cast_type=float,
)
DEFAULTS.add('sv_label_tier_height', 12, defn='Vertical distance (in pixels) between label tiers', cast_type=float)
DEFAULTS.add(
    'scale_separation_gene_labels', 1 / 23,
    defn='Minimum horizontal separation of gene labels in the same tier as a fraction of the drawing width',
    cast_type=float,
)

NON_NEGATIVE_OPTIONS = [
    'region_gap',
    'scaling_cn_SVs',
    'karyotype_rel_size',
    'scale_separation_SV_type_labels',
    'pos_SVtype_description',
    'ann_rel_size',
    'ann_dot_size',
    'size_title',
    'size_chr_labels',
    'size_gene_label',
    'sv_stub_length',
    'sv_label_tier_height',
    'scale_separation_gene_labels',
]
POSITIVE_OPTIONS = ['width', 'cn_height', 'max_cn']


class DiagramSettings:
    """
    holds settings related to colors/sizes for the drawing. Settings are fixed once created
    """

    def __init__(self, **kwargs):
        """
        Args:
            **kwargs: option values by option name or alias

        Raises:
            ConfigurationError: an option is not recognized, given twice, or has an invalid value
        """
        inputs = {}
        inputs.update(DEFAULTS.items())
        given = set()
        for arg, val in kwargs.items():
            attr = DEFAULTS.resolve(arg)
            if attr in given:
                raise ConfigurationError(f'option {attr} was given more than once (as {arg})')
            given.add(attr)
            inputs[attr] = DEFAULTS.cast(attr, val)
        for arg, val in inputs.items():
            object.__setattr__(self, arg, val)

        for attr in POSITIVE_OPTIONS:
            if getattr(self, attr) <= 0:
                raise ConfigurationError(
                    f'option {attr} must be positive: {getattr(self, attr)} ({DEFAULTS.define(attr)})'
                )
        for attr in NON_NEGATIVE_OPTIONS:
            if getattr(self, attr) < 0:
                raise ConfigurationError(
                    f'option {attr} must not be negative: {getattr(self, attr)} ({DEFAULTS.define(attr)})'
                )

        derived = {}
        derived['left_margin'] = 80
        derived['right_margin'] = 20
        derived['top_margin'] = 20
        derived['bottom_margin'] = 20
        derived['inner_margin'] = 20
        derived['padding'] = 5
        derived['label_color'] = '#000000'
        # removing unsupported attr: 'alignment-baseline:central;dominant-baseline:central;'
        derived['font_style'] = (
            'font-size:{font_size}px;font-weight:bold;alignment-baseline:baseline;'
            'text-anchor:{text_anchor};font-family: consolas, courier new, monospace'
        )
        # ratio for courier new which is wider than consolas, used for estimating width
        derived['font_width_height_ratio'] = 1229 / 2048
        derived['font_central_shift_ratio'] = 0.3

        derived['sv_track_spacing'] = self.cn_height * self.scaling_cn_SVs
        derived['sv_panel_height'] = derived['sv_track_spacing'] * (len(SVTYPE.values()) + 1)
        derived['sv_stroke_width'] = 1.5
        derived['sv_drop_line_dasharray'] = [2, 2]
        derived['sv_drop_line_opacity'] = 0.5
        derived['sv_class_label_font_size'] = self.size_gene_label
        derived['sv_class_color'] = {
            SVTYPE.DEL: self.color_DEL,
            SVTYPE.DUP: self.color_DUP,
            SVTYPE.H2HINV: self.color_h2hINV,
            SVTYPE.T2TINV: self.color_t2tINV,
        }

        derived['cn_stroke_width'] = 3
        derived['cn_grid_color'] = '#DDDDDD'
        derived['cn_ytick_font_size'] = 10
        derived['cn_y_title'] = 'Copy number'
        derived['region_border_color'] = '#999999'

        derived['karyotype_top'] = self.upper_limit_karyotype * self.cn_height
        derived['karyotype_height'] = self.karyotype_rel_size * self.cn_height
        derived['template_band_stroke_width'] = 0.5
        temp = [c.hex for c in Color('#ffffff').range_to(Color('#000000'), 7)]
        derived['template_band_fill'] = {
            GIEMSA_STAIN.ACEN: '#800000',
            GIEMSA_STAIN.GPOS25: temp[1],
            GIEMSA_STAIN.GPOS33: temp[2],
            GIEMSA_STAIN.GPOS50: temp[3],
            GIEMSA_STAIN.GPOS66: temp[4],
            GIEMSA_STAIN.GPOS75: temp[5],
            GIEMSA_STAIN.GPOS100: temp[6],
            GIEMSA_STAIN.GNEG: '#ffffff',
            GIEMSA_STAIN.GVAR: '#dcdcdc',
            GIEMSA_STAIN.STALK: '#708090',
        }
        derived['template_band_stroke'] = '#000000'
        derived['template_default_fill'] = '#ffffff'

        derived['chr_label_height'] = self.size_chr_labels * 2 + derived['padding']
        derived['gene_marker_height'] = 6
        derived['gene_marker_color'] = '#000000'
        derived['gene_label_tier_height'] = self.size_gene_label + 2

        derived['ann_height'] = self.ann_rel_size * self.cn_height
        derived['scatter_axis_font_size'] = 12
        derived['scatter_yaxis_tick_size'] = derived['padding']
        derived['scatter_ytick_font_size'] = 10

        derived['legend_swatch_size'] = 12
        derived['legend_font_size'] = 10
        derived['legend_swatch_stroke'] = '#000000'
        derived['legend_font_color'] = '#000000'
        derived['legend_border_stroke'] = '#000000'
        derived['legend_border_stroke_width'] = 1
        for attr, val in derived.items():
            object.__setattr__(self, attr, val)

    def __setattr__(self, attr, value):
        raise AttributeError(f'DiagramSettings cannot be modified ({attr})')
