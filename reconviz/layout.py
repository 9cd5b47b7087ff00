"""
The layout pipeline: builds the composite axis and maps every layer onto it. Nothing here draws or reads files
"""
from typing import Iterable, List, NamedTuple, Optional, Tuple

from .arcs import ArcSpec, SvClassLabel, layout_arcs, sv_class_labels
from .axis import AxisTick, CompositeAxis, build_axis
from .breakpoint import BreakendPair
from .copy_number import CopyNumberSegment, PlotSegment, map_segments
from .karyotype import CytobandInterval, PlotBand, map_bands
from .overlay import AnnotationPoint, GeneLocus, PlotGene, PlotPoint, annotation_range, map_annotations, map_genes
from .util import logger


class ProfileLayout(NamedTuple):
    axis: CompositeAxis
    settings: object
    segments: List[PlotSegment]
    arcs: List[ArcSpec]
    sv_labels: List[SvClassLabel]
    bands: List[PlotBand]
    genes: List[PlotGene]
    annotations: List[PlotPoint]
    annotation_range: Optional[Tuple[float, float]]
    ticks: List[AxisTick]
    chromosome_labels: List[Tuple[str, float, float]]

    @property
    def has_annotations(self) -> bool:
        return self.annotation_range is not None


def build_profile_layout(
    regions: Iterable,
    settings,
    copy_number: Iterable[CopyNumberSegment] = (),
    svs: Iterable[BreakendPair] = (),
    cytobands: Optional[Iterable[CytobandInterval]] = None,
    genes: Optional[Iterable[GeneLocus]] = None,
    annotations: Optional[Iterable[AnnotationPoint]] = None,
) -> ProfileLayout:
    """
    lay out a rearrangement profile

    Args:
        regions: the ordered regions to display
        settings (DiagramSettings): the drawing options
        copy_number: copy number segments
        svs: structural variants
        cytobands: chromosome bands of the genome build, the karyotype track is omitted when not given
        genes: genes to mark
        annotations: values for the annotation panel, the panel is omitted when not given

    Raises:
        InvalidRegionError: the region model is empty or invalid
        ConfigurationError: the options cannot be used to build the layout
    """
    axis = build_axis(regions, width=settings.width, region_gap=settings.region_gap)
    logger.info(f'built the composite axis for {len(axis)} region(s) ({axis.scale:.3g} px/bp)')

    segments = map_segments(copy_number, axis, settings.max_cn, vertical_scale=settings.cn_height / settings.max_cn)
    arcs = layout_arcs(svs, axis, settings)
    bands = map_bands(cytobands, axis) if cytobands is not None else []
    plot_genes = []
    if genes is not None:
        plot_genes = map_genes(
            genes, axis, settings.scale_separation_gene_labels * axis.width, settings.gene_label_tier_height
        )

    plot_points = []
    y_range = None
    if annotations is not None:
        annotations = list(annotations)
        y_range = settings.ann_y_range
        if y_range is None:
            y_range = annotation_range([p.y for p in annotations if axis.contains(p.chr, p.pos)])
        plot_points = map_annotations(annotations, axis, settings.ann_height, y_range=y_range)

    return ProfileLayout(
        axis,
        settings,
        segments,
        arcs,
        sv_class_labels(axis, settings),
        bands,
        plot_genes,
        plot_points,
        y_range,
        axis.ticks(),
        axis.chromosome_labels(),
    )
