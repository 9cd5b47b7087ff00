"""
Secondary layers drawn against the composite axis: gene markers and the scatter annotation track
"""
from typing import Iterable, List, NamedTuple, Optional, Tuple

from .axis import CompositeAxis
from .error import ConfigurationError
from .labels import stagger_labels
from .region import ReferenceName
from .util import logger


class GeneLocus:
    def __init__(self, name: str, chr: str, start: int, end: int):
        self.name = name
        self.chr = ReferenceName(chr)
        self.start = int(start)
        self.end = int(end)
        if self.end < self.start:
            raise ValueError('gene end cannot be before its start', name, start, end)

    @property
    def midpoint(self) -> int:
        return (self.start + self.end) // 2

    def __repr__(self):
        return 'GeneLocus({}, {}:{}-{})'.format(self.name, self.chr, self.start, self.end)


class AnnotationPoint(NamedTuple):
    chr: str
    pos: int
    y: float


class PlotGene(NamedTuple):
    name: str
    x: float
    region_index: int
    tier: int
    label_offset: float


class PlotPoint(NamedTuple):
    region_index: int
    x: float
    y: float
    value: float
    clamped: bool


def map_genes(
    genes: Iterable[GeneLocus], axis: CompositeAxis, min_separation: float, tier_height: float = 0
) -> List[PlotGene]:
    """
    place a marker for each gene at the axis position of its midpoint. Genes whose midpoint is not displayed
    are dropped. Labels closer than min_separation are moved to higher tiers, processing the genes in
    genome order

    Args:
        genes: the genes to mark
        axis: the composite axis
        min_separation: the minimum horizontal distance between labels on the same tier
        tier_height: vertical distance between label tiers
    """
    visible = []
    for gene in genes:
        pos = axis.map(gene.chr, gene.midpoint)
        if pos is None:
            logger.debug(f'gene {gene.name} is not in the displayed regions')
            continue
        visible.append(((gene.chr.rank, gene.midpoint, str(gene.name)), gene, pos))
    visible.sort(key=lambda item: item[0])
    tiers = stagger_labels([pos.x for _, _, pos in visible], min_separation)
    return [
        PlotGene(gene.name, pos.x, pos.region_index, tier, tier * tier_height)
        for (_, gene, pos), tier in zip(visible, tiers)
    ]


def annotation_range(values: List[float], pad: float = 0.05) -> Tuple[float, float]:
    """
    the automatic y range of the annotation track. A flat track is padded so that it has a non-zero height

    Example:
        >>> annotation_range([2, 2])
        (1.0, 3.0)
    """
    if not values:
        return (0.0, 1.0)
    ymin, ymax = min(values), max(values)
    if ymin == ymax:
        half = abs(ymin) * 0.5 if ymin else 0.5
        return (ymin - half, ymax + half)
    margin = (ymax - ymin) * pad
    return (ymin - margin, ymax + margin)


def map_annotations(
    points: Iterable[AnnotationPoint],
    axis: CompositeAxis,
    height: float,
    y_range: Optional[Tuple[float, float]] = None,
) -> List[PlotPoint]:
    """
    map the annotation points to the annotation sub-panel

    Args:
        points: the annotation values
        axis: the composite axis
        height: the height of the annotation sub-panel in plot units
        y_range: the (min, max) of the annotation values shown. Values outside this range are clamped to the
            panel edges and flagged. Defaults to the range of the displayed values

    Returns:
        plot points with y in [0, height]

    Raises:
        ConfigurationError: the height is negative or the range is empty
    """
    if height < 0:
        raise ConfigurationError(f'annotation panel height must not be negative: {height}')
    mapped = []
    for point in points:
        pos = axis.map(point.chr, point.pos)
        if pos is None:
            continue
        mapped.append((pos, float(point.y)))

    if y_range is None:
        ymin, ymax = annotation_range([y for _, y in mapped])
    else:
        ymin, ymax = [float(v) for v in y_range]
        if ymax <= ymin:
            raise ConfigurationError(f'annotation y range must be increasing: {y_range}')

    result = []
    for pos, value in mapped:
        clamped = value < ymin or value > ymax
        capped = min(max(value, ymin), ymax)
        result.append(PlotPoint(pos.region_index, pos.x, (capped - ymin) / (ymax - ymin) * height, value, clamped))
    logger.debug(f'mapped {len(result)} annotation point(s) to the range [{ymin:g}, {ymax:g}]')
    return result
