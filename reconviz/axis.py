"""
The composite axis: a single horizontal plot coordinate system built from an ordered list of regions.

A chromosome may appear zero, one or several times, in any order and at any zoom, so positions are
always resolved against the ordered region list rather than against a per-chromosome transform.
"""
import math
from typing import Iterable, List, NamedTuple, Optional, Tuple

from .error import ConfigurationError, NotInViewportError
from .interval import Interval
from .region import Region, validate_regions

DEFAULT_WIDTH = 1000
DEFAULT_REGION_GAP = 10


class AxisPosition(NamedTuple):
    region_index: int
    x: float


class ClippedInterval(NamedTuple):
    """the portion of a genomic feature drawn in a single region slot"""

    region_index: int
    genomic: Interval
    x_start: float
    x_end: float


class AxisTick(NamedTuple):
    region_index: int
    pos: int
    x: float
    label: str


class CompositeAxis:
    """
    holds the per-region plot slots. Every region gets a slot proportional to its genomic length and
    consecutive slots are separated by a fixed gap. The scale (plot units per bp) is shared by all regions
    """

    def __init__(self, regions: List[Region], width: float, region_gap: float, scale: float):
        self.regions: Tuple[Region, ...] = tuple(regions)
        self.width = width
        self.region_gap = region_gap
        self.scale = scale
        offsets = []
        pos = 0.0
        for region in self.regions:
            offsets.append(pos)
            pos += region.span * scale + region_gap
        self.offsets: Tuple[float, ...] = tuple(offsets)

    def __len__(self):
        return len(self.regions)

    def __eq__(self, other):
        for attr in ['regions', 'width', 'region_gap', 'scale', 'offsets']:
            if getattr(self, attr) != getattr(other, attr, None):
                return False
        return True

    def __repr__(self):
        return '{}({}, width={})'.format(
            self.__class__.__name__, ', '.join([str(r) for r in self.regions]), self.width
        )

    def slot(self, region_index: int) -> Tuple[float, float]:
        """the (left, right) plot edges of a region slot"""
        start = self.offsets[region_index]
        return (start, start + self.regions[region_index].span * self.scale)

    def region_boundaries(self) -> List[Tuple[float, float]]:
        return [self.slot(i) for i in range(len(self.regions))]

    def _to_plot(self, region_index: int, pos) -> float:
        return self.offsets[region_index] + (pos - self.regions[region_index].start) * self.scale

    def convert_pos(self, chr: str, pos) -> AxisPosition:
        """
        convert a genomic position to the composite axis

        Raises:
            NotInViewportError: the position is not inside any region
        """
        for index, region in enumerate(self.regions):
            if region.contains_position(chr, pos):
                return AxisPosition(index, self._to_plot(index, pos))
        raise NotInViewportError(f'{chr}:{pos}', 'is outside the displayed regions')

    def map(self, chr: str, pos) -> Optional[AxisPosition]:
        """
        convert a genomic position to the composite axis, returns None when the position is not displayed
        """
        try:
            return self.convert_pos(chr, pos)
        except NotInViewportError:
            return None

    def contains(self, chr: str, pos) -> bool:
        return any([r.contains_position(chr, pos) for r in self.regions])

    def clip(self, chr: str, start: int, end: int) -> List[ClippedInterval]:
        """
        intersect a genomic interval with every region

        Returns one entry per displayed piece, in region order. Where regions overlap, the earlier
        region claims the shared positions so nothing is drawn twice
        """
        feature = Interval(start, end)
        result = []
        for index, region in enumerate(self.regions):
            if region.chr != chr:
                continue
            overlap = Interval.intersection(feature, region)
            if overlap is None:
                continue
            pieces = [overlap]
            for prev in self.regions[:index]:
                if prev.chr != chr:
                    continue
                remaining = []
                for piece in pieces:
                    remaining.extend(piece - prev)
                pieces = remaining
            for piece in pieces:
                result.append(
                    ClippedInterval(
                        index, piece, self._to_plot(index, piece.start), self._to_plot(index, piece.end)
                    )
                )
        return result

    def chromosome_labels(self) -> List[Tuple[str, float, float]]:
        """
        chromosome names with the plot extent they label. Consecutive slots on the same chromosome share a label
        """
        result = []
        for index, region in enumerate(self.regions):
            left, right = self.slot(index)
            if index > 0 and self.regions[index - 1].chr == region.chr:
                result[-1] = (result[-1][0], result[-1][1], right)
            else:
                result.append((str(region.chr), left, right))
        return result

    def ticks(self, per_region: int = 4) -> List[AxisTick]:
        """
        evenly spaced genomic tick marks on round numbers of base pairs, labelled in Mb
        """
        result = []
        for index, region in enumerate(self.regions):
            step = nice_step(region.span / max(per_region, 1))
            pos = int(math.ceil(region.start / step) * step)
            while pos <= region.end:
                result.append(AxisTick(index, pos, self._to_plot(index, pos), tick_label(pos, step)))
                pos += step
        return result


def nice_step(raw: float) -> int:
    """
    Example:
        >>> nice_step(3200000)
        5000000
    """
    if raw <= 1:
        return 1
    magnitude = 10 ** int(math.floor(math.log10(raw)))
    for multiple in [1, 2, 5, 10]:
        if multiple * magnitude >= raw:
            return int(multiple * magnitude)
    return int(10 * magnitude)


def tick_label(pos: int, step: int) -> str:
    """
    position in Mb with enough decimals to tell ticks step bp apart

    Example:
        >>> tick_label(40000250, 50)
        '40.00025'
        >>> tick_label(45000000, 5000000)
        '45'
    """
    decimals = max(0, 6 - int(math.floor(math.log10(step))))
    label = '{:.{}f}'.format(pos / 1e6, decimals)
    if '.' in label:
        label = label.rstrip('0').rstrip('.')
    return label


def build_axis(
    regions: Iterable, width: float = DEFAULT_WIDTH, region_gap: float = DEFAULT_REGION_GAP
) -> CompositeAxis:
    """
    build the composite axis for an ordered region model

    Args:
        regions: the ordered regions (Region objects, (chr, start, end) tuples or chr:start-end strings)
        width: total plot width, including the gaps
        region_gap: plot units inserted between consecutive regions

    Raises:
        InvalidRegionError: the region model is empty or contains an invalid region
        ConfigurationError: the width cannot hold the regions and gaps
    """
    regions = validate_regions(regions)
    if width <= 0:
        raise ConfigurationError(f'axis width must be positive: {width}')
    if region_gap < 0:
        raise ConfigurationError(f'region_gap must not be negative: {region_gap}')
    usable = width - region_gap * (len(regions) - 1)
    if usable <= 0:
        raise ConfigurationError(
            f'region_gap ({region_gap}) leaves no room for {len(regions)} regions in a width of {width}'
        )
    scale = usable / sum([r.span for r in regions])
    return CompositeAxis(regions, width, region_gap, scale)
