from typing import Iterable, List, NamedTuple

from .axis import CompositeAxis
from .error import ConfigurationError
from .interval import Interval
from .region import ReferenceName
from .util import logger


class CopyNumberSegment(Interval):
    """
    an allele-specific copy number call over a genomic interval (inclusive coordinates)
    """

    def __init__(self, chr: str, start: int, end: int, total_cn: float, minor_cn: float = 0):
        """
        Args:
            chr: the chromosome
            start: first position of the segment
            end: last position of the segment
            total_cn: total copy number
            minor_cn: copy number of the minor allele

        Raises:
            ValueError: negative copy numbers or a minor copy number above the total
        """
        Interval.__init__(self, start, end)
        self.chr = ReferenceName(chr)
        self.total_cn = float(total_cn)
        self.minor_cn = float(minor_cn)
        if self.total_cn < 0 or self.minor_cn < 0:
            raise ValueError('copy number values must not be negative', self)
        if self.minor_cn > self.total_cn:
            raise ValueError('minor copy number cannot exceed the total copy number', self)

    def __repr__(self):
        return 'CopyNumberSegment({}:{}-{}, total={:g}, minor={:g})'.format(
            self.chr, self.start, self.end, self.total_cn, self.minor_cn
        )


class PlotSegment(NamedTuple):
    region_index: int
    x_start: float
    x_end: float
    y_total: float
    y_minor: float
    total_cn: float
    minor_cn: float
    clipped: bool


def cap_cn(value: float, max_cn: float) -> float:
    """
    Example:
        >>> cap_cn(20, 4)
        4
    """
    return min(value, max_cn)


def map_segments(
    segments: Iterable[CopyNumberSegment], axis: CompositeAxis, max_cn: float, vertical_scale: float = 1
) -> List[PlotSegment]:
    """
    clip the copy number segments to the displayed regions and convert them to plot coordinates

    Args:
        segments: the copy number segments
        axis: the composite axis
        max_cn: ceiling above which copy number values are drawn at the ceiling
        vertical_scale: plot units per copy number unit

    Returns:
        one plot segment per (segment, region) intersection. Segments outside all regions are dropped
    """
    if max_cn <= 0:
        raise ConfigurationError(f'max_cn must be positive: {max_cn}')
    result = []
    dropped = 0
    for segment in segments:
        pieces = axis.clip(segment.chr, segment.start, segment.end)
        if not pieces:
            dropped += 1
            continue
        clipped = segment.total_cn > max_cn
        for piece in pieces:
            result.append(
                PlotSegment(
                    piece.region_index,
                    piece.x_start,
                    piece.x_end,
                    cap_cn(segment.total_cn, max_cn) * vertical_scale,
                    cap_cn(segment.minor_cn, max_cn) * vertical_scale,
                    segment.total_cn,
                    segment.minor_cn,
                    clipped,
                )
            )
    if dropped:
        logger.debug(f'{dropped} copy number segment(s) outside the displayed regions')
    return result
