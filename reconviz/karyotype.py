from typing import Dict, Iterable, List, NamedTuple, Optional

from .axis import CompositeAxis
from .constants import GENOME_BUILD, GIEMSA_STAIN
from .error import UnsupportedBuildError
from .interval import Interval
from .region import ReferenceName


class CytobandInterval(Interval):
    """
    a chromosome band (inclusive, 1-based coordinates)
    """

    def __init__(self, chr: str, start: int, end: int, name: Optional[str] = None, stain: str = GIEMSA_STAIN.GNEG):
        Interval.__init__(self, start, end)
        self.chr = ReferenceName(chr)
        self.name = name
        self.stain = GIEMSA_STAIN.enforce(stain)

    def __repr__(self):
        return 'CytobandInterval({}{}:{}-{}, {})'.format(self.chr, self.name or '', self.start, self.end, self.stain)


class PlotBand(NamedTuple):
    region_index: int
    x_start: float
    x_end: float
    stain: str
    name: Optional[str]
    chr: str


def check_build(build: str) -> str:
    """
    Raises:
        UnsupportedBuildError: the genome build is not one of the supported builds
    """
    try:
        return GENOME_BUILD.enforce(build)
    except KeyError:
        raise UnsupportedBuildError(
            f'unsupported genome build {build!r}, expected one of: {", ".join(GENOME_BUILD.values())}'
        )


def get_cytobands(build: str, tables: Dict[str, List[CytobandInterval]]) -> List[CytobandInterval]:
    """
    select the cytoband table for a genome build

    Args:
        build: the genome build identifier
        tables: cytoband tables by genome build

    Raises:
        UnsupportedBuildError: the build is not supported
        KeyError: the build is supported but no table was loaded for it
    """
    build = check_build(build)
    if build not in tables:
        raise KeyError(f'no cytoband table has been loaded for the genome build {build}')
    return tables[build]


def map_bands(cytobands: Iterable[CytobandInterval], axis: CompositeAxis) -> List[PlotBand]:
    """
    clip the chromosome bands to the displayed regions and convert them to plot coordinates
    """
    result = []
    for band in cytobands:
        for piece in axis.clip(band.chr, band.start, band.end):
            result.append(
                PlotBand(piece.region_index, piece.x_start, piece.x_end, band.stain, band.name, str(band.chr))
            )
    return result
