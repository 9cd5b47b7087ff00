"""
The region model: the ordered list of genomic intervals selected for display
"""
import re
from typing import Iterable, List, Tuple

from .error import InvalidRegionError
from .interval import Interval
from .util import logger

SEX_AND_MITO_RANKS = {'X': 1001, 'Y': 1002, 'M': 1003, 'MT': 1003}


class ReferenceName(str):
    """
    Class for reference sequence names. Ensures that UCSC and Ensembl style chromosome names match

    Example:
        >>> ReferenceName('chr1') == ReferenceName('1')
        True
    """

    def __eq__(self, other):
        options = {str(self)}
        if self.startswith('chr'):
            options.add(str(self[3:]))
        else:
            options.add('chr' + str(self))
        return other in options

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash(re.sub('^chr', '', str(self)))

    @property
    def rank(self) -> Tuple[int, str]:
        """
        sort key following karyotypic order: numbered autosomes first, then X, Y, M, then anything else by name

        Example:
            >>> sorted(['chr10', 'chrX', 'chr2'], key=lambda c: ReferenceName(c).rank)
            ['chr2', 'chr10', 'chrX']
        """
        stripped = re.sub('^chr', '', str(self))
        if stripped.isdigit():
            return (int(stripped), '')
        return (SEX_AND_MITO_RANKS.get(stripped.upper(), 2000), stripped)


class Region(Interval):
    """
    a displayed genomic interval. Both start and end are inclusive when mapping positions
    """

    chr: ReferenceName

    def __init__(self, chr: str, start: int, end: int):
        """
        Args:
            chr: the chromosome
            start: the first displayed position (>= 0)
            end: the last displayed position (> start)

        Raises:
            InvalidRegionError: the coordinates do not describe a non-empty interval
        """
        try:
            start = int(start)
            end = int(end)
        except (TypeError, ValueError):
            raise InvalidRegionError(f'region coordinates must be integers: {chr}:{start}-{end}')
        if start < 0:
            raise InvalidRegionError(f'region start must not be negative: {chr}:{start}-{end}')
        if end <= start:
            raise InvalidRegionError(f'region end must be greater than start: {chr}:{start}-{end}')
        if not chr:
            raise InvalidRegionError(f'region chromosome must be given: {start}-{end}')
        Interval.__init__(self, start, end)
        self.chr = ReferenceName(chr)

    @property
    def span(self) -> int:
        """the genomic length used to size the plot slot"""
        return self.end - self.start

    @property
    def key(self):
        return (re.sub('^chr', '', str(self.chr)), self.start, self.end)

    def __eq__(self, other):
        if not hasattr(other, 'key'):
            return False
        return self.key == other.key

    def __hash__(self):
        return hash(self.key)

    def __repr__(self):
        return 'Region({}:{}-{})'.format(self.chr, self.start, self.end)

    def __str__(self):
        return '{}:{}-{}'.format(self.chr, self.start, self.end)

    def contains_position(self, chr: str, pos) -> bool:
        return self.chr == chr and self.start <= pos <= self.end


def parse_region(region: str) -> Region:
    """
    parse a region string

    Example:
        >>> parse_region('chr10:40,000,000-55,000,000')
        Region(chr10:40000000-55000000)
    """
    match = re.match(r'^\s*([^:\s]+):([\d,]+)-([\d,]+)\s*$', region)
    if not match:
        raise InvalidRegionError(f'region must be given as chr:start-end: {region!r}')
    chr, start, end = match.groups()
    return Region(chr, int(start.replace(',', '')), int(end.replace(',', '')))


def validate_regions(regions: Iterable) -> List[Region]:
    """
    checks the ordered region model and converts its members to Region objects

    Args:
        regions: Region objects, (chr, start, end) tuples or chr:start-end strings

    Raises:
        InvalidRegionError: the model is empty, a region is malformed or a region is repeated

    Note:
        overlapping regions on the same chromosome are allowed. Features falling into the
        overlap are assigned to the first region listed
    """
    result: List[Region] = []
    for index, region in enumerate(regions):
        try:
            if isinstance(region, Region):
                current = region
            elif isinstance(region, str):
                current = parse_region(region)
            else:
                current = Region(*region)
        except InvalidRegionError as err:
            raise InvalidRegionError(f'region #{index}: {err}')
        except TypeError:
            raise InvalidRegionError(f'region #{index} must be given as (chr, start, end): {region!r}')
        for prev_index, prev in enumerate(result):
            if prev == current:
                raise InvalidRegionError(
                    f'region #{index} ({current}) is identical to region #{prev_index}'
                )
            if prev.chr == current.chr and Interval.overlaps(prev, current):
                logger.warning(
                    f'region #{index} ({current}) overlaps region #{prev_index} ({prev}); '
                    f'features in the overlap are drawn in region #{prev_index} only'
                )
        result.append(current)
    if not result:
        raise InvalidRegionError('at least one region must be given')
    return result
