from typing import Dict, Optional, Sequence, Tuple

from .constants import ORIENT, SVTYPE_BY_ORIENTATION
from .error import MalformedBreakendError
from .region import ReferenceName


class Breakend:
    """
    one end of a structural variant junction
    """

    chr: ReferenceName
    pos: int
    orient: str

    def __init__(self, chr: str, pos: int, orient: str):
        """
        Args:
            chr: the chromosome
            pos: the genomic position of the breakend
            orient (ORIENT): which side of the breakend is retained

        Raises:
            MalformedBreakendError: the chromosome, position or orientation is missing or invalid
        """
        if chr is None or str(chr).strip() == '':
            raise MalformedBreakendError('breakend chromosome is missing', chr, pos, orient)
        try:
            self.pos = int(pos)
        except (TypeError, ValueError):
            raise MalformedBreakendError('breakend position must be an integer', chr, pos, orient)
        try:
            self.orient = ORIENT.enforce(orient)
        except KeyError:
            raise MalformedBreakendError(
                f'breakend orientation must be one of {ORIENT.values()}', chr, pos, orient
            )
        self.chr = ReferenceName(str(chr).strip())

    @property
    def key(self) -> Tuple:
        """genome-order sort key"""
        return (self.chr.rank, self.pos, self.orient)

    def __eq__(self, other):
        if not hasattr(other, 'key'):
            return False
        return self.key == other.key

    def __hash__(self):
        return hash(self.key)

    def __repr__(self):
        return 'Breakend({}:{}{})'.format(self.chr, self.pos, self.orient)


def classify_orientations(orient1: str, orient2: str) -> str:
    """
    classify an ordered (left breakend first) orientation pair

    Example:
        >>> classify_orientations('+', '-')
        'DEL'
    """
    try:
        return SVTYPE_BY_ORIENTATION[(orient1, orient2)]
    except KeyError:
        raise MalformedBreakendError('invalid orientation pair', orient1, orient2)


class BreakendPair:
    """
    a structural variant given by its two breakends. The breakends are stored in genome order so that the
    classification does not depend on the order the input record lists them in
    """

    break1: Breakend
    break2: Breakend
    name: Optional[str]
    data: Dict

    def __init__(self, b1: Breakend, b2: Breakend, name: Optional[str] = None, **kwargs):
        if b1.key > b2.key:
            self.break1 = b2
            self.break2 = b1
        else:
            self.break1 = b1
            self.break2 = b2
        self.name = name
        self.data = kwargs
        self.sv_class = classify_orientations(self.break1.orient, self.break2.orient)

    def __eq__(self, other):
        for attr in ['break1', 'break2']:
            if not hasattr(other, attr) or getattr(self, attr) != getattr(other, attr):
                return False
        return True

    def __hash__(self):
        return hash((self.break1, self.break2))

    def __lt__(self, other):
        return (self.break1.key, self.break2.key) < (other.break1.key, other.break2.key)

    def __repr__(self):
        return 'BreakendPair({}, {}{})'.format(
            self.break1, self.break2, ', name={!r}'.format(self.name) if self.name else ''
        )


def build_breakend_pair(record_id, breakends: Sequence[Tuple], **kwargs) -> BreakendPair:
    """
    build a structural variant from its breakend tuples (chr, pos, orient)

    Raises:
        MalformedBreakendError: the record does not have exactly two valid breakends. The message names the record
    """
    if len(breakends) != 2:
        raise MalformedBreakendError(
            f'structural variant {record_id!r} must have exactly 2 breakends, found {len(breakends)}'
        )
    try:
        b1, b2 = [Breakend(*b) for b in breakends]
    except MalformedBreakendError as err:
        raise MalformedBreakendError(f'structural variant {record_id!r}: {err.args}')
    except TypeError:
        raise MalformedBreakendError(
            f'structural variant {record_id!r}: breakends must be given as (chromosome, position, orientation)'
        )
    return BreakendPair(b1, b2, name=None if record_id is None else str(record_id), **kwargs)
