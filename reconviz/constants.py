"""
controlled vocabularies and small casting functions used throughout the reconviz package
"""
import argparse
from typing import List


class Namespace:
    """
    Enum-like holder of module constants. Members are the public, non-callable class attributes

    Example:
        >>> class COLOR(Namespace):
        ...     RED = 'red'
        >>> COLOR.values()
        ['red']
    """

    @classmethod
    def keys(cls) -> List[str]:
        return [
            k
            for k, v in vars(cls).items()
            if not k.startswith('_') and not isinstance(v, (classmethod, staticmethod)) and not callable(v)
        ]

    @classmethod
    def values(cls) -> List:
        return [getattr(cls, k) for k in cls.keys()]

    @classmethod
    def items(cls):
        return [(k, getattr(cls, k)) for k in cls.keys()]

    @classmethod
    def enforce(cls, value):
        """
        checks that the current namespace has a given value

        Returns:
            the input value

        Raises:
            KeyError: the value did not exist
        """
        if value not in cls.values():
            raise KeyError('value {0} is not a valid member of '.format(repr(value)), cls.values())
        return value


def float_fraction(num):
    """
    cast input to a float

    Raises:
        argparse.ArgumentTypeError: if the input cannot be cast to a float or the number is not between 0 and 1
    """
    try:
        num = float(num)
    except ValueError:
        raise argparse.ArgumentTypeError('Must be a value between 0 and 1')
    if num < 0 or num > 1:
        raise argparse.ArgumentTypeError('Must be a value between 0 and 1')
    return num


class ORIENT(Namespace):
    """
    holds controlled vocabulary for breakend orientation

    Attributes:
        POS: the retained sequence is to the left of (ends at) the breakend
        NEG: the retained sequence is to the right of (starts at) the breakend
    """

    POS: str = '+'
    NEG: str = '-'


class SVTYPE(Namespace):
    """
    holds controlled vocabulary for the rearrangement classes implied by a breakend orientation pair
    """

    DEL: str = 'DEL'
    DUP: str = 'DUP'
    H2HINV: str = 'h2hINV'
    T2TINV: str = 't2tINV'


SVTYPE_DESCRIPTION = {
    SVTYPE.DEL: 'Deletion-like',
    SVTYPE.DUP: 'Duplication-like',
    SVTYPE.H2HINV: 'Head-to-head inversion',
    SVTYPE.T2TINV: 'Tail-to-tail inversion',
}

SVTYPE_BY_ORIENTATION = {
    (ORIENT.POS, ORIENT.NEG): SVTYPE.DEL,
    (ORIENT.NEG, ORIENT.POS): SVTYPE.DUP,
    (ORIENT.POS, ORIENT.POS): SVTYPE.H2HINV,
    (ORIENT.NEG, ORIENT.NEG): SVTYPE.T2TINV,
}
"""ordered orientation pair (left breakend first) to rearrangement class"""


class ARC_KIND(Namespace):
    """
    Attributes:
        INTRA: both breakends are drawn and fall in the same region
        INTER: both breakends are drawn but fall in different regions
        PARTIAL: only one breakend is in the viewport, the partner is not shown
    """

    INTRA: str = 'intra'
    INTER: str = 'inter'
    PARTIAL: str = 'partial'


class GIEMSA_STAIN(Namespace):
    """
    holds controlled vocabulary relating to stains of chromosome bands
    """

    GNEG: str = 'gneg'
    GPOS25: str = 'gpos25'
    GPOS33: str = 'gpos33'
    GPOS50: str = 'gpos50'
    GPOS66: str = 'gpos66'
    GPOS75: str = 'gpos75'
    GPOS100: str = 'gpos100'
    ACEN: str = 'acen'
    GVAR: str = 'gvar'
    STALK: str = 'stalk'


class GENOME_BUILD(Namespace):
    GRCH37: str = 'GRCh37'
    GRCH38: str = 'GRCh38'
    T2T: str = 'T2T-CHM13'
    MM10: str = 'mm10'
    MM39: str = 'mm39'


class COLUMNS(Namespace):
    """
    Column names of the tabular inputs
    """

    chr: str = 'chr'
    start: str = 'start'
    end: str = 'end'
    pos: str = 'pos'
    y: str = 'y'
    name: str = 'name'
    chromosome: str = 'chromosome'
    position: str = 'position'
    orientation: str = 'orientation'
    total_cn: str = 'total_cn'
    minor_cn: str = 'minor_cn'
    sv_id: str = 'sv_id'
    chromosome1: str = 'chromosome1'
    position1: str = 'position1'
    orientation1: str = 'orientation1'
    chromosome2: str = 'chromosome2'
    position2: str = 'position2'
    orientation2: str = 'orientation2'
    band_name: str = 'band_name'
    giemsa_stain: str = 'giemsa_stain'
