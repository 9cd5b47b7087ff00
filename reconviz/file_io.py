"""
Readers for the tabular inputs. Each reader accepts a path to a tab delimited file or an already loaded
DataFrame and returns the typed records used by the layout
"""
from typing import Dict, List, Optional, Sequence, Union

import pandas as pd

from .breakpoint import BreakendPair, build_breakend_pair
from .constants import COLUMNS
from .copy_number import CopyNumberSegment
from .error import InvalidRegionError
from .karyotype import CytobandInterval
from .overlay import AnnotationPoint, GeneLocus
from .region import Region, parse_region
from .util import logger

NA_VALUES = ['None', 'none', 'N/A', 'n/a', 'null', 'NULL', 'Null', 'nan', '<NA>', 'NaN']

Source = Union[str, pd.DataFrame]


def read_table(
    source: Source, required_columns: Sequence[str] = (), names: Optional[List[str]] = None
) -> pd.DataFrame:
    """
    read a tab delimited file into a DataFrame of strings with missing values as None

    Args:
        source: path to the file or a DataFrame
        required_columns: columns which must be present
        names: column names for files without a header line

    Raises:
        KeyError: a required column is missing
    """
    if isinstance(source, pd.DataFrame):
        df = source.copy()
    else:
        try:
            df = pd.read_csv(
                source,
                sep='\t',
                comment='#',
                dtype=str,
                header=None if names else 'infer',
                names=names,
                na_values=NA_VALUES,
                keep_default_na=False,
            )
        except pd.errors.EmptyDataError:
            df = pd.DataFrame(columns=names or list(required_columns))
    df = df.astype(object).where(pd.notnull(df), None)

    for col in required_columns:
        if col not in df:
            raise KeyError(f'missing required column: {col}')
    return df


def read_regions(source: Union[Source, Sequence[str]]) -> List[Region]:
    """
    read the ordered regions from a table with the columns chr, start, end or from a list of chr:start-end strings

    Raises:
        InvalidRegionError: a row does not describe a valid region
    """
    if not isinstance(source, (str, pd.DataFrame)):
        return [parse_region(r) for r in source]
    df = read_table(source, [COLUMNS.chr, COLUMNS.start, COLUMNS.end])
    regions = []
    for index, row in df.iterrows():
        try:
            regions.append(Region(row[COLUMNS.chr], row[COLUMNS.start], row[COLUMNS.end]))
        except InvalidRegionError as err:
            raise InvalidRegionError(f'invalid region in row {index + 1}: {err}')
    logger.info(f'loaded {len(regions)} region(s)')
    return regions


def read_copy_number(source: Source) -> List[CopyNumberSegment]:
    """
    read copy number segments from a table with the columns chromosome, start, end, total_cn and (optionally)
    minor_cn

    Raises:
        KeyError: a required column is missing
        ValueError: a row has invalid coordinates or copy number values
    """
    df = read_table(source, [COLUMNS.chromosome, COLUMNS.start, COLUMNS.end, COLUMNS.total_cn])
    if COLUMNS.minor_cn not in df:
        df[COLUMNS.minor_cn] = 0
    df[COLUMNS.minor_cn] = df[COLUMNS.minor_cn].apply(lambda v: 0 if v is None else v)

    segments = []
    for index, row in df.iterrows():
        try:
            segments.append(
                CopyNumberSegment(
                    row[COLUMNS.chromosome],
                    row[COLUMNS.start],
                    row[COLUMNS.end],
                    row[COLUMNS.total_cn],
                    row[COLUMNS.minor_cn],
                )
            )
        except (AttributeError, TypeError, ValueError) as err:
            raise ValueError(f'invalid copy number segment in row {index + 1}: {err}')
    logger.info(f'loaded {len(segments)} copy number segment(s)')
    return segments


def read_structural_variants(source: Source) -> List[BreakendPair]:
    """
    read structural variants from either a paired table (chromosome1, position1, orientation1, chromosome2,
    position2, orientation2) or a table with one row per breakend (sv_id, chromosome, position, orientation)

    Raises:
        KeyError: the table matches neither column layout
        MalformedBreakendError: a variant does not have exactly two valid breakends
    """
    df = read_table(source)
    if not len(df.columns):
        return []
    paired_columns = [
        COLUMNS.chromosome1,
        COLUMNS.position1,
        COLUMNS.orientation1,
        COLUMNS.chromosome2,
        COLUMNS.position2,
        COLUMNS.orientation2,
    ]
    pairs = []
    if all([col in df for col in paired_columns]):
        for index, row in df.iterrows():
            record_id = row.get(COLUMNS.sv_id) or f'row {index + 1}'
            pairs.append(
                build_breakend_pair(
                    record_id,
                    [
                        (row[COLUMNS.chromosome1], row[COLUMNS.position1], row[COLUMNS.orientation1]),
                        (row[COLUMNS.chromosome2], row[COLUMNS.position2], row[COLUMNS.orientation2]),
                    ],
                )
            )
    else:
        df = read_table(df, [COLUMNS.sv_id, COLUMNS.chromosome, COLUMNS.position, COLUMNS.orientation])
        breakends: Dict[str, List] = {}
        for _, row in df.iterrows():
            breakends.setdefault(str(row[COLUMNS.sv_id]), []).append(
                (row[COLUMNS.chromosome], row[COLUMNS.position], row[COLUMNS.orientation])
            )
        for sv_id, ends in breakends.items():
            pairs.append(build_breakend_pair(sv_id, ends))
    logger.info(f'loaded {len(pairs)} structural variant(s)')
    return pairs


def read_cytobands(source: Source) -> List[CytobandInterval]:
    """
    read a UCSC cytoBand table (no header: chrom, chromStart, chromEnd, name, gieStain). The 0-based half-open
    coordinates are converted to 1-based inclusive
    """
    names = [COLUMNS.chr, COLUMNS.start, COLUMNS.end, COLUMNS.band_name, COLUMNS.giemsa_stain]
    df = read_table(source, names, names=None if isinstance(source, pd.DataFrame) else names)
    bands = []
    for index, row in df.iterrows():
        try:
            bands.append(
                CytobandInterval(
                    row[COLUMNS.chr],
                    int(row[COLUMNS.start]) + 1,
                    int(row[COLUMNS.end]),
                    name=row[COLUMNS.band_name],
                    stain=row[COLUMNS.giemsa_stain],
                )
            )
        except (AttributeError, TypeError, ValueError) as err:
            raise ValueError(f'invalid cytoband in row {index + 1}: {err}')
    logger.info(f'loaded {len(bands)} cytoband(s)')
    return bands


def read_genes(source: Source) -> List[GeneLocus]:
    """
    read gene loci from a table with the columns name, chromosome, start, end
    """
    df = read_table(source, [COLUMNS.name, COLUMNS.chromosome, COLUMNS.start, COLUMNS.end])
    genes = []
    for index, row in df.iterrows():
        try:
            genes.append(GeneLocus(row[COLUMNS.name], row[COLUMNS.chromosome], row[COLUMNS.start], row[COLUMNS.end]))
        except (TypeError, ValueError) as err:
            raise ValueError(f'invalid gene in row {index + 1}: {err}')
    logger.info(f'loaded {len(genes)} gene(s)')
    return genes


def read_annotations(source: Source) -> List[AnnotationPoint]:
    """
    read annotation values from a table with the columns chr, pos, y

    Raises:
        ValueError: a row has a position or value that is not a number
    """
    df = read_table(source, [COLUMNS.chr, COLUMNS.pos, COLUMNS.y])
    points = []
    for index, row in df.iterrows():
        try:
            points.append(AnnotationPoint(row[COLUMNS.chr], int(row[COLUMNS.pos]), float(row[COLUMNS.y])))
        except (TypeError, ValueError) as err:
            raise ValueError(f'invalid annotation in row {index + 1}: {err}')
    logger.info(f'loaded {len(points)} annotation point(s)')
    return points
