"""
Layout of structural variant arcs on the composite axis.

Each classified breakend pair becomes one of

- an intra-region arc (both breakends visible, same region)
- a cross-region arc (both breakends visible, different regions)
- a stub (only one breakend visible), optionally labelled with the position of the hidden partner

Pairs with no visible breakend are dropped.
"""
from typing import Dict, Iterable, List, NamedTuple, Optional, Tuple

from .axis import AxisPosition, CompositeAxis
from .breakpoint import Breakend, BreakendPair
from .constants import ARC_KIND, SVTYPE
from .labels import stagger_labels
from .util import format_position, logger

Point = Tuple[float, float]


class ArcSpec(NamedTuple):
    sv_class: str
    kind: str
    curvature: float
    endpoints: Tuple[Point, Point]
    control: Point
    label: Optional[str]
    label_tier: Optional[int]
    region_indices: Tuple[int, ...]
    pair: BreakendPair


class SvClassLabel(NamedTuple):
    sv_class: str
    x: float
    y: float


def sv_track_heights(settings) -> Dict[str, float]:
    """
    the height of the horizontal track each rearrangement class is drawn on. Tracks are stacked above the
    copy number panel, spaced by a fraction (scaling_cn_SVs) of the copy number panel height
    """
    spacing = settings.cn_height * settings.scaling_cn_SVs
    return {
        sv_class: settings.cn_height + (i + 1) * spacing for i, sv_class in enumerate(SVTYPE.values())
    }


def arc_control_point(start: Point, end: Point, curvature: float) -> Point:
    """
    control point of the quadratic bezier curve joining start and end. The apex of the curve is offset
    from the chord midpoint by curvature * chord length. Negative curvature bends the arc upwards

    Example:
        >>> arc_control_point((0, 10), (100, 10), -0.1)
        (50.0, 30.0)
    """
    (x1, y1), (x2, y2) = start, end
    chord = ((x2 - x1) ** 2 + (y2 - y1) ** 2) ** 0.5
    if chord == 0:
        return ((x1 + x2) / 2, (y1 + y2) / 2)
    # unit normal to the chord, pointing up for a left-to-right chord
    nx, ny = -(y2 - y1) / chord, (x2 - x1) / chord
    apex = -curvature * chord
    return ((x1 + x2) / 2 + 2 * apex * nx, (y1 + y2) / 2 + 2 * apex * ny)


def _partner_direction(axis: CompositeAxis, visible: AxisPosition, visible_end: Breakend, partner: Breakend) -> int:
    """
    which way (-1 left, 1 right) the hidden partner lies. If the partner chromosome is displayed, point at the
    edge of the region nearest to the partner, otherwise use genome order
    """
    nearest = None
    for index, region in enumerate(axis.regions):
        if region.chr != partner.chr:
            continue
        left, right = axis.slot(index)
        if partner.pos < region.start:
            candidate = (region.start - partner.pos, left)
        else:
            candidate = (partner.pos - region.end, right)
        if nearest is None or candidate[0] < nearest[0]:
            nearest = candidate
    if nearest is not None:
        return -1 if nearest[1] < visible.x else 1
    return -1 if partner.key < visible_end.key else 1


def layout_arcs(pairs: Iterable[BreakendPair], axis: CompositeAxis, settings) -> List[ArcSpec]:
    """
    classify and lay out the structural variants

    Args:
        pairs: the structural variants
        axis: the composite axis
        settings (DiagramSettings): curvature, labelling and track options

    Returns:
        the arcs in a deterministic (genome) order
    """
    heights = sv_track_heights(settings)
    spacing = settings.cn_height * settings.scaling_cn_SVs
    stub_length = settings.sv_stub_length * axis.width
    arcs = []
    partial = []
    dropped = 0

    for pair in sorted(pairs):
        y = heights[pair.sv_class]
        pos1 = axis.map(pair.break1.chr, pair.break1.pos)
        pos2 = axis.map(pair.break2.chr, pair.break2.pos)

        if pos1 is None and pos2 is None:
            dropped += 1
            continue
        elif pos1 is not None and pos2 is not None:
            start, end = sorted([pos1, pos2], key=lambda p: p.x)
            if pos1.region_index == pos2.region_index:
                kind = ARC_KIND.INTRA
                curvature = settings.curvature_intrachr_SVs
            else:
                kind = ARC_KIND.INTER
                curvature = settings.curvature_interchr_SVs
            endpoints = ((start.x, y), (end.x, y))
            arcs.append(
                ArcSpec(
                    pair.sv_class,
                    kind,
                    curvature,
                    endpoints,
                    arc_control_point(*endpoints, curvature),
                    None,
                    None,
                    (pos1.region_index, pos2.region_index),
                    pair,
                )
            )
        else:
            if pos1 is not None:
                visible, visible_end, partner = pos1, pair.break1, pair.break2
            else:
                visible, visible_end, partner = pos2, pair.break2, pair.break1
            direction = _partner_direction(axis, visible, visible_end, partner)
            x_end = min(max(visible.x + direction * stub_length, 0), axis.width)
            curvature = settings.curvature_interchr_SVs * direction
            endpoints = ((visible.x, y), (x_end, y + spacing / 2))
            label = format_position(partner.chr, partner.pos) if settings.label_interchr_SV else None
            partial.append(
                (
                    (visible_end.key, partner.key),
                    ArcSpec(
                        pair.sv_class,
                        ARC_KIND.PARTIAL,
                        curvature,
                        endpoints,
                        arc_control_point(*endpoints, curvature),
                        label,
                        None,
                        (visible.region_index,),
                        pair,
                    ),
                )
            )

    # labels are staggered in genome order of the visible breakend so the layout is reproducible
    partial.sort(key=lambda item: item[0])
    labelled = [arc for _, arc in partial if arc.label is not None]
    tiers = stagger_labels(
        [arc.endpoints[1][0] for arc in labelled], settings.scale_separation_SV_type_labels * axis.width
    )
    tier_by_arc = {id(arc): tier for arc, tier in zip(labelled, tiers)}
    for _, arc in partial:
        arcs.append(arc._replace(label_tier=tier_by_arc.get(id(arc))))

    if dropped:
        logger.debug(f'{dropped} structural variant(s) have no breakend in the displayed regions')
    logger.info(
        f'laid out {len(arcs)} structural variant arc(s) ({len(partial)} with a breakend outside the displayed regions)'
    )
    return arcs


def sv_class_labels(axis: CompositeAxis, settings) -> List[SvClassLabel]:
    """
    position of the rearrangement class names, written on each class track at pos_SVtype_description bp from
    the start of the first region
    """
    first = axis.regions[0]
    pos = max(first.start, min(first.start + settings.pos_SVtype_description, first.end))
    x = axis.convert_pos(first.chr, pos).x
    return [SvClassLabel(sv_class, x, y) for sv_class, y in sv_track_heights(settings).items()]
