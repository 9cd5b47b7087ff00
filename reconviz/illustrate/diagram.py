"""
This is the primary module responsible for generating svg visualizations

"""
from svgwrite import Drawing

from .elements import (
    draw_chromosome_labels,
    draw_copy_number,
    draw_genes,
    draw_karyotype,
    draw_legend,
    draw_sv_arcs,
    draw_title,
)
from .scatter import draw_scatter
from ..constants import SVTYPE, SVTYPE_DESCRIPTION
from ..util import logger


def upper_extent(config, layout):
    """
    the highest point (in layout units, above the copy number baseline) reached by any element
    """
    heights = [config.cn_height]
    heights.extend([label.y + config.sv_class_label_font_size + config.padding for label in layout.sv_labels])
    for arc in layout.arcs:
        heights.extend([y for _, y in arc.endpoints])
        heights.append(arc.control[1])
        if arc.label is not None:
            heights.append(
                arc.endpoints[1][1]
                + config.padding
                + config.sv_class_label_font_size
                + (arc.label_tier or 0) * config.sv_label_tier_height
            )
    return max(heights)


def lower_extent(config, layout):
    """
    the lowest point (in layout units, below the copy number baseline) reached by any element
    """
    depths = [0]
    depths.extend([-arc.control[1] for arc in layout.arcs])
    if layout.bands:
        depths.append(-config.karyotype_top + config.karyotype_height)
    return max(depths)


def legend_swatches(config):
    swatches = [
        (config.color_total_cn, 'total copy number'),
        (config.color_minor_cn, 'minor copy number'),
    ]
    for sv_class in SVTYPE.values():
        swatches.append((config.sv_class_color[sv_class], '{} ({})'.format(sv_class, SVTYPE_DESCRIPTION[sv_class])))
    return swatches


def draw_rearrangement_profile(layout, show_legend=True):
    """
    draw the laid out profile. Panels are stacked top to bottom: title, structural variant arcs above the copy
    number panel, karyotype, gene markers, chromosome labels, annotation panel and legend

    Args:
        layout (ProfileLayout): the laid out profile
        show_legend (bool): draw the legend below the profile

    Returns:
        Tuple[svgwrite.Drawing, Dict[str,str]]: the drawing and the legend (color by label)
    """
    config = layout.settings
    width = config.left_margin + layout.axis.width + config.right_margin
    canvas = Drawing(size=(width, 1000))  # just set the height for now and change later
    x = config.left_margin
    y = config.top_margin

    if config.title:
        canvas.add(draw_title(config, canvas, config.title, width))
        y += config.size_title + config.padding

    baseline = y + upper_extent(config, layout)
    for group in [draw_sv_arcs(config, canvas, layout), draw_copy_number(config, canvas, layout)]:
        group.translate(x, baseline)
        canvas.add(group)

    if layout.bands:
        group = draw_karyotype(config, canvas, layout)
        group.translate(x, baseline)
        canvas.add(group)
    y = baseline + lower_extent(config, layout) + config.padding

    if layout.genes:
        group = draw_genes(config, canvas, layout, 0)
        group.translate(x, y)
        canvas.add(group)
        y += group.height

    group = draw_chromosome_labels(config, canvas, layout, 0)
    group.translate(x, y)
    canvas.add(group)
    y += group.height

    if layout.has_annotations:
        y += config.inner_margin
        group = draw_scatter(config, canvas, layout)
        group.translate(x, y + group.height)
        canvas.add(group)
        y += group.height

    swatches = legend_swatches(config)
    legend = {label: color for color, label in swatches}
    if show_legend:
        y += config.inner_margin
        group = draw_legend(config, canvas, swatches)
        group.translate(x, y)
        canvas.add(group)
        y += group.height

    y += config.bottom_margin
    canvas.attribs['height'] = y
    logger.info(f'drew the rearrangement profile ({width:g} x {y:g} px)')
    return canvas, legend
