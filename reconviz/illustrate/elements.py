"""
svg elements of the rearrangement profile. Every element is drawn with its origin at the left end of the
copy number baseline and with the svg y axis pointing down, so a layout height y is drawn at -y
"""
from .util import Tag, fill_kwargs
from ..axis import nice_step
from ..constants import ARC_KIND, GIEMSA_STAIN, SVTYPE_DESCRIPTION
from ..util import format_position

HEX_BLACK = '#000000'


def draw_legend(config, canvas, swatches, border=True):
    """
    generates an svg group object representing the legend
    """
    main_group = canvas.g(class_='legend')
    y = config.padding if border else 0
    x = config.padding if border else 0
    for swatch, label in swatches:
        svg_group = canvas.g()
        svg_group.add(
            canvas.rect(
                (0, 0),
                (config.legend_swatch_size, config.legend_swatch_size),
                stroke=config.legend_swatch_stroke,
                **fill_kwargs(swatch),
            )
        )
        svg_group.add(
            canvas.text(
                label,
                insert=(
                    config.legend_swatch_size + config.padding,
                    config.legend_swatch_size / 2 + config.font_central_shift_ratio * config.legend_font_size,
                ),
                fill=config.legend_font_color,
                style=config.font_style.format(text_anchor='start', font_size=config.legend_font_size),
                class_='label',
            )
        )
        svg_group.translate(x, y)
        main_group.add(svg_group)
        y += config.legend_swatch_size + config.padding

    width = (
        max([len(l) for c, l in swatches]) * config.legend_font_size * config.font_width_height_ratio
        + config.padding * (3 if border else 1)
        + config.legend_swatch_size
    )
    if border:
        main_group.add(
            canvas.rect(
                (0, 0),
                (width, y),
                fill='none',
                stroke=config.legend_border_stroke,
                stroke_width=config.legend_border_stroke_width,
            )
        )
    else:
        y -= config.padding
    setattr(main_group, 'height', y)
    setattr(main_group, 'width', width)
    return main_group


def cn_ticks(max_cn):
    """
    Example:
        >>> cn_ticks(4)
        [0, 1, 2, 3, 4]
        >>> cn_ticks(20)
        [0, 5, 10, 15, 20]
    """
    return list(range(0, int(max_cn) + 1, nice_step(max_cn / 5)))


def draw_copy_number(config, canvas, layout):
    """
    draws the copy number panel: the region frames, the copy number grid and axis, and the segments

    Return:
        svgwrite.container.Group: the group element for the panel
    """
    group = canvas.g(class_='copy_number')
    scale = config.cn_height / config.max_cn

    for index, (left, right) in enumerate(layout.axis.region_boundaries()):
        region = layout.axis.regions[index]
        frame = canvas.g(class_='region')
        frame.add(
            canvas.rect(
                (left, -config.cn_height),
                (right - left, config.cn_height),
                fill='none',
                stroke=config.region_border_color,
                stroke_width=0.5,
            )
        )
        frame.add(Tag('title', 'region {}'.format(region)))
        group.add(frame)

    ticks = cn_ticks(config.max_cn)
    for cn in ticks:
        y = -cn * scale
        for left, right in layout.axis.region_boundaries():
            group.add(canvas.line((left, y), (right, y), stroke=config.cn_grid_color, stroke_width=0.5))
        group.add(
            canvas.line((-config.padding, y), (0, y), stroke=HEX_BLACK, stroke_width=1)
        )
        group.add(
            canvas.text(
                str(cn),
                insert=(
                    -config.padding * 2,
                    y + config.font_central_shift_ratio * config.cn_ytick_font_size,
                ),
                fill=config.label_color,
                style=config.font_style.format(font_size=config.cn_ytick_font_size, text_anchor='end'),
            )
        )
    group.add(canvas.line((0, 0), (0, -config.cn_height), stroke=HEX_BLACK, stroke_width=1))
    x = -config.padding * 3 - config.cn_ytick_font_size * config.font_width_height_ratio * len(str(ticks[-1]))
    title = canvas.text(
        config.cn_y_title,
        insert=(x, -config.cn_height / 2),
        fill=config.label_color,
        style=config.font_style.format(font_size=config.scatter_axis_font_size, text_anchor='middle'),
        class_='y_axis_label',
    )
    title.rotate(270, (x, -config.cn_height / 2))
    group.add(title)

    for segment in layout.segments:
        seg_group = canvas.g(class_='cn_segment')
        for y, color in [(segment.y_total, config.color_total_cn), (segment.y_minor, config.color_minor_cn)]:
            seg_group.add(
                canvas.line(
                    (segment.x_start, -y),
                    (segment.x_end, -y),
                    stroke_width=config.cn_stroke_width,
                    **fill_kwargs(color, 'stroke'),
                )
            )
        if segment.clipped:
            center = (segment.x_start + segment.x_end) / 2
            size = config.cn_stroke_width * 2
            seg_group.add(
                canvas.polyline(
                    [
                        (center - size, -segment.y_total - config.cn_stroke_width),
                        (center, -segment.y_total - config.cn_stroke_width - size),
                        (center + size, -segment.y_total - config.cn_stroke_width),
                    ],
                    class_='clipped',
                    **fill_kwargs(config.color_total_cn),
                )
            )
        seg_group.add(
            Tag(
                'title',
                'copy number segment total={:g} minor={:g}{}'.format(
                    segment.total_cn, segment.minor_cn, ' (above max_cn)' if segment.clipped else ''
                ),
            )
        )
        group.add(seg_group)
    return group


def draw_karyotype(config, canvas, layout):
    """
    draws the chromosome bands below the copy number baseline

    Return:
        svgwrite.container.Group: the group element for the karyotype track
    """
    group = canvas.g(class_='karyotype')
    top = -config.karyotype_top
    height = config.karyotype_height
    for band in layout.bands:
        bgroup = canvas.g(class_='cytoband')
        fill = config.template_band_fill.get(band.stain, config.template_default_fill)
        width = max(band.x_end - band.x_start, 0.5)
        if band.stain == GIEMSA_STAIN.ACEN:
            if band.name and band.name[0] == 'p':
                points = [(0, 0), (width, height / 2), (0, height)]
            else:
                points = [(width, 0), (0, height / 2), (width, height)]
            shape = canvas.polyline(
                points,
                fill=fill,
                stroke=config.template_band_stroke,
                stroke_width=config.template_band_stroke_width,
            )
        else:
            shape = canvas.rect(
                (0, 0),
                (width, height),
                fill=fill,
                stroke=config.template_band_stroke,
                stroke_width=config.template_band_stroke_width,
            )
        bgroup.add(shape)
        bgroup.add(Tag('title', 'cytoband {}{} ({})'.format(band.chr, band.name or '', band.stain)))
        bgroup.translate((band.x_start, top))
        group.add(bgroup)
    setattr(group, 'height', height)
    return group


def arc_path(arc):
    """
    the svg path data of a quadratic bezier arc (in layout coordinates, flipped)

    Example:
        >>> from collections import namedtuple
        >>> Arc = namedtuple('Arc', ['endpoints', 'control'])
        >>> arc_path(Arc(((0, 10), (100, 10)), (50, 30)))
        'M 0 -10 Q 50 -30 100 -10'
    """
    (x1, y1), (x2, y2) = arc.endpoints
    cx, cy = arc.control
    return 'M {:g} {:g} Q {:g} {:g} {:g} {:g}'.format(x1, -y1, cx, -cy, x2, -y2)


def draw_sv_arcs(config, canvas, layout):
    """
    draws the rearrangement class tracks, the class names, the arcs and the vertical lines joining each drawn
    breakend to the copy number panel

    Return:
        svgwrite.container.Group: the group element for the arcs
    """
    group = canvas.g(class_='structural_variants')
    track_group = canvas.g(class_='sv_tracks')
    for label in layout.sv_labels:
        color = config.sv_class_color[label.sv_class]
        for left, right in layout.axis.region_boundaries():
            track_group.add(
                canvas.line((left, -label.y), (right, -label.y), stroke=color, stroke_width=0.5, stroke_opacity=0.5)
            )
        track_group.add(
            canvas.text(
                label.sv_class,
                insert=(label.x + config.padding, -label.y - config.padding),
                fill=color,
                style=config.font_style.format(font_size=config.sv_class_label_font_size, text_anchor='start'),
                class_='sv_class_label',
            )
        )
    group.add(track_group)

    for arc in layout.arcs:
        color = config.sv_class_color[arc.sv_class]
        arc_group = canvas.g(class_='sv_{}'.format(arc.kind))
        for x, y in arc.endpoints[: 1 if arc.kind == ARC_KIND.PARTIAL else 2]:
            line = canvas.line((x, 0), (x, -y), stroke=color, stroke_width=1, stroke_opacity=config.sv_drop_line_opacity)
            line.dasharray(config.sv_drop_line_dasharray)
            arc_group.add(line)
        arc_group.add(
            canvas.path(d=arc_path(arc), fill='none', stroke=color, stroke_width=config.sv_stroke_width)
        )
        if arc.label is not None:
            x, y = arc.endpoints[1]
            arc_group.add(
                canvas.text(
                    arc.label,
                    insert=(x, -y - config.padding - (arc.label_tier or 0) * config.sv_label_tier_height),
                    fill=color,
                    style=config.font_style.format(font_size=config.sv_class_label_font_size, text_anchor='middle'),
                    class_='label',
                )
            )
        pair = arc.pair
        arc_group.add(
            Tag(
                'title',
                '{} {} {}{} {}{}'.format(
                    pair.name or '',
                    SVTYPE_DESCRIPTION[arc.sv_class],
                    format_position(pair.break1.chr, pair.break1.pos),
                    pair.break1.orient,
                    format_position(pair.break2.chr, pair.break2.pos),
                    pair.break2.orient,
                ).strip(),
            )
        )
        group.add(arc_group)
    return group


def draw_genes(config, canvas, layout, y):
    """
    draws a tick mark and a label for each gene. Labels on higher tiers are drawn further down

    Args:
        y: the svg y coordinate of the top of the gene track
    """
    group = canvas.g(class_='genes')
    for gene in layout.genes:
        ggroup = canvas.g(class_='gene')
        ggroup.add(
            canvas.line(
                (gene.x, y), (gene.x, y + config.gene_marker_height), stroke=config.gene_marker_color, stroke_width=1
            )
        )
        ggroup.add(
            canvas.text(
                gene.name,
                insert=(gene.x, y + config.gene_marker_height + config.size_gene_label + gene.label_offset),
                fill=config.color_gene_label,
                style=config.font_style.format(font_size=config.size_gene_label, text_anchor='middle'),
                class_='label',
            )
        )
        ggroup.add(Tag('title', 'gene {}'.format(gene.name)))
        group.add(ggroup)
    tiers = max([g.tier for g in layout.genes] + [-1]) + 1
    setattr(
        group,
        'height',
        config.gene_marker_height + tiers * config.gene_label_tier_height + config.padding if tiers else 0,
    )
    return group


def draw_chromosome_labels(config, canvas, layout, y):
    """
    draws the genomic ticks (Mb) of each region and a label for each chromosome

    Args:
        y: the svg y coordinate of the top of the label track
    """
    group = canvas.g(class_='chromosome_labels')
    tick_font_size = max(config.size_chr_labels - 3, 1)
    for tick in layout.ticks:
        group.add(canvas.line((tick.x, y), (tick.x, y + config.padding), stroke=HEX_BLACK, stroke_width=0.5))
        group.add(
            canvas.text(
                tick.label,
                insert=(tick.x, y + config.padding + tick_font_size),
                fill=config.label_color,
                style=config.font_style.format(font_size=tick_font_size, text_anchor='middle'),
            )
        )
    label_y = y + config.padding * 2 + tick_font_size + config.size_chr_labels
    for name, left, right in layout.chromosome_labels:
        text = canvas.text(
            name,
            insert=((left + right) / 2, label_y),
            fill=config.label_color,
            style=config.font_style.format(font_size=config.size_chr_labels, text_anchor='middle'),
            class_='label',
        )
        group.add(text)
    setattr(group, 'height', label_y - y + config.padding)
    return group


def draw_title(config, canvas, title, width):
    return canvas.text(
        title,
        insert=(width / 2, config.size_title),
        fill=config.label_color,
        style=config.font_style.format(font_size=config.size_title, text_anchor='middle'),
        class_='title',
    )
