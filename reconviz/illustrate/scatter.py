from shapely.geometry import Point as sPoint

from .util import fill_kwargs
from ..util import logger


def thin_points(points, radius, density):
    """
    skip points which mostly overlap the previously drawn point

    Args:
        points (list of PlotPoint): the points in drawing order
        radius (float): the marker radius
        density (float): the maximum fraction of a marker which may be covered by the previous marker

    Returns:
        list of PlotPoint: the points to draw
    """
    result = []
    previous = None
    for point in points:
        circle = sPoint(point.x, point.y).buffer(radius)
        if previous is not None and circle.area:
            ratio = previous.intersection(circle).area / circle.area
            if ratio > density:
                continue
        previous = circle
        result.append(point)
    return result


def draw_scatter(ds, canvas, layout):
    """
    draw the annotation panel. The group origin is the bottom left corner of the panel

    Args:
        ds (DiagramSettings): the settings/constants to use for building the svg
        canvas (svgwrite.canvas): the svgwrite object used to create new svg elements
        layout (ProfileLayout): the laid out profile
    """
    plot_group = canvas.g(class_='scatter_plot')
    height = ds.ann_height
    ymin, ymax = layout.annotation_range

    points = sorted(layout.annotations, key=lambda p: (p.x, p.y))
    drawn = thin_points(points, ds.ann_dot_size, ds.ann_density)
    logger.debug(f'drew {len(drawn)} of {len(points)} annotation points (density={ds.ann_density})')

    for left, right in layout.axis.region_boundaries():
        plot_group.add(
            canvas.rect(
                (left, -height), (right - left, height), fill='none', stroke=ds.region_border_color, stroke_width=0.5
            )
        )

    for point in drawn:
        color = ds.ann_ymax_color if point.clamped else ds.ann_dot_col
        plot_group.add(canvas.circle(center=(point.x, -point.y), r=ds.ann_dot_size, **fill_kwargs(color)))

    # draw left y axis
    plot_group.add(canvas.line(start=(0, 0), end=(0, -height), stroke='#000000'))
    ytick_labels = [0]
    for value, py in [(ymin, 0), (ymax, -height)]:
        label = '{:.3g}'.format(value)
        ytick_labels.append(len(label))
        plot_group.add(canvas.line(start=(0 - ds.scatter_yaxis_tick_size, py), end=(0, py), stroke='#000000'))
        plot_group.add(
            canvas.text(
                label,
                insert=(
                    0 - ds.scatter_yaxis_tick_size - ds.padding,
                    py + ds.scatter_ytick_font_size * ds.font_central_shift_ratio,
                ),
                fill=ds.label_color,
                style=ds.font_style.format(font_size=ds.scatter_ytick_font_size, text_anchor='end'),
            )
        )

    shift = max(ytick_labels)
    x = (
        0
        - ds.padding * 2
        - ds.scatter_axis_font_size
        - ds.scatter_yaxis_tick_size
        - ds.scatter_ytick_font_size * ds.font_width_height_ratio * shift
    )
    y = -height / 2
    yaxis = canvas.text(
        ds.ann_y_title,
        insert=(x, y),
        fill=ds.label_color,
        style=ds.font_style.format(font_size=ds.scatter_axis_font_size, text_anchor='middle'),
        class_='y_axis_label',
    )
    yaxis.rotate(270, (x, y))
    plot_group.add(yaxis)

    setattr(plot_group, 'height', height)
    return plot_group
