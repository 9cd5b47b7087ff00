import re

import svgwrite


def split_alpha(color):
    """
    split an 8-digit hex color (#RRGGBBAA) into the svg color and its opacity. Other colors are returned as is

    Example:
        >>> split_alpha('#8491B4B2')
        ('#8491B4', 0.6980392156862745)
        >>> split_alpha('black')
        ('black', 1)
    """
    match = re.match(r'^#([0-9a-fA-F]{6})([0-9a-fA-F]{2})$', color)
    if not match:
        return color, 1
    return '#' + match.group(1), int(match.group(2), 16) / 255


def fill_kwargs(color, prefix='fill'):
    """
    svg keyword arguments for a color that may carry an alpha channel

    Example:
        >>> fill_kwargs('#00000080', 'stroke')
        {'stroke': '#000000', 'stroke_opacity': 0.5019607843137255}
    """
    color, opacity = split_alpha(color)
    kwargs = {prefix: color}
    if opacity != 1:
        kwargs[f'{prefix}_opacity'] = opacity
    return kwargs


class Tag(svgwrite.base.BaseElement):
    def __init__(self, elementname, content='', **kwargs):
        self.elementname = elementname
        super(Tag, self).__init__(**kwargs)
        self.content = content

    def get_xml(self):
        xml = super(Tag, self).get_xml()
        xml.text = self.content
        return xml
