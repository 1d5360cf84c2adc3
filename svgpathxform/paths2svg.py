"""This submodule contains tools for writing transformed paths out as SVG:
a single <path> element (what the command line tool prints) or a standalone
SVG file sized to the paths' bounding box."""

# External dependencies
from math import ceil
from warnings import warn
from svgwrite import Drawing
from svgwrite.path import Path as PathElement

# Internal dependencies
from .path import Path, BoundingBox
from .parser import parse_path


# Default Parameters ##########################################################

_default_stroke = '#000000'
_default_relative_stroke_width = 0.005  # of the larger side of the bbox
_default_margin_size = 0.1
_default_mindim = 600


def _to_d(path, relative):
    if isinstance(path, Path):
        return path.d(relative=relative)
    elif isinstance(path, str):
        return path
    raise TypeError("Expected a Path or a d-string, got {!r}.".format(path))


def _good_attributes(attributes):
    """Drops (with a warning) the attributes svgwrite does not accept on a
    path element."""
    good_attribs = {}
    if not attributes:
        return good_attribs
    for key, val in attributes.items():
        if key == 'd':
            continue
        try:
            PathElement(d='M0,0', debug=True, **{key: val})
            good_attribs[key] = val
        except Exception as e:
            warn("Dropping path attribute {}={!r}: {}".format(key, val, e))
    return good_attribs


def path2element(path, relative=False, attributes=None, end=None):
    """Returns the <path/> element string for `path` (a Path or a d-string).

    :param relative - write the path data with relative coordinates.
    :param attributes - a dictionary of extra attributes for the element
        (e.g. {'fill': 'none', 'stroke-width': 2}).
    :param end - text appended to the path data (e.g. 'z').
    """
    d = _to_d(path, relative)
    if end:
        d += end
    element = PathElement(d=d.rstrip(), debug=False,
                          **_good_attributes(attributes))
    return element.tostring()


def big_bounding_box(paths):
    """returns the (xmin, xmax, ymin, ymax) bounding box of several Paths
    (or d-strings)."""
    box = BoundingBox()
    for p in paths:
        if isinstance(p, str):
            p = parse_path(p)
        box.update(p.bounding_box())
    return box.as_tuple()


def wsvg(paths, filename, relative=False, attributes=None,
         stroke_widths=None, margin_size=_default_margin_size,
         mindim=_default_mindim):
    """Creates an SVG file containing `paths` (Path objects or d-strings).
    The viewBox is the union bounding box of the paths, grown by
    `margin_size` times its size on every side.

    :param attributes - a list of dictionaries of extra attributes, one per
        path.  By default paths are stroked in black and not filled.
    :param stroke_widths - a list of stroke widths, one per path (only used
        when `attributes` is not given; the default is 0.5% of the larger
        side of the bounding box).
    :param mindim - the length, in px, of the smaller side of the document.
    Returns the svgwrite Drawing that was saved.
    """
    paths = list(paths)
    if attributes is not None:
        assert len(attributes) == len(paths)

    xmin, xmax, ymin, ymax = big_bounding_box(paths)
    if xmin is None:
        xmin = xmax = ymin = ymax = 0.0
    dx = xmax - xmin
    dy = ymax - ymin
    if dx == 0:
        dx = 1
    if dy == 0:
        dy = 1

    if not stroke_widths:
        stroke_widths = [max(dx, dy) * _default_relative_stroke_width] * \
            len(paths)
    else:
        assert len(stroke_widths) == len(paths)
    max_stroke_width = max(stroke_widths) if stroke_widths else 0

    xmin -= margin_size*dx + max_stroke_width/2
    ymin -= margin_size*dy + max_stroke_width/2
    dx += 2*margin_size*dx + max_stroke_width
    dy += 2*margin_size*dy + max_stroke_width
    viewbox = "%s %s %s %s" % (xmin, ymin, dx, dy)

    if dx > dy:
        szx = str(mindim) + 'px'
        szy = str(int(ceil(mindim * dy / dx))) + 'px'
    else:
        szx = str(int(ceil(mindim * dx / dy))) + 'px'
        szy = str(mindim) + 'px'

    dwg = Drawing(filename=filename, size=(szx, szy), debug=False,
                  viewBox=viewbox)
    for i, p in enumerate(paths):
        ps = _to_d(p, relative).rstrip()
        if attributes:
            good_attribs = _good_attributes(attributes[i])
        else:
            good_attribs = {'stroke': _default_stroke,
                            'stroke-width': str(stroke_widths[i]),
                            'fill': 'none'}
        dwg.add(dwg.path(d=ps, **good_attribs))
    dwg.save()
    return dwg
