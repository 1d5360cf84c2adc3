"""This submodule contains the class definitions of the segment classes
(Line, QuadraticBezier, SmoothQuadraticBezier, CubicBezier, SmoothCubicBezier
and Arc), of Subpath and Path, the transform() function and the d-string
generation for Subpath and Path objects.

Segments only store what their SVG command stores: they do not know their
start point, which is the end of the previous segment (or the start of the
Subpath).  In particular the smooth segments (S and T commands) keep only
their explicit control point, if any, so that the command letter read from
the input survives a parse/transform/d() round trip."""

# External dependencies
from collections.abc import MutableSequence, Sequence

# Internal dependencies
from .misctools import round3, format_number, fmt, BugException


# Segments ####################################################################

class Line(object):
    """Straight line to `end`.  H and V commands are stored as Lines."""
    letter = 'L'

    def __init__(self, end):
        self.end = end

    def __repr__(self):
        return 'Line(end=%s)' % (self.end,)

    def __eq__(self, other):
        if not isinstance(other, Line):
            return NotImplemented
        return self.end == other.end

    def points(self):
        """returns the points stored by the segment."""
        return self.end,


class QuadraticBezier(object):
    letter = 'Q'

    def __init__(self, control, end):
        self.control = control
        self.end = end

    def __repr__(self):
        return 'QuadraticBezier(control=%s, end=%s)' % (self.control,
                                                        self.end)

    def __eq__(self, other):
        if not isinstance(other, QuadraticBezier):
            return NotImplemented
        return self.control == other.control and self.end == other.end

    def points(self):
        """returns the points stored by the segment."""
        return self.control, self.end


class SmoothQuadraticBezier(object):
    """Quadratic Bezier curve whose control point is the reflection of the
    previous one (T command).  Only the end point is stored."""
    letter = 'T'

    def __init__(self, end):
        self.end = end

    def __repr__(self):
        return 'SmoothQuadraticBezier(end=%s)' % (self.end,)

    def __eq__(self, other):
        if not isinstance(other, SmoothQuadraticBezier):
            return NotImplemented
        return self.end == other.end

    def points(self):
        """returns the points stored by the segment."""
        return self.end,


class CubicBezier(object):
    letter = 'C'

    def __init__(self, control1, control2, end):
        self.control1 = control1
        self.control2 = control2
        self.end = end

    def __repr__(self):
        return 'CubicBezier(control1=%s, control2=%s, end=%s)' % (
            self.control1, self.control2, self.end)

    def __eq__(self, other):
        if not isinstance(other, CubicBezier):
            return NotImplemented
        return self.control1 == other.control1 and \
            self.control2 == other.control2 and self.end == other.end

    def points(self):
        """returns the points stored by the segment."""
        return self.control1, self.control2, self.end


class SmoothCubicBezier(object):
    """Cubic Bezier curve whose first control point is the reflection of the
    previous one (S command).  Only the second control point and the end
    point are stored."""
    letter = 'S'

    def __init__(self, control2, end):
        self.control2 = control2
        self.end = end

    def __repr__(self):
        return 'SmoothCubicBezier(control2=%s, end=%s)' % (self.control2,
                                                           self.end)

    def __eq__(self, other):
        if not isinstance(other, SmoothCubicBezier):
            return NotImplemented
        return self.control2 == other.control2 and self.end == other.end

    def points(self):
        """returns the points stored by the segment."""
        return self.control2, self.end


class Arc(object):
    letter = 'A'

    def __init__(self, radius, rotation, large_arc, sweep, end):
        """
        Parameters
        ----------
        radius : complex
            rx + 1j*ry, the radii of the ellipse.  Negative signs are
            dropped.
        rotation : float
            The CCW angle (in degrees) from the x-axis of the current
            coordinate system to the x-axis of the ellipse.
        large_arc : bool
            Whether the longer of the two candidate arcs is used.
        sweep : bool
            Whether the arc is drawn in the positive-angle direction.
        end : complex
            The end point of the curve.
        """
        self.radius = abs(radius.real) + 1j*abs(radius.imag)
        self.rotation = rotation
        self.large_arc = bool(large_arc)
        self.sweep = bool(sweep)
        self.end = end

    def __repr__(self):
        params = (self.radius, self.rotation, self.large_arc, self.sweep,
                  self.end)
        return ("Arc(radius={}, rotation={}, large_arc={}, sweep={}, "
                "end={})".format(*params))

    def __eq__(self, other):
        if not isinstance(other, Arc):
            return NotImplemented
        return self.end == other.end and self.radius == other.radius \
            and self.rotation == other.rotation \
            and self.large_arc == other.large_arc and self.sweep == other.sweep

    def points(self):
        """returns the points stored by the segment (the radii are not
        points)."""
        return self.end,


SEGMENT_CLASSES = (Line, QuadraticBezier, SmoothQuadraticBezier,
                   CubicBezier, SmoothCubicBezier, Arc)


def is_path_segment(seg):
    return isinstance(seg, SEGMENT_CLASSES)


# Bounding boxes ##############################################################

class BoundingBox(object):
    """Running min/max of the points added to it.  Empty until the first
    point is added."""

    def __init__(self, *points):
        self.xmin = self.xmax = self.ymin = self.ymax = None
        for pt in points:
            self.add(pt)

    def __repr__(self):
        return 'BoundingBox(xmin={}, xmax={}, ymin={}, ymax={})'.format(
            self.xmin, self.xmax, self.ymin, self.ymax)

    def __bool__(self):
        return self.xmin is not None

    def add(self, pt):
        x, y = pt.real, pt.imag
        if self.xmin is None:
            self.xmin = self.xmax = x
            self.ymin = self.ymax = y
            return
        self.xmin = min(self.xmin, x)
        self.xmax = max(self.xmax, x)
        self.ymin = min(self.ymin, y)
        self.ymax = max(self.ymax, y)

    def update(self, other):
        """Grows self to contain the BoundingBox `other`."""
        if other:
            self.add(other.xmin + 1j*other.ymin)
            self.add(other.xmax + 1j*other.ymax)

    def as_tuple(self):
        """returns the box in the form (xmin, xmax, ymin, ymax)."""
        return self.xmin, self.xmax, self.ymin, self.ymax


# Subpaths and Paths ##########################################################

class Subpath(Sequence):
    """An immutable sequence of path segments starting at `start` (the point
    of the moveto command that opened it).  If `closed` is True the last
    segment is the line back to `start` that was added by the closepath
    command.  `closed` does not change the output of d()."""

    def __init__(self, start, segments=(), closed=False, bbox=None):
        self._start = start
        self._segments = tuple(segments)
        self._closed = bool(closed)
        if bbox is None:
            bbox = BoundingBox(*self.points())
        self._bbox = bbox

    def __getitem__(self, index):
        return self._segments[index]

    def __len__(self):
        return len(self._segments)

    def __repr__(self):
        return "Subpath(start={}, closed={},\n        {})".format(
            self._start, self._closed,
            ",\n        ".join(repr(x) for x in self._segments))

    def __eq__(self, other):
        if not isinstance(other, Subpath):
            return NotImplemented
        return self._start == other._start and \
            self._closed == other._closed and \
            self._segments == other._segments

    __hash__ = None

    @property
    def start(self):
        return self._start

    @property
    def end(self):
        if not self._segments:
            return self._start
        return self._segments[-1].end

    @property
    def closed(self):
        return self._closed

    def points(self):
        """Yields the start point, then every point stored by the segments
        (control points included)."""
        yield self._start
        for seg in self._segments:
            for pt in seg.points():
                yield pt

    def bbox(self):
        """returns a bounding box for the subpath in the form
        (xmin, xmax, ymin, ymax)."""
        return self._bbox.as_tuple()

    def d(self, relative=False):
        """Returns a d-string for the subpath.  Coordinates are rounded (see
        misctools.round3), lines parallel to an axis are written as H or V
        commands, and the leading moveto is always absolute.
        If `relative` is True, every command but the leading moveto is
        written with relative coordinates.
        The line that closes a closed subpath is written like any other
        line; no Z command is ever written."""
        cx, cy = round3(self._start.real), round3(self._start.imag)
        parts = ['M{},{} '.format(format_number(cx), format_number(cy))]

        for segment in self._segments:
            x, y = round3(segment.end.real), round3(segment.end.imag)

            if isinstance(segment, Line):
                if relative:
                    parts.append(_relative_line(x, y, cx, cy))
                else:
                    parts.append(_absolute_line(x, y, cx, cy))

            elif isinstance(segment, Arc):
                args = (segment.radius.real, segment.radius.imag,
                        segment.rotation)
                args = [fmt(v) for v in args]
                args += [int(segment.large_arc), int(segment.sweep)]
                if relative:
                    args += [_delta(x, cx), _delta(y, cy)]
                    parts.append('a{},{} {} {:d} {:d} {},{} '.format(*args))
                else:
                    args += [format_number(x), format_number(y)]
                    parts.append('A{},{} {} {:d} {:d} {},{} '.format(*args))

            elif is_path_segment(segment):
                pairs = []
                for pt in segment.points():
                    px, py = round3(pt.real), round3(pt.imag)
                    if relative:
                        pairs.append('{},{}'.format(_delta(px, cx),
                                                    _delta(py, cy)))
                    else:
                        pairs.append('{},{}'.format(format_number(px),
                                                    format_number(py)))
                letter = segment.letter.lower() if relative else \
                    segment.letter
                parts.append(letter + ' '.join(pairs) + ' ')

            else:
                raise BugException

            cx, cy = x, y

        return ''.join(parts)


def _delta(v, current):
    return fmt(v - current)


def _absolute_line(x, y, cx, cy):
    if x == cx:
        return 'V{} '.format(format_number(y))
    if y == cy:
        return 'H{} '.format(format_number(x))
    return 'L{},{} '.format(format_number(x), format_number(y))


def _relative_line(x, y, cx, cy):
    # same tests as _absolute_line(); a null move is dropped
    if x == cx:
        if y == cy:
            return ''
        return 'v{} '.format(_delta(y, cy))
    if y == cy:
        return 'h{} '.format(_delta(x, cx))
    return 'l{},{} '.format(_delta(x, cx), _delta(y, cy))


class Path(MutableSequence):
    """A Path is a sequence of subpaths, in the order they were finished by
    the parser (which is the order they appear in the d-string)."""

    def __init__(self, *subpaths):
        self._subpaths = list(subpaths)

    def __getitem__(self, index):
        return self._subpaths[index]

    def __setitem__(self, index, value):
        self._subpaths[index] = value

    def __delitem__(self, index):
        del self._subpaths[index]

    def __iter__(self):
        return self._subpaths.__iter__()

    def __contains__(self, x):
        return self._subpaths.__contains__(x)

    def insert(self, index, value):
        if not isinstance(value, Subpath):
            raise TypeError("A Path only holds Subpath objects.")
        self._subpaths.insert(index, value)

    def __len__(self):
        return len(self._subpaths)

    def __repr__(self):
        return "Path({})".format(
            ",\n     ".join(repr(x) for x in self._subpaths))

    def __eq__(self, other):
        if not isinstance(other, Path):
            return NotImplemented
        return self._subpaths == other._subpaths

    __hash__ = None

    def segments(self):
        """Yields every segment of every subpath."""
        for subpath in self._subpaths:
            for seg in subpath:
                yield seg

    def bounding_box(self):
        """returns the union of the BoundingBoxes of the subpaths."""
        box = BoundingBox()
        for subpath in self._subpaths:
            box.update(subpath._bbox)
        return box

    def bbox(self):
        """returns a bounding box for the input Path object in the form
        (xmin, xmax, ymin, ymax).  An empty Path has no bounding box and
        returns (None, None, None, None)."""
        return self.bounding_box().as_tuple()

    def d(self, relative=False):
        """Returns a path d-string for the path object, one moveto per
        subpath.  See Subpath.d()."""
        return ''.join(subpath.d(relative=relative)
                       for subpath in self._subpaths)


# Geometric ###################################################################

def transform(curve, tf):
    """Transforms the curve (a Path, Subpath or segment) by the Matrix `tf`.
    Every point goes through tf.apply_point().  Arc radii are kept as is;
    an Arc's rotation is offset by tf.angle."""
    if isinstance(curve, Path):
        return Path(*[transform(subpath, tf) for subpath in curve])
    elif isinstance(curve, Subpath):
        start = tf.apply_point(curve.start)
        box = BoundingBox(start)
        segments = []
        for seg in curve:
            new_seg = transform(seg, tf)
            for pt in new_seg.points():
                box.add(pt)
            segments.append(new_seg)
        return Subpath(start, segments, closed=curve.closed, bbox=box)
    elif isinstance(curve, Line):
        return Line(tf.apply_point(curve.end))
    elif isinstance(curve, SmoothQuadraticBezier):
        return SmoothQuadraticBezier(tf.apply_point(curve.end))
    elif isinstance(curve, QuadraticBezier):
        return QuadraticBezier(tf.apply_point(curve.control),
                               tf.apply_point(curve.end))
    elif isinstance(curve, SmoothCubicBezier):
        return SmoothCubicBezier(tf.apply_point(curve.control2),
                                 tf.apply_point(curve.end))
    elif isinstance(curve, CubicBezier):
        return CubicBezier(tf.apply_point(curve.control1),
                           tf.apply_point(curve.control2),
                           tf.apply_point(curve.end))
    elif isinstance(curve, Arc):
        return Arc(curve.radius, curve.rotation + tf.angle,
                   curve.large_arc, curve.sweep, tf.apply_point(curve.end))
    else:
        raise TypeError("Input `curve` should be a Path, Subpath, Line, "
                        "QuadraticBezier, SmoothQuadraticBezier, "
                        "CubicBezier, SmoothCubicBezier or Arc object.")
