"""This submodule contains the PathParser class and the parse_path() function
used to convert SVG path element d-strings into svgpathxform Path objects,
transformed on the fly by an affine Matrix."""

# External dependencies
from types import MappingProxyType
from warnings import warn

# Internal dependencies
from .errors import PathGrammarWarning, DegenerateArcWarning
from .path import (Path, Subpath, BoundingBox, Line, QuadraticBezier,
                   SmoothQuadraticBezier, CubicBezier, SmoothCubicBezier, Arc,
                   transform)
from .scanner import next_item, next_arc_flag, is_coordinate, str2float
from .transform import resolve_transform


# Default Parameters ##########################################################

# arcs with a shorter chord or a smaller radius are stored as lines
ARC_EPSILON = 1e-6

# set to False to silence the PathGrammarWarnings
GRAMMAR_WARNING_ON = True

# number of arguments of each command
NUM_ARGS = MappingProxyType({
    'M': 2, 'm': 2, 'Z': 0, 'z': 0, 'L': 2, 'l': 2, 'H': 1, 'h': 1,
    'V': 1, 'v': 1, 'C': 6, 'c': 6, 'S': 4, 's': 4, 'Q': 4, 'q': 4,
    'T': 2, 't': 2, 'A': 7, 'a': 7,
})

# indices of the large-arc and sweep flags among the arguments of A and a
_ARC_FLAG_ARGS = (3, 4)

# curve families, used to decide if S and T reflect the last control point
_CUBIC = 'cubic'
_QUADRATIC = 'quadratic'


class PathParser(object):
    """State machine reading one d-string at a time.

    The parser collects the commands of the subpath being read in a raw
    buffer (`start` plus a list of segments, in untransformed coordinates).
    When the subpath ends (on a moveto, a closepath or the end of the
    d-string) it is transformed by `matrix` and appended to the output Path.

    A PathParser must not be shared between threads; use one instance per
    d-string being parsed.
    """

    def __init__(self, matrix=None, angle=None):
        """
        Parameters
        ----------
        matrix : Matrix, sequence of 6 floats, or None
            The transformation applied to every point.
        angle : float or None
            The rotation, in degrees, added to every arc rotation.  If a
            matrix is also given and the two disagree, the angle derived
            from the matrix is used instead (see resolve_transform()).
        """
        self.matrix = resolve_transform(matrix, angle)
        self._reset()

    def _reset(self):
        self.path = Path()
        self.current_pos = 0j
        self.last_control = 0j      # used by S and T
        self.last_family = None     # family of the last curve command
        self.command = None
        self.args = []
        self.num_args = 0
        self.closed = False
        self.initialized = False    # True once a moveto has been executed
        self.skipping = False       # True after an unknown command
        self.start = None
        self.segments = []
        self._warnings = []

    # Diagnostics #############################################################

    def _grammar_warning(self, message):
        if GRAMMAR_WARNING_ON:
            self._warnings.append((message, PathGrammarWarning))

    def _flush_warnings(self):
        # Only called from _parse(), which is only called by the public entry
        # points, so stacklevel 4 is the code that called them.
        for message, category in self._warnings:
            warn(message, category, stacklevel=4)
        self._warnings = []

    # Raw subpath buffer ######################################################

    def _reset_subpath(self):
        self.start = None
        self.segments = []

    def _add_segment(self, segment):
        if self.start is not None:
            self.segments.append(segment)

    def _add_subpath(self, closed):
        """Transforms the raw subpath and appends it to the output Path.
        A subpath without any segment is dropped."""
        if self.start is None or not self.segments:
            return
        if closed:
            self.segments.append(Line(self.start))
        raw = Subpath(self.start, self.segments, closed=closed,
                      bbox=BoundingBox())
        self.path.append(transform(raw, self.matrix))

    # Commands ################################################################

    def _next_pos(self, x, y, relative):
        pos = x + y*1j
        if relative:
            pos += self.current_pos
        return pos

    def _move_to(self, args, relative):
        self.current_pos = self._next_pos(args[0], args[1], relative)
        self.start = self.current_pos
        self.segments = []
        self.last_control = self.current_pos
        self.last_family = None
        self.initialized = True
        # Implicit moveto commands are treated as lineto commands.
        self.command = 'l' if relative else 'L'
        self.num_args = NUM_ARGS[self.command]

    def _line_to(self, pos):
        self._add_segment(Line(pos))
        self.current_pos = pos
        self.last_control = pos
        self.last_family = None

    def _cubic_to(self, args, relative):
        control1 = self._next_pos(args[0], args[1], relative)
        control2 = self._next_pos(args[2], args[3], relative)
        end = self._next_pos(args[4], args[5], relative)
        self._add_segment(CubicBezier(control1, control2, end))
        self._curve_done(control2, end, _CUBIC)

    def _smooth_cubic_to(self, args, relative):
        # The first control point (the reflection of the last one) is not
        # stored, d() writes an S command back.
        control2 = self._next_pos(args[0], args[1], relative)
        end = self._next_pos(args[2], args[3], relative)
        self._add_segment(SmoothCubicBezier(control2, end))
        self._curve_done(control2, end, _CUBIC)

    def _quad_to(self, args, relative):
        control = self._next_pos(args[0], args[1], relative)
        end = self._next_pos(args[2], args[3], relative)
        self._add_segment(QuadraticBezier(control, end))
        self._curve_done(control, end, _QUADRATIC)

    def _smooth_quad_to(self, args, relative):
        control = self.reflected_control(_QUADRATIC)
        end = self._next_pos(args[0], args[1], relative)
        self._add_segment(SmoothQuadraticBezier(end))
        self._curve_done(control, end, _QUADRATIC)

    def _arc_to(self, args, relative):
        radius = abs(args[0]) + 1j*abs(args[1])
        end = self._next_pos(args[5], args[6], relative)
        if abs(self.current_pos - end) < ARC_EPSILON or \
                radius.real < ARC_EPSILON or radius.imag < ARC_EPSILON:
            self._warnings.append((
                "Degenerate arc from {} to {} with radius {} replaced by a "
                "line.".format(self.current_pos, end, radius),
                DegenerateArcWarning))
            self._line_to(end)
            return
        self._add_segment(Arc(radius, args[2], args[3] != 0, args[4] != 0,
                              end))
        self.current_pos = end
        self.last_control = end
        self.last_family = None

    def _curve_done(self, control, end, family):
        self.current_pos = end
        self.last_control = control
        self.last_family = family

    def reflected_control(self, family):
        """returns the implicit control point of a smooth curve of the given
        family: the reflection of the last control point about the current
        point if the previous command was of the same family, otherwise the
        current point itself."""
        if self.last_family != family:
            return self.current_pos
        return 2*self.current_pos - self.last_control

    def _execute(self):
        cmd, args = self.command, self.args
        relative = cmd.islower()
        c = cmd.upper()

        if c == 'M':
            self._move_to(args, relative)
        elif c == 'L':
            self._line_to(self._next_pos(args[0], args[1], relative))
        elif c == 'H':
            x = args[0] + self.current_pos.real if relative else args[0]
            self._line_to(x + self.current_pos.imag*1j)
        elif c == 'V':
            y = args[0] + self.current_pos.imag if relative else args[0]
            self._line_to(self.current_pos.real + y*1j)
        elif c == 'C':
            self._cubic_to(args, relative)
        elif c == 'S':
            self._smooth_cubic_to(args, relative)
        elif c == 'Q':
            self._quad_to(args, relative)
        elif c == 'T':
            self._smooth_quad_to(args, relative)
        elif c == 'A':
            self._arc_to(args, relative)
        # numbers following a closepath are ignored

        self.args = []

    def _close_path(self):
        self.closed = True
        if self.start is not None:
            # Move current point to first point
            self.current_pos = self.start
            self.last_control = self.start
            self.last_family = None
            self._add_subpath(self.closed)
        # Start new subpath, continuing from the point the last one started.
        self._reset_subpath()
        self.start = self.current_pos
        self.closed = False
        self.args = []

    def _new_command(self, cmd):
        if cmd in 'Mm':
            # Commit path.
            if self.start is not None:
                self._add_subpath(self.closed)
            # Start new subpath.
            self._reset_subpath()
            self.closed = False
            self.args = []
            self.skipping = False
        elif self.skipping:
            return
        elif not self.initialized:
            # Do not allow other commands until the initial moveto.
            self._grammar_warning("Command {!r} before the initial moveto "
                                  "ignored.".format(cmd))
            self.command = None
            return

        num_args = NUM_ARGS.get(cmd)
        if num_args is None:
            self._grammar_warning("Unknown command {!r}; skipping to the "
                                  "next moveto.".format(cmd))
            self.command = None
            self.num_args = 0
            self.skipping = True
            return

        if self.args:
            self._dangling_args_warning()
            self.args = []
        self.command = cmd
        self.num_args = num_args
        if cmd in 'Zz':
            self._close_path()

    def _dangling_args_warning(self):
        self._grammar_warning("Incomplete {!r} command dropped (arguments "
                              "{}).".format(self.command, self.args))

    def _next_item(self, s, pos):
        if self.command in ('A', 'a') and len(self.args) in _ARC_FLAG_ARGS:
            item, pos = next_arc_flag(s, pos)
            if item:
                return item, pos
        return next_item(s, pos)

    def parse(self, pathdef):
        """Parses the d-string `pathdef` and returns the resulting Path."""
        return self._parse(pathdef)

    def _parse(self, pathdef):
        if not isinstance(pathdef, str):
            raise TypeError('Must provide a string to parse')
        self._reset()

        pos = 0
        while True:
            item, pos = self._next_item(pathdef, pos)
            if not item:
                break
            if is_coordinate(item):
                if self.command is None or self.skipping:
                    continue
                self.args.append(str2float(item))
                if len(self.args) >= self.num_args:
                    self._execute()
            else:
                self._new_command(item)
            self._flush_warnings()

        if self.args and self.command is not None:
            self._dangling_args_warning()
            self.args = []
        # Commit path.
        self._add_subpath(self.closed)
        self._flush_warnings()
        return self.path


def parse_path(pathdef, matrix=None, angle=None):
    """Parses the d-string `pathdef` into a Path, transforming every subpath
    by `matrix` (and offsetting arc rotations by `angle`).  See
    PathParser."""
    return PathParser(matrix, angle)._parse(pathdef)


def transform_d(pathdef, matrix=None, angle=None, relative=False):
    """Parses and transforms `pathdef`, then writes it back.  Returns the new
    d-string and the bounding box (xmin, xmax, ymin, ymax) of the
    transformed path."""
    path = PathParser(matrix, angle)._parse(pathdef)
    return path.d(relative=relative), path.bbox()
