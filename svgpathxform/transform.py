"""This submodule contains the Matrix class, a 2D affine transformation, and
the parse_transform() function used to convert SVG transform attribute
strings into Matrix objects.

A Matrix holds the six SVG matrix values (a, b, c, d, e, f), i.e. the
homogeneous transformation

    | a  c  e |
    | b  d  f |
    | 0  0  1 |

that sends (x, y) to (a*x + c*y + e, b*x + d*y + f).  Points are complex
numbers, as everywhere else in svgpathxform.

Elliptical arcs cannot be transformed by multiplying their parameters by a
matrix: the radii of an Arc are kept and its rotation is offset by the
`angle` carried by the Matrix (see Matrix.angle)."""

# External dependencies
from math import atan2, degrees, radians, tan, trunc
from warnings import warn
import numpy as np

# Internal dependencies
from .errors import SingularMatrixWarning
from .misctools import isclose


# Default Parameters ##########################################################

# matrices with a smaller determinant are not inverted
SINGULAR_EPSILON = 1e-6

# (cos, sin) for the rotations that should not suffer from trigonometric drift
_EXACT_ROTATIONS = {0: (1.0, 0.0), 90: (0.0, 1.0),
                    180: (-1.0, 0.0), 270: (0.0, -1.0)}


class Matrix(object):
    def __init__(self, a=1.0, b=0.0, c=0.0, d=1.0, e=0.0, f=0.0, angle=None):
        """
        Parameters
        ----------
        a, b, c, d, e, f : float
            The SVG matrix values, in the order used by the SVG
            `matrix(a b c d e f)` transform function.
        angle : float or None
            The rotation (in degrees) added to the rotation of every Arc
            transformed by this matrix.  By default this is the rotation
            angle derived from the matrix itself (see rotation_angle()).
        """
        self._m = np.array([[a, c, e],
                            [b, d, f],
                            [0.0, 0.0, 1.0]], dtype=float)
        self._angle = angle

    @classmethod
    def from_array(cls, arr, angle=None):
        """Builds a Matrix from a 3x3 (or 2x3) homogeneous array."""
        arr = np.asarray(arr, dtype=float)
        if arr.shape not in ((3, 3), (2, 3)):
            raise ValueError("Expected a 3x3 or 2x3 array, got shape "
                             "{}.".format(arr.shape))
        return cls(arr[0, 0], arr[1, 0], arr[0, 1], arr[1, 1],
                   arr[0, 2], arr[1, 2], angle=angle)

    @classmethod
    def from_values(cls, values, angle=None):
        """Builds a Matrix from any sequence of six numbers (or returns
        `values` itself if it already is a Matrix)."""
        if isinstance(values, Matrix):
            return values
        values = [float(v) for v in values]
        if len(values) != 6:
            raise ValueError("A matrix needs 6 values, found {}: {}"
                             "".format(len(values), values))
        return cls(*values, angle=angle)

    # Constructors ############################################################

    @classmethod
    def identity(cls):
        return cls()

    @classmethod
    def translation(cls, tx, ty=0.0):
        return cls(e=tx, f=ty)

    @classmethod
    def scaling(cls, sx, sy=None):
        """If `sy` is not specified, it is assumed to be equal to `sx`."""
        if sy is None:
            sy = sx
        return cls(a=sx, d=sy)

    @classmethod
    def skew_x(cls, degs):
        return cls(c=tan(radians(degs)))

    @classmethod
    def skew_y(cls, degs):
        return cls(b=tan(radians(degs)))

    @classmethod
    def rotation(cls, degs):
        """Returns the CCW rotation by `degs` degrees about the origin.
        Multiples of 90 degrees give exact matrices."""
        exact = _EXACT_ROTATIONS.get(degs % 360)
        if exact is not None:
            cs, sn = exact
        else:
            phi = radians(degs)
            cs, sn = np.cos(phi).item(), np.sin(phi).item()
        return cls(cs, sn, -sn, cs, angle=float(degs))

    # Accessors ###############################################################

    @property
    def values(self):
        """The six SVG matrix values (a, b, c, d, e, f)."""
        m = self._m
        return (m[0, 0].item(), m[1, 0].item(), m[0, 1].item(),
                m[1, 1].item(), m[0, 2].item(), m[1, 2].item())

    @property
    def array(self):
        """A copy of the 3x3 homogeneous numpy array."""
        return self._m.copy()

    @property
    def angle(self):
        """The rotation offset (in degrees) applied to Arc rotations."""
        if self._angle is None:
            return self.rotation_angle()
        return self._angle

    @angle.setter
    def angle(self, degs):
        self._angle = None if degs is None else float(degs)

    def rotation_angle(self):
        """returns the rotation angle, in degrees, of the matrix, i.e. the
        direction in which it sends the x-axis."""
        a, b = self._m[0, 0].item(), self._m[1, 0].item()
        return degrees(atan2(b, a))

    def determinant(self):
        m = self._m
        return (m[0, 0] * m[1, 1] - m[0, 1] * m[1, 0]).item()

    def is_identity(self):
        """True if every value is close to the identity's (see
        misctools.isclose)."""
        return all(isclose(v, w) for v, w in
                   zip(self.values, (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)))

    def __repr__(self):
        return 'Matrix({}, {}, {}, {}, {}, {})'.format(*self.values)

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return np.array_equal(self._m, other._m) and self.angle == other.angle

    def __ne__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return not self == other

    def __iter__(self):
        return iter(self.values)

    # Algebra #################################################################

    def __matmul__(self, other):
        """Matrix product; `A @ B` applies B first, then A."""
        if not isinstance(other, Matrix):
            return NotImplemented
        return Matrix.from_array(self._m.dot(other._m))

    def compose(self, other):
        """returns the transformation that applies self first, then
        `other`."""
        return other @ self

    def premultiply(self, other):
        """returns the transformation that applies `other` first, then
        self."""
        return self @ other

    def inverse(self):
        """returns the inverse transformation.  A (nearly) singular matrix has
        no usable inverse; the identity is returned instead."""
        det = self.determinant()
        if -SINGULAR_EPSILON < det < SINGULAR_EPSILON:
            warn("Matrix {!r} is singular (determinant {}); using the "
                 "identity instead of its inverse.".format(self, det),
                 SingularMatrixWarning, stacklevel=2)
            return Matrix()
        a, b, c, d, e, f = self.values
        invdet = 1.0 / det
        return Matrix(d * invdet, -b * invdet,
                      -c * invdet, a * invdet,
                      (c * f - d * e) * invdet, (b * e - a * f) * invdet)

    def apply_point(self, z):
        """Transforms the point `z` (a complex number), translation
        included."""
        v = self._m.dot((z.real, z.imag, 1.0))
        return complex(v[0].item(), v[1].item())

    def apply_vector(self, z):
        """Transforms the vector `z` (a complex number); translation is
        ignored."""
        v = self._m.dot((z.real, z.imag, 0.0))
        return complex(v[0].item(), v[1].item())

    def __call__(self, z):
        return self.apply_point(z)


def resolve_transform(matrix=None, angle=None):
    """Combines an optional matrix and an optional rotation angle (degrees)
    into the Matrix used by the parser.

    * angle only: the rotation matrix for that angle.
    * matrix only: the matrix, with its derived rotation angle.
    * both: the matrix.  The explicit angle is kept if it agrees with the
      matrix (same integer part as the derived angle); otherwise the angle
      derived from the matrix is used.
    * neither: the identity.
    """
    if matrix is None:
        if angle is None:
            return Matrix()
        return Matrix.rotation(angle)

    tf = Matrix.from_values(matrix)
    derived = tf.rotation_angle()
    if angle is not None and trunc(angle) == trunc(derived):
        resolved = float(angle)
    else:
        resolved = derived
    return Matrix(*tf.values, angle=resolved)


def _check_num_parsed_values(values, allowed):
    if not any(num == len(values) for num in allowed):
        if len(allowed) > 1:
            warn('Expected one of the following number of values {0}, but '
                 'found {1} values instead: {2}'
                 .format(allowed, len(values), values))
        elif allowed[0] != 1:
            warn('Expected {0} values, found {1}: {2}'
                 .format(allowed[0], len(values), values))
        else:
            warn('Expected 1 value, found {0}: {1}'
                 .format(len(values), values))
        return False
    return True


def _parse_transform_substr(transform_substr):

    type_str, value_str = transform_substr.split('(')
    type_str = type_str.strip(' \t\n\r,')
    value_str = value_str.replace(',', ' ')
    values = list(map(float, value_str.split()))

    if type_str == 'matrix':
        if not _check_num_parsed_values(values, [6]):
            return Matrix()
        return Matrix(*values)

    elif type_str == 'translate':
        if not _check_num_parsed_values(values, [1, 2]):
            return Matrix()
        return Matrix.translation(*values)

    elif type_str == 'scale':
        if not _check_num_parsed_values(values, [1, 2]):
            return Matrix()
        return Matrix.scaling(*values)

    elif type_str == 'rotate':
        if not _check_num_parsed_values(values, [1, 3]):
            return Matrix()
        rotate = Matrix.rotation(values[0])
        if len(values) == 1:
            return rotate
        cx, cy = values[1:3]
        # rotate about (cx, cy): move the centre to the origin and back
        return (Matrix.translation(cx, cy) @ rotate @
                Matrix.translation(-cx, -cy))

    elif type_str == 'skewX':
        if not _check_num_parsed_values(values, [1]):
            return Matrix()
        return Matrix.skew_x(values[0])

    elif type_str == 'skewY':
        if not _check_num_parsed_values(values, [1]):
            return Matrix()
        return Matrix.skew_y(values[0])

    # Return an identity matrix if the type of transform is unknown, and warn
    # the user
    warn('Unknown SVG transform type: {0}'.format(type_str))
    return Matrix()


def parse_transform(transform_str):
    """Converts a valid SVG transformation string into a Matrix.
    If the string is empty or None, this returns the identity.
    As in SVG, "A B" means B is applied first, then A."""
    if not transform_str:
        return Matrix()
    elif not isinstance(transform_str, str):
        raise TypeError('Must provide a string to parse')

    total_transform = Matrix()
    # Skip the last element, because it should be empty
    transform_substrs = transform_str.split(')')[:-1]
    for substr in transform_substrs:
        total_transform = total_transform @ _parse_transform_substr(substr)

    return total_transform
