"""Warning categories used to report recoverable problems found while parsing
and transforming path data.  Parsing never stops on them; filter them with
the warnings module, e.g. `warnings.simplefilter('error', PathWarning)`."""


class PathWarning(UserWarning):
    """Base class of every svgpathxform warning."""


class PathGrammarWarning(PathWarning):
    """Unknown command letters, commands before the initial moveto, and
    commands cut short by the end of the d-string."""


class DegenerateArcWarning(PathWarning):
    """An arc with a zero length chord or a (nearly) zero radius was replaced
    by a line."""


class SingularMatrixWarning(PathWarning):
    """A matrix with a (nearly) zero determinant could not be inverted."""
