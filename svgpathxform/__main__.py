"""Command line tool: transforms the d-string of an SVG path and prints it
back as a <path/> element, with absolute or relative coordinates.

Example
-------
    $ svgpathxform -a 90 "M0,0 L10,0 A5,3 0 0 1 20,0"
    <path d="M0,0 V10 A5,3 90 0 1 0,20" />
"""

# External dependencies
import argparse
import re
import sys
from warnings import warn

# Internal dependencies
from .parser import parse_path
from .paths2svg import path2element, wsvg
from .scanner import str2float
from .transform import parse_transform

_SPLIT_RE = re.compile(r"[\s,]+")


def parse_matrix(text):
    """Reads the six values of a -m option.  Returns None (with a warning)
    if fewer than six numbers are given."""
    values = [str2float(v) for v in _SPLIT_RE.split(text.strip()) if v]
    if len(values) < 6:
        warn("Incomplete matrix {!r} ignored.".format(text))
        return None
    return values[:6]


def parse_attribute(text):
    key, sep, value = text.partition('=')
    if not sep or not key:
        raise argparse.ArgumentTypeError(
            "expected KEY=VALUE, got {!r}".format(text))
    return key.strip(), value.strip().strip('"\'')


def build_parser():
    parser = argparse.ArgumentParser(
        prog='svgpathxform',
        description="Transform SVG path data and write it back with "
                    "absolute or relative coordinates.")
    parser.add_argument('d', help="the path data (d attribute) to transform")
    parser.add_argument('-m', '--matrix', metavar='"A B C D E F"',
                        help="affine matrix, as in matrix(a b c d e f)")
    parser.add_argument('-a', '--angle', type=float, metavar='DEG',
                        help="rotation angle in degrees; with -m, it is used "
                             "for arcs only if it agrees with the matrix")
    parser.add_argument('-t', '--transform', metavar='TRANSFORM',
                        help="SVG transform list, e.g. 'rotate(30) "
                             "translate(5,0)' (ignored if -m is given)")
    parser.add_argument('-r', '--relative', action='store_true',
                        help="write relative coordinates")
    parser.add_argument('-p', '--attr', action='append', default=[],
                        type=parse_attribute, metavar='KEY=VALUE',
                        help="extra attribute of the path element "
                             "(repeatable)")
    parser.add_argument('-e', '--end', default=None, metavar='TEXT',
                        help="text added at the end of the path data "
                             "(e.g. z)")
    parser.add_argument('--raw', action='store_true',
                        help="print the path data only, not an element")
    parser.add_argument('--bbox', action='store_true',
                        help="print the bounding box to stderr")
    parser.add_argument('-o', '--output', metavar='FILE',
                        help="write to FILE instead of the standard output; "
                             "a .svg file gets a complete SVG document")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    matrix = None
    if args.matrix is not None:
        matrix = parse_matrix(args.matrix)
    if matrix is None and args.transform:
        matrix = parse_transform(args.transform).values

    try:
        path = parse_path(args.d, matrix=matrix, angle=args.angle)
    except MemoryError:
        sys.stderr.write("svgpathxform: out of memory\n")
        return 1

    attributes = dict(args.attr)
    if args.output and args.output.lower().endswith('.svg'):
        wsvg([path], args.output, relative=args.relative,
             attributes=[attributes] if attributes else None)
    else:
        if args.raw:
            text = path.d(relative=args.relative)
            if args.end:
                text += args.end
            text = text.rstrip()
        else:
            text = path2element(path, relative=args.relative,
                                attributes=attributes, end=args.end)
        if args.output:
            with open(args.output, 'w') as f:
                f.write(text + '\n')
        else:
            sys.stdout.write(text + '\n')

    if args.bbox:
        sys.stderr.write("bbox: xmin={} xmax={} ymin={} ymax={}\n".format(
            *path.bbox()))
    return 0


if __name__ == '__main__':
    sys.exit(main())
