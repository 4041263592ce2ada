"""SVG input/output utilities for buffer-plotter."""

import math
import re
import sys
from typing import Dict, List, Optional, Tuple
from xml.etree import ElementTree as ET

from .geometry import Outline, Point, open_ring

NUMBER_RE = re.compile(r'[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?')
COMMAND_RE = re.compile(r'[MLHVCSQTAZ][^MLHVCSQTAZ]*', re.IGNORECASE)

# Arguments consumed per repetition of each path command. Curves are
# approximated by their end points, which are always the last pair.
PATH_ARITY = {'M': 2, 'L': 2, 'H': 1, 'V': 1, 'C': 6, 'S': 4, 'Q': 4, 'T': 2, 'A': 7, 'Z': 0}

ELLIPSE_SEGMENTS = 32

DEFAULT_STROKES = {
    'marker': 'black',
    'buffer': 'red',
}


def _numbers(text: str) -> List[float]:
    return [float(v) for v in NUMBER_RE.findall(text)]


def parse_path_d(d: str) -> List[List[Point]]:
    """Parse an SVG path d attribute into one point list per subpath.

    Curve segments contribute their end point only.
    """
    if not d or not d.strip():
        return []

    subpaths: List[List[Point]] = []
    current: List[Point] = []
    x, y = 0.0, 0.0
    start_x, start_y = 0.0, 0.0

    for cmd in COMMAND_RE.findall(d):
        letter = cmd[0]
        kind = letter.upper()
        relative = letter.islower()
        args = _numbers(cmd[1:])

        if kind == 'Z':
            x, y = start_x, start_y
            if current:
                subpaths.append(current)
            current = []
            continue

        arity = PATH_ARITY[kind]
        for i in range(0, len(args) - arity + 1, arity):
            if not current and not (kind == 'M' and i == 0):
                # Drawing straight after a closepath continues from the subpath start
                current.append(Point(start_x, start_y))
            chunk = args[i:i + arity]
            if kind == 'H':
                x = chunk[0] + (x if relative else 0.0)
            elif kind == 'V':
                y = chunk[0] + (y if relative else 0.0)
            else:
                ex, ey = chunk[-2], chunk[-1]
                if relative:
                    ex += x
                    ey += y
                x, y = ex, ey

            if kind == 'M' and i == 0:
                # Moveto starts a new subpath; following pairs are implicit linetos
                if current:
                    subpaths.append(current)
                current = []
                start_x, start_y = x, y
            current.append(Point(x, y))

    if current:
        subpaths.append(current)

    return subpaths


def _points_attr(text: str) -> List[Point]:
    coords = _numbers(text)
    return [Point(coords[i], coords[i + 1]) for i in range(0, len(coords) - 1, 2)]


def _ellipse(cx: float, cy: float, rx: float, ry: float) -> List[Point]:
    return [
        Point(cx + rx * math.cos(2 * math.pi * i / ELLIPSE_SEGMENTS),
              cy + ry * math.sin(2 * math.pi * i / ELLIPSE_SEGMENTS))
        for i in range(ELLIPSE_SEGMENTS)
    ]


def element_to_polygons(element: ET.Element) -> List[List[Point]]:
    """Convert an SVG shape element to rings with at least three points."""
    tag = element.tag.split('}')[-1].lower()  # Remove namespace
    get = element.get

    if tag == 'path':
        rings = parse_path_d(get('d', ''))
    elif tag in ('polygon', 'polyline'):
        rings = [_points_attr(get('points', ''))]
    elif tag == 'rect':
        x = float(get('x', 0))
        y = float(get('y', 0))
        w = float(get('width', 0))
        h = float(get('height', 0))
        rings = [[Point(x, y), Point(x + w, y), Point(x + w, y + h), Point(x, y + h)]]
    elif tag == 'circle':
        r = float(get('r', 0))
        rings = [_ellipse(float(get('cx', 0)), float(get('cy', 0)), r, r)]
    elif tag == 'ellipse':
        rings = [_ellipse(float(get('cx', 0)), float(get('cy', 0)),
                          float(get('rx', 0)), float(get('ry', 0)))]
    else:
        return []

    rings = [open_ring(ring) for ring in rings]
    return [ring for ring in rings if len(ring) >= 3]


def extract_polygons_from_svg(svg_content: str) -> Tuple[List[List[Point]], Dict[str, str]]:
    """Extract all closed shapes from SVG content.

    Returns:
        Tuple of (list of rings, SVG metadata dict with viewBox, width, height)
    """
    root = ET.fromstring(svg_content)

    metadata = {
        'viewBox': root.get('viewBox', ''),
        'width': root.get('width', ''),
        'height': root.get('height', ''),
    }

    polygons: List[List[Point]] = []
    for elem in root.iter():
        polygons.extend(element_to_polygons(elem))

    return polygons, metadata


def points_to_svg(points: List[Point], precision: int = 2) -> str:
    """Format points for an SVG points attribute."""
    return ' '.join(f"{p.x:.{precision}f},{p.y:.{precision}f}" for p in points)


def create_svg_from_outlines(
    outlines: List[Outline],
    viewbox: str = '',
    width: str = '',
    height: str = '',
    strokes: Optional[Dict[str, str]] = None,
    stroke_width: str = '1',
    marker_radius: float = 2.0,
    precision: int = 2,
) -> str:
    """Create a complete SVG document from plotted outlines.

    Each outline label becomes a group holding one polygon per outline and,
    when *marker_radius* is positive, one circle per vertex with ids
    ``<label>-point-<n>`` numbered from 1.

    Args:
        outlines: Outlines to draw, in drawing order
        viewbox: SVG viewBox attribute
        width: SVG width attribute
        height: SVG height attribute
        strokes: Stroke colour per label (defaults to black markers, red buffers)
        stroke_width: Stroke width
        marker_radius: Radius of the vertex markers, 0 to omit them
        precision: Decimal places for coordinates

    Returns:
        Complete SVG document as string
    """
    colours = dict(DEFAULT_STROKES)
    if strokes:
        colours.update(strokes)

    attrs = ['xmlns="http://www.w3.org/2000/svg"']
    if viewbox:
        attrs.append(f'viewBox="{viewbox}"')
    if width:
        attrs.append(f'width="{width}"')
    if height:
        attrs.append(f'height="{height}"')

    groups: Dict[str, List[str]] = {}
    counters: Dict[str, int] = {}
    for outline in outlines:
        label = outline.label
        stroke = colours.get(label, 'black')
        body = groups.setdefault(label, [])
        body.append(
            f'    <polygon points="{points_to_svg(outline.points, precision)}" '
            f'fill="none" stroke="{stroke}" stroke-width="{stroke_width}"/>'
        )
        if marker_radius > 0:
            for p in outline.points:
                counters[label] = counters.get(label, 0) + 1
                body.append(
                    f'    <circle id="{label}-point-{counters[label]}" '
                    f'cx="{p.x:.{precision}f}" cy="{p.y:.{precision}f}" '
                    f'r="{marker_radius:g}" fill="{stroke}"/>'
                )

    lines = ['<?xml version="1.0" encoding="UTF-8"?>', f"<svg {' '.join(attrs)}>"]
    for label, body in groups.items():
        lines.append(f'  <g id="{label}-points">')
        lines.extend(body)
        lines.append('  </g>')
    lines.append('</svg>')

    return '\n'.join(lines)


def read_svg(path: Optional[str] = None) -> str:
    """Read SVG content from file or stdin.

    Args:
        path: File path, or None to read from stdin

    Returns:
        SVG content as string
    """
    if path is None or path == '-':
        return sys.stdin.read()
    else:
        with open(path, 'r') as f:
            return f.read()


def write_svg(content: str, path: Optional[str] = None):
    """Write SVG content to file or stdout.

    Args:
        content: SVG content
        path: File path, or None to write to stdout
    """
    if path is None or path == '-':
        sys.stdout.write(content)
    else:
        with open(path, 'w') as f:
            f.write(content)
