"""vpype plugin for buffer-plotter.

Adds a ``bufferplot`` command that draws the simplified buffer around every
closed path of the document.

Usage:
    vpype read input.svg bufferplot --distance 2mm --tolerance 0.5 write output.svg
"""

import click
import numpy as np
import vpype
import vpype_cli

from .geometry import GeometryError, Point, open_ring
from .plotter import PlotterSettings, plot_buffer

# Paths whose ends are further apart than this are treated as open.
CLOSE_TOLERANCE = 0.1


def line_to_ring(line: np.ndarray):
    """Return the vertices of a closed vpype line, or None if it is open."""
    if len(line) < 3 or abs(line[-1] - line[0]) > CLOSE_TOLERANCE:
        return None
    points = open_ring([Point(float(p.real), float(p.imag)) for p in line])
    return points if len(points) >= 3 else None


def ring_to_line(points) -> np.ndarray:
    """Convert a ring to a closed vpype line (complex array)."""
    coords = [complex(p.x, p.y) for p in points]
    coords.append(coords[0])
    return np.array(coords, dtype=complex)


def buffer_document(document: vpype.Document, settings: PlotterSettings, layer=None) -> vpype.Document:
    """Add the buffer outline of each closed path in *document* to *layer*."""
    engine = settings.make_engine()
    buffers = vpype.LineCollection()

    for layer_id in list(document.layers):
        for line in document.layers[layer_id]:
            ring = line_to_ring(line)
            if ring is None:
                continue
            try:
                outline = plot_buffer(ring, settings, engine)
            except GeometryError as e:
                click.echo(f"bufferplot: skipping path in layer {layer_id}: {e}", err=True)
                continue
            buffers.append(ring_to_line(outline.points))

    if len(buffers):
        target = layer if layer is not None else document.free_id()
        document.add(buffers, target)
    return document


@click.command()
@click.option('--distance', '-d', type=vpype_cli.LengthType(), default=PlotterSettings.buffer_distance,
              help='Buffer distance, negative to shrink')
@click.option('--tolerance', '-t', type=vpype_cli.LengthType(), default=PlotterSettings.tolerance,
              help='Simplification tolerance, 0 keeps every point')
@click.option('--exact/--approximate', default=True,
              help='Clipping-based offset or per-vertex normal estimate')
@click.option('--layer', '-l', type=int, default=None,
              help='Target layer for the buffers (default: new layer)')
@vpype_cli.global_processor
def bufferplot(document: vpype.Document, distance: float, tolerance: float, exact: bool, layer) -> vpype.Document:
    """Draw simplified buffer outlines around closed paths."""
    if tolerance < 0:
        raise click.BadParameter('tolerance must be non-negative', param_hint='--tolerance')
    settings = PlotterSettings(buffer_distance=distance, tolerance=tolerance, use_exact_strategy=exact)
    return buffer_document(document, settings, layer)


bufferplot.help_group = 'Plugins'
