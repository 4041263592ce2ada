"""Command-line interface for buffer-plotter."""

import logging
import sys
import time
import click

from .svg_io import (
    read_svg,
    write_svg,
    extract_polygons_from_svg,
    create_svg_from_outlines,
)
from .geometry import GeometryError, Outline, polygon_signed_area
from .plotter import Plotter, PlotterSettings

_defaults = PlotterSettings()


@click.group()
@click.version_option()
def main():
    """buffer-plotter: simplified outlines and buffers for closed shapes.

    Reads closed shapes from an SVG, simplifies their outlines and computes
    an offset buffer around each one, writing both back out as SVG with a
    marker on every vertex.

    Examples:

        buffer-plotter plot input.svg -o output.svg

        cat input.svg | buffer-plotter plot --distance 5 --approximate > output.svg
    """
    pass


@main.command()
@click.argument('input', default='-', required=False)
@click.option('-o', '--output', default='-', help='Output file (default: stdout)')
@click.option('--distance', '-d', default=_defaults.buffer_distance, type=float,
              help=f'Buffer distance, negative to shrink (default: {_defaults.buffer_distance:g})')
@click.option('--tolerance', '-t', default=_defaults.tolerance, type=click.FloatRange(min=0),
              help=f'Simplification tolerance, 0 keeps every point (default: {_defaults.tolerance:g})')
@click.option('--exact/--approximate', default=_defaults.use_exact_strategy,
              help='Clipping-based offset or per-vertex normal estimate (default: exact)')
@click.option('--scale', default=_defaults.scale, type=click.FloatRange(min=0, min_open=True),
              help=f'Integer scale factor for the exact offset (default: {_defaults.scale:g})')
@click.option('--miter-limit', default=_defaults.miter_limit, type=float,
              help=f'Miter limit for the exact offset (default: {_defaults.miter_limit:g})')
@click.option('--points/--no-points', default=True, help='Plot the simplified outline')
@click.option('--buffer/--no-buffer', default=True, help='Plot the simplified buffer')
@click.option('--marker-radius', default=2.0, type=float, help='Vertex marker radius, 0 for none')
@click.option('--stroke-width', default='1', help='Stroke width (default: 1)')
@click.option('--verbose', '-v', is_flag=True, help='Print timing and statistics')
def plot(input, output, distance, tolerance, exact, scale, miter_limit, points, buffer,
         marker_radius, stroke_width, verbose):
    """Plot simplified outlines and buffers for shapes in an SVG file.

    INPUT: SVG file path, or - for stdin (default)
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    start_time = time.time()

    try:
        svg_content = read_svg(input if input != '-' else None)
    except Exception as e:
        click.echo(f"Error reading input: {e}", err=True)
        sys.exit(1)

    try:
        polygons, metadata = extract_polygons_from_svg(svg_content)
    except Exception as e:
        click.echo(f"Error parsing input: {e}", err=True)
        sys.exit(1)

    if verbose:
        click.echo(f"Found {len(polygons)} shapes", err=True)

    if not polygons:
        click.echo("No closed shapes found in input", err=True)
        sys.exit(1)

    settings = PlotterSettings(
        buffer_distance=distance,
        tolerance=tolerance,
        use_exact_strategy=exact,
        scale=scale,
        miter_limit=miter_limit,
    )
    plotter = Plotter(settings)

    outlines: list[Outline] = []
    for i, poly in enumerate(polygons):
        if verbose:
            click.echo(f"Processing shape {i + 1}/{len(polygons)} ({len(poly)} points)...", err=True)
            if not exact and polygon_signed_area(poly) < 0:
                click.echo("  clockwise ring: approximate buffer grows the other way", err=True)
        try:
            outlines.extend(plotter.plot(poly, points=points, buffer=buffer))
        except GeometryError as e:
            click.echo(f"Skipping shape {i + 1}: {e}", err=True)

    if not outlines:
        click.echo("Nothing to plot", err=True)
        sys.exit(1)

    if verbose:
        for outline in outlines:
            click.echo(f"  {outline.label}: {len(outline)} points", err=True)

    output_svg = create_svg_from_outlines(
        outlines,
        viewbox=metadata.get('viewBox', ''),
        width=metadata.get('width', ''),
        height=metadata.get('height', ''),
        stroke_width=stroke_width,
        marker_radius=marker_radius,
    )

    try:
        write_svg(output_svg, output if output != '-' else None)
    except Exception as e:
        click.echo(f"Error writing output: {e}", err=True)
        sys.exit(1)

    elapsed = time.time() - start_time
    if verbose:
        click.echo(f"Completed in {elapsed:.3f}s", err=True)


@main.command()
def strategies():
    """List available offset strategies."""
    click.echo("Available offset strategies:")
    click.echo()
    click.echo("  exact        - Integer clipping offset with miter joins (--exact)")
    click.echo("  approximate  - Per-vertex normal estimate, may self-intersect (--approximate)")
    click.echo()
    click.echo("Use: buffer-plotter plot --exact|--approximate input.svg")


if __name__ == '__main__':
    main()
