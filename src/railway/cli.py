"""CLI for railway."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from railway import __version__
from railway.constants import ALLOCATION_SEPARATOR, DEFAULT_TRACK_FILE
from railway.dispatch import TrainRegister
from railway.graph import connected_components
from railway.model import AllocationError, Branch, FormatError, Route, Track
from railway.parser import format_route, read_route, read_track


def _load_track(path: Path) -> Track:
    try:
        return read_track(path)
    except (FormatError, OSError) as e:
        click.echo(f"Track file {path}: {e}", err=True)
        raise SystemExit(1)


def _load_route(path: Path) -> Route:
    try:
        return read_route(path)
    except (FormatError, OSError) as e:
        click.echo(f"Route file {path}: {e}", err=True)
        raise SystemExit(1)


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Log debug messages to stderr")
def cli(verbose: bool) -> None:
    """railway: Check train routes against railway tracks."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("track_file", type=click.Path(exists=True, path_type=Path))
@click.argument("route_files", nargs=-1,
                type=click.Path(exists=True, path_type=Path))
def validate(track_file: Path, route_files: tuple[Path, ...]) -> None:
    """Validate a track file and, optionally, route files against it."""
    track = _load_track(track_file)

    off_track = []
    for route_file in route_files:
        route = _load_route(route_file)
        if not route.on_track(track):
            off_track.append(route_file)

    if off_track:
        click.echo("Validation errors:", err=True)
        for route_file in off_track:
            click.echo(f"  - Route {route_file} is not on the track", err=True)
        raise SystemExit(1)

    click.echo(f"Valid: {len(track)} sections, "
               f"{len(track.junctions())} junctions, "
               f"{len(route_files)} routes")


@cli.command()
@click.argument("track_file", type=click.Path(exists=True, path_type=Path))
def info(track_file: Path) -> None:
    """Show information about a track file."""
    track = _load_track(track_file)
    junctions = sorted(track.junctions(), key=lambda j: j.name)

    click.echo(f"Sections: {len(track)}")
    click.echo(f"Total length: {sum(s.length for s in track)}")
    click.echo(f"Junctions: {len(junctions)}")
    for junction in junctions:
        used = [b.value for b in Branch
                if track.section_at(junction, b) is not None]
        click.echo(f"  {junction.name}: {', '.join(used)}")
    components = connected_components(track)
    click.echo(f"Components: {len(components)}")
    for component in components:
        click.echo(f"  {', '.join(sorted(component))}")


@cli.command()
@click.argument("route_a", type=click.Path(exists=True, path_type=Path))
@click.argument("route_b", type=click.Path(exists=True, path_type=Path))
def intersect(route_a: Path, route_b: Path) -> None:
    """Report whether two routes share any location."""
    first = _load_route(route_a)
    second = _load_route(route_b)
    if first.intersects(second):
        click.echo(f"{route_a} intersects {route_b}")
    else:
        click.echo(f"{route_a} does not intersect {route_b}")


@cli.command()
@click.argument("route_file", type=click.Path(exists=True, path_type=Path))
@click.argument("start", type=int)
@click.argument("end", type=int)
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Write the sub-route to this file instead of stdout")
def subroute(route_file: Path, start: int, end: int, output: Path | None) -> None:
    """Extract the part of a route between two offsets along it."""
    route = _load_route(route_file)
    try:
        part = route.get_subroute(start, end)
    except ValueError as e:
        click.echo(f"Invalid offsets: {e}", err=True)
        raise SystemExit(1)

    text = format_route(part)
    if output is None:
        click.echo(text, nl=False)
    else:
        output.write_text(text)
        click.echo(f"Wrote {len(part)} segments, length {part.length} -> {output}")


@cli.command()
@click.argument("requests", nargs=-1, required=True)
@click.option("-t", "--track", "track_file", type=click.Path(path_type=Path),
              default=DEFAULT_TRACK_FILE, show_default=True,
              help="Track file the trains run on")
def allocate(requests: tuple[str, ...], track_file: Path) -> None:
    """Allocate sub-routes to trains, one per ROUTE_FILE:START:END request.

    Requests are processed in order; a request whose sub-route is off the
    track or intersects an earlier train's is rejected.
    """
    register = TrainRegister(_load_track(track_file))

    rejected = 0
    for request in requests:
        parts = request.rsplit(ALLOCATION_SEPARATOR, 2)
        if len(parts) != 3:
            raise click.BadParameter(
                f"expected ROUTE_FILE{ALLOCATION_SEPARATOR}START"
                f"{ALLOCATION_SEPARATOR}END, got {request!r}"
            )
        route_file, start, end = parts
        try:
            start_offset, end_offset = int(start), int(end)
        except ValueError:
            raise click.BadParameter(f"offsets must be integers in {request!r}")

        route = _load_route(Path(route_file))
        try:
            train_id = register.add(route, start_offset, end_offset)
        except AllocationError as e:
            rejected += 1
            click.echo(f"Rejected {request}: {e}")
            continue
        click.echo(f"Train {train_id}: {request}")

    click.echo(f"Allocated {len(register)} trains, rejected {rejected}")
    if rejected:
        raise SystemExit(1)
