"""Click CLI with order, cycle, paths, delay, and serve subcommands."""

from __future__ import annotations

import json
from pathlib import Path

import click

from graph_resolve import __version__
from graph_resolve.config import Settings
from graph_resolve.errors import GraphError
from graph_resolve.models import RunConfig
from graph_resolve.pipeline import run_cycle, run_delay, run_order, run_path, run_paths

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]
_GRAPH_FILE = click.Path(exists=True, dir_okay=False, path_type=Path)


def _format_distance(dist: float | None) -> str:
    if dist is None:
        return click.style("unreachable", fg="red")
    if float(dist).is_integer():
        return str(int(dist))
    return f"{dist:g}"


@click.group()
@click.version_option(version=__version__)
@click.option("--log-level", type=click.Choice(_LOG_LEVELS, case_sensitive=False), default=None,
              help="Logging level (default: $GRAPH_RESOLVE_LOG_LEVEL or WARNING)")
@click.pass_context
def cli(ctx: click.Context, log_level: str | None):
    """graph-resolve: order dependencies and compute shortest paths."""
    try:
        settings = Settings(log_level=log_level)
        settings.configure_logging()
    except ValueError as e:
        raise click.ClickException(str(e))
    ctx.obj = settings


@cli.command()
@click.argument("graph_file", type=_GRAPH_FILE)
@click.option("--json", "as_json", is_flag=True, help="Emit JSON")
def order(graph_file: Path, as_json: bool):
    """Print a dependency ordering of GRAPH_FILE."""
    try:
        result = run_order(RunConfig(input_path=graph_file))
    except GraphError as e:
        raise click.ClickException(str(e))

    if as_json:
        click.echo(json.dumps({"order": result}))
        return
    click.echo(" ".join(str(node) for node in result))


@cli.command()
@click.argument("graph_file", type=_GRAPH_FILE)
def cycle(graph_file: Path):
    """Report one cycle in GRAPH_FILE, if any."""
    try:
        found = run_cycle(RunConfig(input_path=graph_file))
    except GraphError as e:
        raise click.ClickException(str(e))

    if found is None:
        click.echo("No cycles found.")
        return
    click.echo(click.style("Cycle: ", fg="red") + " -> ".join(str(node) for node in found))


@cli.command()
@click.argument("graph_file", type=_GRAPH_FILE)
@click.option("--source", "-s", type=int, help="Source node (overrides the document)")
@click.option("--target", "-t", type=int, help="Print the shortest path to this node instead")
@click.option("--json", "as_json", is_flag=True, help="Emit JSON")
def paths(graph_file: Path, source: int | None, target: int | None, as_json: bool):
    """Print shortest distances from the source node of GRAPH_FILE."""
    config = RunConfig(input_path=graph_file, source=source, target=target)
    try:
        if target is not None:
            path = run_path(config)
        else:
            distance_map = run_paths(config)
    except GraphError as e:
        raise click.ClickException(str(e))

    if target is not None:
        if as_json:
            click.echo(json.dumps({"target": target, "path": path}))
        elif path is None:
            click.echo(f"Node {target} is unreachable.")
        else:
            click.echo(" -> ".join(str(node) for node in path))
        return

    distances = distance_map.to_dict()
    if as_json:
        click.echo(json.dumps({"source": distance_map.source, "distances": distances}))
        return

    click.echo(f"Distances from node {distance_map.source}:")
    for node, dist in distances.items():
        click.echo(f"  {node:>6}  {_format_distance(dist)}")


@cli.command()
@click.argument("graph_file", type=_GRAPH_FILE)
@click.option("--source", "-s", type=int, help="Source node (overrides the document)")
@click.option("--json", "as_json", is_flag=True, help="Emit JSON")
def delay(graph_file: Path, source: int | None, as_json: bool):
    """Print the time for a signal from the source to reach every node."""
    try:
        time = run_delay(RunConfig(input_path=graph_file, source=source))
    except GraphError as e:
        raise click.ClickException(str(e))

    if as_json:
        click.echo(json.dumps({"time": time}))
        return
    click.echo(_format_distance(time))


@cli.command()
@click.option("--port", "-p", type=int, default=None, help="Port number")
@click.option("--host", default=None, help="Host address")
@click.pass_obj
def serve(settings: Settings, port: int | None, host: str | None):
    """Start the web API."""
    try:
        import uvicorn
    except ImportError:
        raise click.ClickException(
            "uvicorn is required for the web API. "
            "Install with: pip install 'graph-resolve[web]'"
        )

    from graph_resolve.web import create_app

    host = host if host is not None else settings.host
    port = port if port is not None else settings.port
    click.echo(f"Starting graph-resolve web API at http://{host}:{port}")
    uvicorn.run(create_app(settings), host=host, port=port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    cli()
