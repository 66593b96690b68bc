"""CLI entry point for graph-explorer."""

import logging
import sys
from collections.abc import Callable
from typing import Any

import click

from graph_explorer.config import SessionConfig, clamp_delay
from graph_explorer.errors import GraphParseError
from graph_explorer.format import format_cycles, format_event, format_layering, format_paths, format_summary
from graph_explorer.session import Session
from graph_explorer.trace.events import TraceEvent
from graph_explorer.trace.pacing import play
from graph_explorer.types import AlgorithmKind, CycleEquality

_EQUALITY_MAP: dict[str, CycleEquality] = {
    "vertex-set": CycleEquality.VertexSet,
    "rotation": CycleEquality.Rotation,
}


def _graph_options(func: Callable[..., Any]) -> Callable[..., Any]:
    func = click.option("--strict", is_flag=True, help="Reject unknown lines and edges to undeclared nodes")(func)
    func = click.option("--directed", "-D", is_flag=True, help="Treat edges as directed")(func)
    func = click.argument("input", required=False, type=click.Path(exists=True))(func)
    return func


def _trace_options(func: Callable[..., Any]) -> Callable[..., Any]:
    func = click.option("--ascii", "-a", "use_ascii", is_flag=True, help="Use plain ASCII arrows")(func)
    func = click.option("--delay", type=int, default=0, help="Pace the printed trace (ms per step, 0 = no pacing)")(
        func
    )
    func = click.option("--trace", "-t", "show_trace", is_flag=True, help="Print every trace event")(func)
    return func


def _read_input(input: str | None) -> str:
    if not input:
        return sys.stdin.read()
    try:
        with open(input) as f:
            return f.read()
    except OSError as e:
        click.echo(f"error: cannot read '{input}': {e}", err=True)
        sys.exit(1)


def _load_session(input: str | None, directed: bool, strict: bool, equality: str = "vertex-set") -> Session:
    text = _read_input(input)
    session = Session(SessionConfig(directed=directed, cycle_equality=_EQUALITY_MAP[equality]))
    try:
        session.load(text, strict=strict)
    except GraphParseError as e:
        click.echo(f"parse error:\n{e}", err=True)
        sys.exit(1)
    return session


def _run(session: Session, kind: AlgorithmKind, show_trace: bool, delay: int, use_ascii: bool) -> list[list[int]]:
    run = session.start(kind)
    if run is None:
        return []

    def echo_event(event: TraceEvent) -> None:
        click.echo(format_event(event, unicode=not use_ascii))

    completed = play(run, clamp_delay(delay) if delay > 0 else 0, echo_event if show_trace else None)
    return completed.results if completed is not None else []


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log parser and run details to stderr")
def main(verbose: bool) -> None:
    """Explore cycles, simple paths and BFS trees of small graphs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@_graph_options
@_trace_options
@click.option(
    "--cycle-equality",
    "equality",
    type=click.Choice(sorted(_EQUALITY_MAP)),
    default="vertex-set",
    help="When two cycles count as the same cycle",
)
def cycles(
    input: str | None,
    directed: bool,
    strict: bool,
    show_trace: bool,
    delay: int,
    use_ascii: bool,
    equality: str,
) -> None:
    """List every distinct cycle, self-loops first."""
    session = _load_session(input, directed, strict, equality)
    found = _run(session, AlgorithmKind.CycleSearch, show_trace, delay, use_ascii)
    click.echo(format_cycles(found, unicode=not use_ascii), nl=False)


@main.command()
@click.argument("source", type=int)
@click.argument("target", type=int)
@_graph_options
@_trace_options
def paths(
    source: int,
    target: int,
    input: str | None,
    directed: bool,
    strict: bool,
    show_trace: bool,
    delay: int,
    use_ascii: bool,
) -> None:
    """List every simple path from SOURCE to TARGET."""
    session = _load_session(input, directed, strict)
    for node_id in (source, target):
        if not session.graph.has_node(node_id):
            click.echo(f"error: node {node_id} is not in the graph", err=True)
            sys.exit(1)
    session.select(source)
    session.select(target)
    found = _run(session, AlgorithmKind.PathSearch, show_trace, delay, use_ascii)
    click.echo(format_paths(found, source, target, unicode=not use_ascii), nl=False)


@main.command()
@click.argument("root", type=int)
@_graph_options
def tree(root: int, input: str | None, directed: bool, strict: bool) -> None:
    """Show the breadth-first levels of the nodes reachable from ROOT."""
    session = _load_session(input, directed, strict)
    layering = session.hang_tree(root)
    if layering is None:
        click.echo(f"error: node {root} is not in the graph", err=True)
        sys.exit(1)
    click.echo(format_layering(layering), nl=False)


@main.command()
@_graph_options
def info(input: str | None, directed: bool, strict: bool) -> None:
    """Summarise the parsed graph."""
    session = _load_session(input, directed, strict)
    click.echo(format_summary(session.graph), nl=False)


if __name__ == "__main__":
    main()
