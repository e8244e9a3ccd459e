"""Click CLI with Rich output."""

from __future__ import annotations

import json as json_lib
import logging
from dataclasses import asdict

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from . import __version__
from .formatting import display, format_last_seen
from .lookup import resolve_and_fetch
from .models import LookupMode, LookupOutcome, LookupRequest

console = Console()
err_console = Console(stderr=True)


def _outcome_to_dict(outcome: LookupOutcome) -> dict:
    if not outcome.ok:
        error = asdict(outcome.error)
        error["kind"] = outcome.error.kind.value
        return {"ok": False, "error": error}

    result = outcome.result
    return {
        "ok": True,
        "peerIds": list(result.peer_ids),
        "stats": {
            "totalNodes": result.stats.total_nodes,
            "rankedNodes": result.stats.ranked_nodes,
        },
        "ranks": [
            {
                "peerId": r.peer_id,
                "eoa": r.eoa,
                "rank": r.rank,
                "totalWins": r.total_wins,
                "totalRewards": r.total_rewards,
                "lastSeen": r.last_seen,
            }
            for r in result.ranks
        ],
    }


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Log RPC and API calls.")
def cli(verbose: bool):
    """gswarm-check — Look up Gensyn swarm ranks by EOA or peer ID."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=err_console, show_path=False)],
        )


@cli.command()
@click.argument("value")
@click.option(
    "--peer", "as_peer", is_flag=True, help="Treat VALUE as a peer ID, not an EOA."
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
def check(value: str, as_peer: bool, as_json: bool):
    """Look up an EOA address (default) or a peer ID."""
    mode = LookupMode.PEER_ID if as_peer else LookupMode.ADDRESS

    if as_json:
        outcome = resolve_and_fetch(LookupRequest(mode=mode, raw_input=value))
        click.echo(json_lib.dumps(_outcome_to_dict(outcome), indent=2))
        if not outcome.ok:
            raise SystemExit(1)
        return

    with console.status("Checking..."):
        outcome = resolve_and_fetch(LookupRequest(mode=mode, raw_input=value))

    if not outcome.ok:
        err_console.print(f"[red]Error:[/red] {outcome.error.message}")
        raise SystemExit(1)

    result = outcome.result

    console.print("[bold]Queried Peer IDs:[/bold]")
    for peer_id in result.peer_ids:
        console.print(f"  • {peer_id}")

    console.print(
        f"\n[bold]Stats:[/bold] Total Nodes: {display(result.stats.total_nodes)}, "
        f"Ranked Nodes: {display(result.stats.ranked_nodes)}\n"
    )

    if not result.ranks:
        console.print("[yellow]No ranks returned.[/yellow]")
        return

    table = Table(title="Ranks", show_header=True, header_style="bold")
    table.add_column("Peer ID", overflow="fold")
    table.add_column("EOA", overflow="fold")
    table.add_column("Rank", justify="right")
    table.add_column("Wins", justify="right")
    table.add_column("Rewards", justify="right")
    table.add_column("Last Seen")

    for r in result.ranks:
        table.add_row(
            r.peer_id,
            display(r.eoa),
            display(r.rank),
            display(r.total_wins),
            display(r.total_rewards),
            format_last_seen(r.last_seen),
        )

    console.print(table)
