"""
Find the celebrity clique of a party and draw its acquaintance graph.

Usage:
    uv run python -m celebrity
    uv run python -m celebrity --party party.json --output output --no-render
"""

import argparse
import logging
from collections.abc import Sequence, Set
from pathlib import Path

from rich.console import Console
from rich.table import Table

from celebrity import Actor, Party, build_party, find_celebrity_clique
from celebrity.export import (
    digraph_to_agraph,
    party_to_digraph,
    render_graph,
    write_dot,
)
from celebrity.constants import (
    DOT_FILENAME,
    IMAGE_FILENAME,
    LAYOUT_PROGRAM,
    OUTPUT_DIR,
    SAMPLE_PARTY,
)
from celebrity.utils.loader import path_to_entries

logger = logging.getLogger(__name__)


def display_party(console: Console, party: Party, celebrities: Set[Actor] | None) -> None:
    table = Table(title=f"Party of {len(party)}")
    table.add_column("Actor", justify="right")
    table.add_column("Knows")
    table.add_column("Celebrity", justify="center")

    for actor in sorted(party, key=lambda actor: actor.id):
        is_celebrity = celebrities is not None and actor in celebrities
        table.add_row(
            str(actor.id),
            ", ".join(map(str, sorted(actor.known_people))),
            "*" if is_celebrity else "",
        )
    console.print(table)

    if celebrities is None:
        console.print("No celebrity clique")
    else:
        console.print("Celebrity clique:")
        for actor in sorted(celebrities, key=lambda actor: actor.id):
            console.print(f"  {actor}")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Find the celebrity clique of a party"
    )
    parser.add_argument(
        "--party", help="JSON file mapping actor ids to known ids (default: sample party)"
    )
    parser.add_argument("--output", default=OUTPUT_DIR, help="Output directory")
    parser.add_argument(
        "--layout", default=LAYOUT_PROGRAM, help="Graphviz layout program"
    )
    parser.add_argument(
        "--no-render", action="store_true", help="Only write the DOT file"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(levelname)s | %(message)s",
    )
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        entries = path_to_entries(args.party) if args.party else SAMPLE_PARTY
    except (OSError, ValueError) as error:
        logger.error(f"Cannot load party: {error}")
        return 1

    party = build_party(entries)
    celebrities = find_celebrity_clique(party)
    display_party(Console(), party, celebrities)

    output = Path(args.output)
    agraph = digraph_to_agraph(party_to_digraph(party))
    try:
        write_dot(agraph, output / DOT_FILENAME)
    except OSError as error:
        logger.error(f"Cannot write graph: {error}")
        return 1

    if not args.no_render:
        render_graph(agraph, output / IMAGE_FILENAME, layout=args.layout)

    return 0

