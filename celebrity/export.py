"""
Directed graph view of a party, for visualization.

The graph built here is derived from the party and is independent of the
celebrity clique search, which works directly on the actors' known sets.

Functions:
    party_to_digraph(party)         - One node per actor, one edge per acquaintance
    digraph_to_agraph(graph)        - Graphviz graph with labelled nodes, unlabelled edges
    write_dot(agraph, path)         - Write the DOT file, creating the directory
    render_graph(agraph, path, ...) - Rasterize with a Graphviz layout program
"""

import logging
from collections.abc import Set
from pathlib import Path

import networkx as nx
import pygraphviz as pgv

from celebrity.constants import LAYOUT_PROGRAM
from celebrity.types import Actor

logger = logging.getLogger(__name__)


def party_to_digraph(party: Set[Actor]) -> nx.DiGraph:
    """
    Build the acquaintance graph of a party.

    An edge a -> b means a knows b. Ids of people who are not at the party
    get neither a node nor an edge.
    """
    graph = nx.DiGraph()
    graph.add_nodes_from((actor.id, {"label": str(actor.id)}) for actor in party)

    for actor in party:
        for known_id in actor.known_people:
            if known_id not in graph:
                logger.debug(f"Actor {actor.id} knows {known_id}, who is not at the party")
                continue
            graph.add_edge(actor.id, known_id)

    return graph


def digraph_to_agraph(graph: nx.DiGraph) -> pgv.AGraph:
    """Convert to a Graphviz graph. Node names are the actor ids as strings."""
    return nx.nx_agraph.to_agraph(graph)


def write_dot(agraph: pgv.AGraph, path: str | Path) -> Path:
    """
    Write the DOT description of `agraph` to `path`.

    The parent directory is created if missing.

    Raises:
        OSError: If the directory or the file cannot be written.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    agraph.write(str(path))
    logger.debug(
        f"Wrote {agraph.number_of_nodes()} nodes and {agraph.number_of_edges()} edges to {path}"
    )
    return path


def render_graph(
    agraph: pgv.AGraph,
    image_path: str | Path,
    layout: str = LAYOUT_PROGRAM,
    image_format: str = "png",
) -> bool:
    """
    Rasterize `agraph` with a Graphviz layout program.

    Failures of Graphviz are logged as warnings, never raised.

    Returns:
        True if the image was produced.
    """
    try:
        agraph.draw(str(image_path), format=image_format, prog=layout)
    except (OSError, ValueError) as error:
        logger.warning(f"Conversion failed with {layout!r}: {error}")
        return False

    logger.info(f"Rendered {image_path}")
    return True
