"""Graph view of a track for connectivity queries."""

from __future__ import annotations

__all__ = ["connected_components", "track_to_graph"]

import networkx as nx

from railway.model.track import Track


def track_to_graph(track: Track) -> nx.MultiGraph:
    """Build an undirected multigraph with one edge per section.

    Nodes are junction names. Each edge is keyed by the section's string
    form and carries its ``length`` and a ``branches`` mapping from junction
    name to the branch names the section uses there (a loop uses two).
    """
    G = nx.MultiGraph()
    for junction in track.junctions():
        G.add_node(junction.name)

    for section in track:
        first, second = sorted(section.end_points, key=str)
        branches: dict[str, list[str]] = {}
        for end_point in (first, second):
            branches.setdefault(end_point.junction.name, []).append(
                end_point.branch.value
            )
        G.add_edge(
            first.junction.name,
            second.junction.name,
            key=str(section),
            length=section.length,
            branches=branches,
        )
    return G


def connected_components(track: Track) -> list[set[str]]:
    """Return the junction names of each connected part of the track.

    Largest component first; ties are ordered by their smallest name.
    """
    G = track_to_graph(track)
    components = [set(c) for c in nx.connected_components(G)]
    return sorted(components, key=lambda c: (-len(c), min(c)))
