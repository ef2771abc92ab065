"""
Graph Export
============

Write a co-authorship graph for other tools:
- JSON in the nodes / links / top10Countries layout used by the front end
- networkx graph and GraphML
- Gephi node and edge tables (CSV)
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Tuple, Union

import networkx as nx
import pandas as pd

from coauthor_network.models import CoauthorGraph

PathLike = Union[str, Path]


def graph_to_json(graph: CoauthorGraph, indent: int = 4) -> str:
    return json.dumps(graph.to_dict(), indent=indent, ensure_ascii=False)


def write_json(graph: CoauthorGraph, path: PathLike) -> Path:
    """Write the graph as JSON and return the path written."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(graph_to_json(graph))
    return path


def read_json(path: PathLike) -> CoauthorGraph:
    with open(path, "r", encoding="utf-8") as f:
        data: Dict[str, Any] = json.load(f)
    return CoauthorGraph.from_dict(data)


def to_networkx(graph: CoauthorGraph) -> nx.Graph:
    """Undirected networkx graph, edge weight = shared publications."""
    G = nx.Graph()
    for node in graph.nodes:
        G.add_node(
            node.id,
            country=node.country or "",
            is_top_10=node.is_top_10,
            degree=node.degree,
        )
    for link in graph.links:
        G.add_edge(link.source, link.target, weight=link.shared_publications)
    return G


def write_graphml(graph: CoauthorGraph, path: PathLike) -> Path:
    path = Path(path)
    nx.write_graphml(to_networkx(graph), path)
    return path


def write_gephi_csv(graph: CoauthorGraph, output_dir: PathLike) -> Tuple[Path, Path]:
    """
    Write Gephi-importable ``nodes.csv`` and ``edges.csv``.

    Args:
        graph: Graph to export.
        output_dir: Directory for the two files; created if missing.

    Returns:
        Paths of the nodes and edges files.
    """
    os.makedirs(output_dir, exist_ok=True)
    nodes_path = Path(output_dir) / "nodes.csv"
    edges_path = Path(output_dir) / "edges.csv"

    nodes = [
        {
            "Id": n.id,
            "Label": n.id,
            "Country": n.country,
            "TopCountry": n.is_top_10,
            "Degree": n.degree,
        }
        for n in graph.nodes
    ]
    edges = [
        {
            "Source": l.source,
            "Target": l.target,
            "Type": "Undirected",
            "Weight": l.shared_publications,
        }
        for l in graph.links
    ]

    pd.DataFrame(nodes, columns=["Id", "Label", "Country", "TopCountry", "Degree"]).to_csv(
        nodes_path, index=False
    )
    pd.DataFrame(edges, columns=["Source", "Target", "Type", "Weight"]).to_csv(
        edges_path, index=False
    )
    return nodes_path, edges_path
