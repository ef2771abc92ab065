"""
coauthor-network - Co-authorship Graphs from Bibliographic Exports
===================================================================

Builds a weighted co-authorship graph from Scopus CSV exports.

Features:
- Parsing of the "Authors with affiliations" field into author identities
- Author deduplication across publications
- Edges weighted by distinct shared publications
- Country classification by author-mention frequency (top-N vs. rest)
- Export to JSON, GraphML and Gephi tables

Usage:
    # Command line
    coauthor-network build --input data_scopus.csv --output graph.json
    coauthor-network report --input graph.json

    # Python API
    from coauthor_network import load_records, build_coauthor_network

    records = load_records("data_scopus.csv")
    graph = build_coauthor_network(records)
    data = graph.to_dict()
"""

__version__ = "1.0.0"
__license__ = "Apache-2.0"

from coauthor_network.builder import GraphBuilder
from coauthor_network.classifier import CountryClassifier
from coauthor_network.config import NetworkConfig
from coauthor_network.exceptions import (
    CoauthorNetworkError,
    EmptyResultError,
    InputFormatError,
    InputSizeExceeded,
)
from coauthor_network.loader import load_records
from coauthor_network.models import CoauthorGraph, Edge, Node, Record
from coauthor_network.network import build_coauthor_network

__all__ = [
    "__version__",
    "GraphBuilder",
    "CountryClassifier",
    "NetworkConfig",
    "CoauthorNetworkError",
    "EmptyResultError",
    "InputFormatError",
    "InputSizeExceeded",
    "load_records",
    "CoauthorGraph",
    "Edge",
    "Node",
    "Record",
    "build_coauthor_network",
]
