"""
Co-authorship network assembly: build the graph, then classify countries.
"""

import logging
from typing import Iterable, Optional

from coauthor_network.builder import GraphBuilder
from coauthor_network.classifier import CountryClassifier
from coauthor_network.config import NetworkConfig
from coauthor_network.models import CoauthorGraph, GraphLink, GraphNode, Record

logger = logging.getLogger(__name__)


def build_coauthor_network(
    records: Iterable[Record],
    config: Optional[NetworkConfig] = None,
) -> CoauthorGraph:
    """Run GraphBuilder and CountryClassifier over one set of records.

    Args:
        records: Bibliographic records in input order.
        config: Build settings. Defaults to ``NetworkConfig()``.

    Returns:
        The graph in its handoff form (nodes, links, top countries).
    """
    config = config or NetworkConfig()

    built = GraphBuilder(config).build(records)
    classification = CountryClassifier(config.top_n).classify(
        built.country_mentions, built.nodes.values()
    )

    nodes = [
        GraphNode(
            id=node.id,
            country=node.country,
            is_top_10=node.is_top_n,
            degree=node.degree,
        )
        for node in built.nodes.values()
    ]
    links = [
        GraphLink(
            source=edge.source,
            target=edge.target,
            shared_publications=edge.shared_publications,
        )
        for edge in built.edges.values()
    ]

    logger.info(
        "Classified %d countries, top %d: %s",
        len(classification.ranked_countries),
        len(classification.top_countries),
        ", ".join(classification.top_countries),
    )

    return CoauthorGraph(
        nodes=nodes,
        links=links,
        top_countries=classification.top_countries,
        country_mentions={
            c: built.country_mentions[c] for c in classification.ranked_countries
        },
    )
