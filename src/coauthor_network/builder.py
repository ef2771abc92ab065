"""
Graph Builder
=============

Turn bibliographic records into a co-authorship graph:
- Filter out records missing year, authors or affiliations
- Parse affiliation blocks into author keys and countries
- Deduplicate authors across records
- Enumerate co-author pairs per publication
- Aggregate pairs into edges weighted by distinct publications
"""

import logging
from collections import Counter
from itertools import combinations
from typing import Dict, Hashable, Iterable, List, Optional, Tuple

from coauthor_network.affiliations import parse_affiliations
from coauthor_network.config import NetworkConfig
from coauthor_network.exceptions import EmptyResultError, InputSizeExceeded
from coauthor_network.models import Edge, GraphBuildResult, Node, Record

logger = logging.getLogger(__name__)


def pair_key(a: str, b: str) -> Tuple[str, str]:
    """Order-independent key for an author pair."""
    return (a, b) if a <= b else (b, a)


class GraphBuilder:
    """Build author nodes and co-authorship edges from records."""

    def __init__(self, config: Optional[NetworkConfig] = None) -> None:
        self.config = config or NetworkConfig()

    def build(self, records: Iterable[Record]) -> GraphBuildResult:
        """
        Build the graph from a sequence of records.

        Args:
            records: Records in iteration order. Later records win when an
                author's country differs between records.

        Returns:
            GraphBuildResult with nodes, edges and per-country mention counts.

        Raises:
            EmptyResultError: No record has year, authors and affiliations.
            InputSizeExceeded: A configured record or roster bound was hit.
        """
        # Fresh working state per call
        nodes: Dict[str, Node] = {}
        edges: Dict[Tuple[str, str], Edge] = {}
        country_mentions: Counter = Counter()
        records_seen = 0
        records_used = 0
        blocks_skipped = 0

        max_records = self.config.max_records

        for position, record in enumerate(records):
            records_seen += 1
            if max_records is not None and records_seen > max_records:
                raise InputSizeExceeded("records", max_records, records_seen)

            if not record.is_complete:
                logger.debug("Skipping record %s: missing year, authors or affiliations",
                             self._publication_id(record, position))
                continue
            records_used += 1

            publication_id = self._publication_id(record, position)
            roster: List[str] = []
            on_roster = set()

            skipped: List[str] = []
            for parsed in parse_affiliations(record.affiliations, on_skip=skipped.append):
                node = nodes.get(parsed.key)
                if node is None:
                    nodes[parsed.key] = Node(id=parsed.key, country=parsed.country)
                else:
                    node.country = parsed.country

                country_mentions[parsed.country] += 1

                if parsed.key not in on_roster:
                    on_roster.add(parsed.key)
                    roster.append(parsed.key)

            for block in skipped:
                logger.debug("Skipping malformed affiliation block %r in %s",
                             block, publication_id)
            blocks_skipped += len(skipped)

            self._check_roster(roster, publication_id)

            for a, b in combinations(roster, 2):
                key = pair_key(a, b)
                edge = edges.get(key)
                if edge is None:
                    edge = edges[key] = Edge(source=key[0], target=key[1])
                edge.publication_ids.add(publication_id)

                nodes[a].co_authors.add(b)
                nodes[b].co_authors.add(a)

        if records_used == 0:
            raise EmptyResultError(records_seen)

        for node in nodes.values():
            node.degree = len(node.co_authors)

        logger.info(
            "Built graph from %d of %d records: %d authors, %d collaborations "
            "(%d malformed blocks skipped)",
            records_used, records_seen, len(nodes), len(edges), blocks_skipped,
        )

        return GraphBuildResult(
            nodes=nodes,
            edges=edges,
            country_mentions=country_mentions,
            records_seen=records_seen,
            records_used=records_used,
            blocks_skipped=blocks_skipped,
        )

    def _check_roster(self, roster: List[str], publication_id: Hashable) -> None:
        limit = self.config.max_authors_per_record
        if limit is not None and len(roster) > limit:
            raise InputSizeExceeded("authors in one record", limit, len(roster),
                                    eid=str(publication_id))

    @staticmethod
    def _publication_id(record: Record, position: int) -> Hashable:
        # Positional id for rows exported without an EID
        if record.eid is None:
            return ("row", position)
        return record.eid
