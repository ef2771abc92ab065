"""
Country Classifier
==================

Rank affiliation countries by author mentions and split them into the
top-N countries and the rest.
"""

from typing import Iterable, List, Mapping

from coauthor_network.config import DEFAULT_TOP_N
from coauthor_network.models import ClassificationResult, Node


class CountryClassifier:
    """Classify authors by how often their country is mentioned."""

    def __init__(self, top_n: int = DEFAULT_TOP_N) -> None:
        if top_n < 0:
            raise ValueError(f"top_n must be non-negative, got {top_n}")
        self.top_n = top_n

    def rank(self, mention_counts: Mapping[str, int]) -> List[str]:
        """Countries by mention count, descending; ties in alphabetical order."""
        return [
            country
            for country, _ in sorted(mention_counts.items(), key=lambda x: (-x[1], x[0]))
        ]

    def classify(
        self,
        mention_counts: Mapping[str, int],
        nodes: Iterable[Node],
    ) -> ClassificationResult:
        """
        Rank countries and flag each node whose country is in the top N.

        Args:
            mention_counts: Author mentions per raw country token.
            nodes: Nodes to flag; ``is_top_n`` is set in place.

        Returns:
            ClassificationResult with the full ranking and the top-N cut.
        """
        ranked = self.rank(mention_counts)
        top_countries = ranked[:self.top_n]
        top_set = set(top_countries)

        for node in nodes:
            node.is_top_n = node.country is not None and node.country in top_set

        return ClassificationResult(
            ranked_countries=ranked,
            top_n=top_set,
            top_countries=top_countries,
        )
