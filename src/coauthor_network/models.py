"""
Data models for the co-authorship network.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Mapping, Optional, Set, Tuple

# Scopus CSV export column names
YEAR_COLUMN = "Year"
AUTHORS_COLUMN = "Authors"
AFFILIATIONS_COLUMN = "Authors with affiliations"
EID_COLUMN = "EID"


def _clean(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


@dataclass(frozen=True)
class Record:
    """One publication row of a bibliographic export"""

    year: Optional[str]
    authors: Optional[str]
    affiliations: Optional[str]
    eid: Optional[Hashable] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Record":
        """Build a record from a row keyed by Scopus column names."""
        eid = row.get(EID_COLUMN)
        if isinstance(eid, str):
            eid = eid.strip() or None
        return cls(
            year=_clean(row.get(YEAR_COLUMN)),
            authors=_clean(row.get(AUTHORS_COLUMN)),
            affiliations=_clean(row.get(AFFILIATIONS_COLUMN)),
            eid=eid,
        )

    @property
    def is_complete(self) -> bool:
        """Year, author list and affiliation text are all present."""
        return all(_clean(v) for v in (self.year, self.authors, self.affiliations))


@dataclass(frozen=True)
class AuthorBlock:
    """One author's segment of an affiliation string."""

    key: str
    country: str
    tokens: Tuple[str, ...]


@dataclass
class Node:
    """An author in the co-authorship graph"""

    id: str
    country: Optional[str]
    co_authors: Set[str] = field(default_factory=set)
    degree: int = 0
    is_top_n: bool = False


@dataclass
class Edge:
    """Undirected co-authorship between two authors (source < target)."""

    source: str
    target: str
    publication_ids: Set[Hashable] = field(default_factory=set)

    @property
    def shared_publications(self) -> int:
        return len(self.publication_ids)


@dataclass
class GraphBuildResult:
    """Output of GraphBuilder.build, before country classification."""

    nodes: Dict[str, Node]
    edges: Dict[Tuple[str, str], Edge]
    country_mentions: Counter
    records_seen: int = 0
    records_used: int = 0
    blocks_skipped: int = 0


@dataclass
class ClassificationResult:
    """Countries ranked by author mentions, with the top-N cut."""

    ranked_countries: List[str]
    top_n: Set[str]
    top_countries: List[str]


@dataclass
class GraphNode:
    id: str
    country: Optional[str]
    is_top_10: bool
    degree: int


@dataclass
class GraphLink:
    source: str
    target: str
    shared_publications: int


@dataclass
class CoauthorGraph:
    """
    The co-authorship graph handed to a rendering layer.

    ``to_dict`` produces the JSON structure consumed by the front end:
    ``nodes``, ``links`` and ``top10Countries``, plus ``countryMentions``
    (mentions per ranked country) for reports.
    """

    nodes: List[GraphNode]
    links: List[GraphLink]
    top_countries: List[str]
    country_mentions: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes": [
                {
                    "id": n.id,
                    "country": n.country,
                    "is_top_10": n.is_top_10,
                    "degree": n.degree,
                }
                for n in self.nodes
            ],
            "links": [
                {
                    "source": l.source,
                    "target": l.target,
                    "shared_publications": l.shared_publications,
                }
                for l in self.links
            ],
            "top10Countries": list(self.top_countries),
            "countryMentions": dict(self.country_mentions),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CoauthorGraph":
        nodes = [
            GraphNode(
                id=n["id"],
                country=n.get("country"),
                is_top_10=bool(n.get("is_top_10", False)),
                degree=int(n.get("degree", 0)),
            )
            for n in data.get("nodes", [])
        ]
        links = [
            GraphLink(
                source=l["source"],
                target=l["target"],
                shared_publications=int(l.get("shared_publications", 1)),
            )
            for l in data.get("links", [])
        ]
        return cls(
            nodes=nodes,
            links=links,
            top_countries=list(data.get("top10Countries", [])),
            country_mentions={
                str(c): int(n) for c, n in data.get("countryMentions", {}).items()
            },
        )
