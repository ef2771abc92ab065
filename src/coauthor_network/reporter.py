"""
Report Generator
================

Summarize a co-authorship graph in various formats.
"""

import html
import json
from datetime import datetime
from typing import Any, Dict, List

import networkx as nx

from coauthor_network.exporter import to_networkx
from coauthor_network.models import CoauthorGraph


class ReportGenerator:
    """Generate co-authorship network reports."""

    def __init__(self, graph: CoauthorGraph, top: int = 10) -> None:
        """Initialize the report generator.

        Args:
            graph: Graph to summarize.
            top: Number of rows in the author and collaboration tables.
        """
        self.graph = graph
        self.top = top

    def generate(self, format: str = "markdown") -> str:
        """Generate a report in the specified format.

        Args:
            format: Output format ('markdown', 'html', 'json').

        Returns:
            Report content as a string.
        """
        data = self.summarize()

        if format == "markdown":
            return self._generate_markdown(data)
        elif format == "html":
            return self._generate_html(data)
        elif format == "json":
            return json.dumps(data, indent=2, default=str)
        else:
            raise ValueError(f"Unknown format: {format}")

    def summarize(self) -> Dict[str, Any]:
        """Collect the statistics shown in every report format."""
        graph = self.graph
        G = to_networkx(graph)
        degrees = [n.degree for n in graph.nodes]
        components = list(nx.connected_components(G))

        countries = sorted({n.country for n in graph.nodes if n.country})
        top_connected = sorted(graph.nodes, key=lambda n: (-n.degree, n.id))[:self.top]
        strongest = sorted(
            graph.links,
            key=lambda l: (-l.shared_publications, l.source, l.target),
        )[:self.top]

        return {
            "author_count": len(graph.nodes),
            "collaboration_count": len(graph.links),
            "country_count": len(countries),
            "isolated_authors": sum(1 for d in degrees if d == 0),
            "min_degree": min(degrees) if degrees else 0,
            "max_degree": max(degrees) if degrees else 0,
            "avg_degree": round(sum(degrees) / len(degrees), 2) if degrees else 0,
            "density": round(nx.density(G), 6) if len(G) > 1 else 0,
            "num_components": len(components),
            "largest_component_size": max((len(c) for c in components), default=0),
            "top_countries": [
                {
                    "country": c,
                    "mentions": graph.country_mentions.get(c),
                    "authors": sum(1 for n in graph.nodes if n.country == c),
                }
                for c in graph.top_countries
            ],
            "top_connected": [
                {"name": n.id, "country": n.country, "degree": n.degree}
                for n in top_connected
            ],
            "strongest_collaborations": [
                {"authors": [l.source, l.target], "shared_publications": l.shared_publications}
                for l in strongest
            ],
        }

    def _generate_markdown(self, data: Dict[str, Any]) -> str:
        """Generate markdown report."""
        lines = [
            "# Co-authorship Network Report",
            "",
            f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}",
            "",
            "---",
            "",
            "## Overview",
            "",
            f"- **Authors**: {data['author_count']:,}",
            f"- **Collaborations**: {data['collaboration_count']:,}",
            f"- **Countries**: {data['country_count']:,}",
            f"- **Degree range**: {data['min_degree']} - {data['max_degree']} (avg {data['avg_degree']})",
            f"- **Connected components**: {data['num_components']:,} "
            f"(largest: {data['largest_component_size']:,} authors)",
            f"- **Authors without co-authors**: {data['isolated_authors']:,}",
            "",
        ]

        if data["top_countries"]:
            lines.extend([
                "## Top Countries",
                "",
                "| Rank | Country | Authors | Mentions |",
                "|------|---------|---------|----------|",
            ])
            for rank, row in enumerate(data["top_countries"], start=1):
                mentions = row["mentions"] if row["mentions"] is not None else "-"
                lines.append(f"| {rank} | {row['country']} | {row['authors']} | {mentions} |")
            lines.append("")

        if data["top_connected"]:
            lines.extend([
                "## Most Connected Authors",
                "",
                "| Author | Country | Co-authors |",
                "|--------|---------|------------|",
            ])
            for author in data["top_connected"]:
                lines.append(f"| {author['name']} | {author['country']} | {author['degree']} |")
            lines.append("")

        if data["strongest_collaborations"]:
            lines.extend([
                "## Strongest Collaborations",
                "",
            ])
            for collab in data["strongest_collaborations"]:
                pair = " & ".join(collab["authors"])
                lines.append(f"- **{pair}**: {collab['shared_publications']} shared publications")
            lines.append("")

        lines.extend([
            "---",
            "",
            "*Report generated by coauthor-network*",
        ])

        return "\n".join(lines)

    def _generate_html(self, data: Dict[str, Any]) -> str:
        """Generate HTML report."""
        body: List[str] = []
        in_list = False
        in_table = False

        for line in self._generate_markdown(data).split("\n"):
            if in_list and not line.startswith("- "):
                body.append("</ul>")
                in_list = False
            if in_table and not line.startswith("|"):
                body.append("</table>")
                in_table = False

            if line.startswith("## "):
                body.append(f"<h2>{html.escape(line[3:])}</h2>")
            elif line.startswith("# "):
                body.append(f"<h1>{html.escape(line[2:])}</h1>")
            elif line.startswith("- "):
                if not in_list:
                    body.append("<ul>")
                    in_list = True
                body.append(f"<li>{_inline(line[2:])}</li>")
            elif line.startswith("|"):
                cells = [c.strip() for c in line.strip("|").split("|")]
                if all(set(c) <= {"-"} for c in cells):
                    continue
                if not in_table:
                    body.append("<table>")
                    in_table = True
                    tag = "th"
                else:
                    tag = "td"
                row = "".join(f"<{tag}>{html.escape(c)}</{tag}>" for c in cells)
                body.append(f"<tr>{row}</tr>")
            elif line == "---":
                body.append("<hr>")
            elif line:
                body.append(f"<p>{_inline(line)}</p>")

        if in_list:
            body.append("</ul>")
        if in_table:
            body.append("</table>")

        content = "\n".join(body)
        return f"""<!DOCTYPE html>
<html>
<head>
    <title>Co-authorship Network Report</title>
    <style>
        body {{ font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; max-width: 800px; margin: 0 auto; padding: 20px; }}
        h1, h2, h3 {{ color: #333; }}
        table {{ border-collapse: collapse; width: 100%; }}
        th, td {{ border: 1px solid #ddd; padding: 8px; text-align: left; }}
        th {{ background-color: #f5f5f5; }}
    </style>
</head>
<body>
{content}
</body>
</html>"""


def _inline(text: str) -> str:
    """Escape text and turn **bold** / *italic* markers into tags."""
    escaped = html.escape(text)
    parts = escaped.split("**")
    out = []
    for i, part in enumerate(parts):
        out.append(f"<strong>{part}</strong>" if i % 2 else part)
    escaped = "".join(out)
    if escaped.startswith("*") and escaped.endswith("*") and len(escaped) > 1:
        escaped = f"<em>{escaped[1:-1]}</em>"
    return escaped
