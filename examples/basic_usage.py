#!/usr/bin/env python3
"""
Basic Usage Example
===================

This example demonstrates how to build a co-authorship graph from a
Scopus CSV export and export it for visualization.
"""

import sys

# Import the main entry points
from coauthor_network import build_coauthor_network, load_records
from coauthor_network.exporter import write_gephi_csv, write_json
from coauthor_network.reporter import ReportGenerator


def main(path: str = "data_scopus.csv"):
    """Run a basic build and summary."""

    # 1. Load the export
    print("=" * 60)
    print("coauthor-network - Basic Usage Example")
    print("=" * 60)

    records = load_records(path)
    print(f"\nLoaded {len(records)} records")

    # 2. Build the graph
    graph = build_coauthor_network(records)

    print(f"Authors: {len(graph.nodes)}")
    print(f"Collaborations: {len(graph.links)}")

    # 3. Show some results
    print("\nTop Countries:")
    for country in graph.top_countries:
        print(f"  - {country}: {graph.country_mentions[country]} mentions")

    print("\nMost Connected Authors:")
    for node in sorted(graph.nodes, key=lambda n: n.degree, reverse=True)[:5]:
        print(f"  - {node.id} ({node.country}): {node.degree} co-authors")

    # 4. Export
    write_json(graph, "example_data/coauthor_network.json")
    write_gephi_csv(graph, "example_data/gephi")
    with open("example_data/report.md", "w") as f:
        f.write(ReportGenerator(graph).generate())

    print("\n" + "=" * 60)
    print("Full results saved to: example_data/")
    print("=" * 60)


if __name__ == "__main__":
    main(*sys.argv[1:2])
