#!/usr/bin/env python3
"""
Co-authorship Network CLI
=========================

Command-line interface for building co-authorship graphs from Scopus exports.

Usage:
    coauthor-network build [options]
    coauthor-network report [options]
"""

import argparse
import logging
import sys
from typing import List, Optional

from coauthor_network import __version__
from coauthor_network.config import NetworkConfig


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="coauthor-network",
        description="Build co-authorship graphs from Scopus bibliographic exports",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Build the graph JSON for the front end
  coauthor-network build --input data_scopus.csv --output graph.json

  # Also export for Gephi and other graph tools
  coauthor-network build -i data_scopus.csv --gephi gephi/ --graphml graph.graphml

  # Summarize a built graph
  coauthor-network report --input graph.json --format markdown
        """
    )

    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Build command
    build_parser = subparsers.add_parser(
        "build",
        help="Build the co-authorship graph from a Scopus CSV export"
    )
    build_parser.add_argument(
        "--input", "-i",
        type=str,
        required=True,
        help="Scopus CSV export (e.g., data_scopus.csv)"
    )
    build_parser.add_argument(
        "--output", "-o",
        type=str,
        default="coauthor_network.json",
        help="Output JSON file (default: coauthor_network.json)"
    )
    build_parser.add_argument(
        "--top-n", "-n",
        type=int,
        default=None,
        help="Number of top countries to flag (default: 10)"
    )
    build_parser.add_argument(
        "--max-records",
        type=int,
        default=None,
        help="Fail if the export has more records than this"
    )
    build_parser.add_argument(
        "--max-authors",
        type=int,
        default=None,
        help="Fail if a publication lists more authors than this"
    )
    build_parser.add_argument(
        "--graphml",
        type=str,
        default=None,
        help="Also write the graph as GraphML to this file"
    )
    build_parser.add_argument(
        "--gephi",
        type=str,
        default=None,
        help="Also write Gephi nodes.csv and edges.csv to this directory"
    )
    build_parser.add_argument(
        "--print-json",
        action="store_true",
        help="Print the generated JSON to stdout"
    )
    build_parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log progress and skipped records"
    )

    # Report command
    report_parser = subparsers.add_parser(
        "report",
        help="Generate a summary report of a built graph"
    )
    report_parser.add_argument(
        "--input", "-i",
        type=str,
        required=True,
        help="Graph JSON written by the build command"
    )
    report_parser.add_argument(
        "--format", "-f",
        type=str,
        choices=["markdown", "html", "json"],
        default="markdown",
        help="Output format (default: markdown)"
    )
    report_parser.add_argument(
        "--output", "-o",
        type=str,
        default=None,
        help="Output file (default: stdout)"
    )

    return parser


def build_config(args: argparse.Namespace) -> NetworkConfig:
    """Environment settings, overridden by command-line flags."""
    config = NetworkConfig.from_env()
    if args.top_n is not None:
        config.top_n = args.top_n
    if args.max_records is not None:
        config.max_records = args.max_records
    if args.max_authors is not None:
        config.max_authors_per_record = args.max_authors
    config.__post_init__()
    return config


def cmd_build(args: argparse.Namespace) -> int:
    """Execute the build command."""
    from coauthor_network.exporter import (
        graph_to_json,
        write_gephi_csv,
        write_graphml,
        write_json,
    )
    from coauthor_network.loader import load_records
    from coauthor_network.network import build_coauthor_network

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    print(f"coauthor-network v{__version__}", file=sys.stderr)
    print("=" * 60, file=sys.stderr)

    config = build_config(args)

    print(f"Loading records from: {args.input}", file=sys.stderr)
    records = load_records(args.input)
    print(f"Loaded {len(records):,} records", file=sys.stderr)

    graph = build_coauthor_network(records, config)

    print(f"Authors: {len(graph.nodes):,}", file=sys.stderr)
    print(f"Collaborations: {len(graph.links):,}", file=sys.stderr)
    print(f"Top countries: {', '.join(graph.top_countries)}", file=sys.stderr)

    path = write_json(graph, args.output)
    print(f"Graph saved to: {path}", file=sys.stderr)

    if args.graphml:
        path = write_graphml(graph, args.graphml)
        print(f"GraphML saved to: {path}", file=sys.stderr)

    if args.gephi:
        nodes_path, edges_path = write_gephi_csv(graph, args.gephi)
        print(f"Gephi tables saved to: {nodes_path}, {edges_path}", file=sys.stderr)

    if args.print_json:
        print(graph_to_json(graph))

    return 0


def cmd_report(args: argparse.Namespace) -> int:
    """Execute the report command."""
    from coauthor_network.exporter import read_json
    from coauthor_network.reporter import ReportGenerator

    graph = read_json(args.input)
    report = ReportGenerator(graph).generate(format=args.format)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(report)
        print(f"Report saved to: {args.output}", file=sys.stderr)
    else:
        print(report)

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        if args.command == "build":
            return cmd_build(args)
        elif args.command == "report":
            return cmd_report(args)
        else:
            parser.print_help()
            return 1
    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 130
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
