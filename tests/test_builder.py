"""Tests for the GraphBuilder class."""

import pytest

from coauthor_network.builder import GraphBuilder, pair_key
from coauthor_network.config import NetworkConfig
from coauthor_network.exceptions import EmptyResultError, InputSizeExceeded
from coauthor_network.models import Record


class TestRecordFiltering:
    """Test cases for skipping incomplete records."""

    def test_incomplete_records_are_skipped(self, record_factory):
        """Records missing year, authors or affiliations do not contribute."""
        records = [
            record_factory("Smith, J., USA; Lee, K., Korea", eid=1),
            record_factory("Doe, A., Canada; Roe, B., France", eid=2, year=None),
            record_factory("Doe, A., Canada; Roe, B., France", eid=3, authors="  "),
            Record(year="2023", authors="x", affiliations="", eid=4),
        ]

        result = GraphBuilder().build(records)

        assert set(result.nodes) == {"Smith, J.", "Lee, K."}
        assert result.records_seen == 4
        assert result.records_used == 1

    def test_all_records_missing_fields_raises(self, record_factory):
        records = [record_factory("Smith, J., USA", year=""), record_factory(None)]

        with pytest.raises(EmptyResultError) as exc_info:
            GraphBuilder().build(records)

        assert exc_info.value.records_seen == 2

    def test_empty_input_raises(self):
        with pytest.raises(EmptyResultError):
            GraphBuilder().build([])

    def test_record_from_row(self):
        """Rows keyed by Scopus column names become records."""
        record = Record.from_row({
            "Year": "2021",
            "Authors": "Smith J.; Lee K.",
            "Authors with affiliations": " Smith, J., USA ",
            "EID": "2-s2.0-42",
        })

        assert record.is_complete
        assert record.affiliations == "Smith, J., USA"
        assert record.eid == "2-s2.0-42"
        assert not Record.from_row({"Year": "2021"}).is_complete


class TestNodes:
    """Test cases for author nodes."""

    def test_degree_counts_distinct_coauthors(self, scopus_records):
        """Repeated collaboration with the same partner does not inflate degree."""
        result = GraphBuilder().build(scopus_records)

        assert result.nodes["Smith, J."].degree == 3
        assert result.nodes["Lee, K."].degree == 2
        assert result.nodes["Tanaka, H."].degree == 2
        assert result.nodes["Doe, A."].degree == 1
        for node in result.nodes.values():
            assert node.degree == len(node.co_authors)

    def test_coauthor_sets_are_symmetric(self, scopus_records):
        result = GraphBuilder().build(scopus_records)

        for node in result.nodes.values():
            for other in node.co_authors:
                assert node.id in result.nodes[other].co_authors

    def test_country_last_write_wins(self, record_factory):
        """An author's country is the one seen in the latest record."""
        records = [
            record_factory("Smith, J., MIT, United States; Lee, K., Korea", eid=1),
            record_factory("Smith, J., ETH Zurich, Switzerland", eid=2),
        ]

        result = GraphBuilder().build(records)

        assert result.nodes["Smith, J."].country == "Switzerland"
        assert result.nodes["Lee, K."].country == "Korea"

    def test_single_author_record(self, record_factory):
        """One valid block gives one node and no edges."""
        result = GraphBuilder().build([record_factory("Smith, J., MIT, United States", eid=1)])

        assert list(result.nodes) == ["Smith, J."]
        assert result.nodes["Smith, J."].degree == 0
        assert result.edges == {}

    def test_single_author_record_for_known_author(self, record_factory):
        records = [
            record_factory("Smith, J., USA; Lee, K., Korea", eid=1),
            record_factory("Smith, J., USA", eid=2),
        ]

        result = GraphBuilder().build(records)

        assert len(result.nodes) == 2
        assert len(result.edges) == 1

    def test_node_order_is_first_seen(self, scopus_records):
        result = GraphBuilder().build(scopus_records)
        assert list(result.nodes) == ["Smith, J.", "Lee, K.", "Tanaka, H.", "Doe, A."]


class TestEdges:
    """Test cases for co-authorship edges."""

    def test_shared_publications(self, scopus_records):
        result = GraphBuilder().build(scopus_records)

        assert result.edges[("Lee, K.", "Smith, J.")].shared_publications == 2
        assert result.edges[("Smith, J.", "Tanaka, H.")].shared_publications == 1
        assert result.edges[("Doe, A.", "Smith, J.")].shared_publications == 1
        assert len(result.edges) == 4

    def test_edge_endpoints_are_ordered(self, scopus_records):
        result = GraphBuilder().build(scopus_records)

        for (source, target), edge in result.edges.items():
            assert source < target
            assert (edge.source, edge.target) == (source, target)
            assert edge.shared_publications >= 1

    def test_symmetric_pairs_give_one_edge(self, record_factory):
        """(A, B) and (B, A) in different records are the same edge."""
        records = [
            record_factory("Alpha, A., X; Beta, B., Y", eid=1),
            record_factory("Beta, B., Y; Alpha, A., X", eid=2),
        ]

        result = GraphBuilder().build(records)

        assert list(result.edges) == [("Alpha, A.", "Beta, B.")]
        assert result.edges[("Alpha, A.", "Beta, B.")].shared_publications == 2

    def test_same_publication_twice_counts_once(self, scopus_records):
        """Feeding a publication twice does not change edge weights."""
        once = GraphBuilder().build(scopus_records)
        twice = GraphBuilder().build(scopus_records + scopus_records[:1])

        for key, edge in once.edges.items():
            assert twice.edges[key].shared_publications == edge.shared_publications

    def test_duplicate_author_in_record_has_no_self_edge(self, record_factory):
        records = [record_factory("Smith, J., USA; Lee, K., Korea; Smith, J., USA", eid=1)]

        result = GraphBuilder().build(records)

        assert list(result.edges) == [("Lee, K.", "Smith, J.")]
        assert "Smith, J." not in result.nodes["Smith, J."].co_authors
        assert result.nodes["Smith, J."].degree == 1

    def test_malformed_block_does_not_affect_pairing(self, record_factory):
        records = [record_factory("Smith, J., USA; OnlyOneToken; Lee, K., Korea", eid=1)]

        result = GraphBuilder().build(records)

        assert set(result.nodes) == {"Smith, J.", "Lee, K."}
        assert list(result.edges) == [("Lee, K.", "Smith, J.")]
        assert result.blocks_skipped == 1

    def test_records_without_eid_stay_distinct(self, record_factory):
        records = [
            record_factory("Alpha, A., X; Beta, B., Y"),
            record_factory("Alpha, A., X; Beta, B., Y"),
        ]

        result = GraphBuilder().build(records)

        assert result.edges[("Alpha, A.", "Beta, B.")].shared_publications == 2

    def test_missing_eid_never_matches_a_real_eid(self, record_factory):
        """A row without an EID stays distinct even from an EID that looks positional."""
        records = [
            record_factory("Alpha, A., X; Beta, B., Y"),
            record_factory("Alpha, A., X; Beta, B., Y", eid="row:0"),
        ]

        result = GraphBuilder().build(records)

        assert result.edges[("Alpha, A.", "Beta, B.")].shared_publications == 2

    def test_pair_key(self):
        assert pair_key("b", "a") == ("a", "b")
        assert pair_key("a", "b") == ("a", "b")


class TestCountryMentions:
    """Test cases for per-country mention counting."""

    def test_mentions_count_every_valid_block(self, scopus_records):
        result = GraphBuilder().build(scopus_records)

        assert result.country_mentions["United States"] == 3
        assert result.country_mentions["South Korea"] == 2
        assert result.country_mentions["Japan"] == 1
        assert result.country_mentions["Canada"] == 1

    def test_malformed_blocks_not_counted(self, record_factory):
        result = GraphBuilder().build([record_factory("Smith, J., USA; Canada", eid=1)])
        assert dict(result.country_mentions) == {"USA": 1}


class TestSizeLimits:
    """Test cases for input size bounds."""

    def test_max_records(self, scopus_records):
        builder = GraphBuilder(NetworkConfig(max_records=2))

        with pytest.raises(InputSizeExceeded) as exc_info:
            builder.build(scopus_records)

        assert exc_info.value.limit == 2
        assert exc_info.value.actual == 3

    def test_max_authors_per_record(self, scopus_records):
        builder = GraphBuilder(NetworkConfig(max_authors_per_record=2))

        with pytest.raises(InputSizeExceeded) as exc_info:
            builder.build(scopus_records)

        assert exc_info.value.eid == "2-s2.0-001"

    def test_limits_not_hit(self, scopus_records):
        builder = GraphBuilder(NetworkConfig(max_records=3, max_authors_per_record=3))
        assert len(builder.build(scopus_records).nodes) == 4
