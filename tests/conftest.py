"""Shared fixtures for the co-authorship network tests."""

import pytest


def make_record(affiliations, eid=None, year="2023", authors="placeholder"):
    from coauthor_network.models import Record

    return Record(year=year, authors=authors, affiliations=affiliations, eid=eid)


@pytest.fixture
def record_factory():
    return make_record


@pytest.fixture
def scopus_records():
    """Three publications in Scopus "Authors with affiliations" layout."""
    return [
        make_record(
            "Smith, J., Dept. of Physics, MIT, Cambridge, United States; "
            "Lee, K., KAIST, Daejeon, South Korea; "
            "Tanaka, H., University of Tokyo, Tokyo, Japan",
            eid="2-s2.0-001",
        ),
        make_record(
            "Smith, J., MIT, Cambridge, United States; "
            "Lee, K., KAIST, Daejeon, South Korea",
            eid="2-s2.0-002",
        ),
        make_record(
            "Doe, A., University of Toronto, Toronto, Canada; "
            "Smith, J., MIT, Cambridge, United States",
            eid="2-s2.0-003",
        ),
    ]
