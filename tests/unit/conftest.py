"""
Shared exchange-rate graphs for unit tests.
"""

from decimal import Decimal

import pytest

from domain.graph.edge_store import EdgeStore
from domain.models.currency import ExchangeRateEdge


def make_edge(from_currency: str, to_currency: str, rate: str, to_name: str | None = None) -> ExchangeRateEdge:
    return ExchangeRateEdge(
        from_currency=from_currency,
        to_currency=to_currency,
        rate=Decimal(rate),
        to_currency_name=to_name,
    )


@pytest.fixture
def edge():
    """Factory for a single exchange-rate edge"""
    return make_edge


@pytest.fixture
def euro_edges():
    """Two ways to EUR: directly, or through GBP"""
    return [
        make_edge('CAD', 'EUR', '0.7', 'Euro'),
        make_edge('CAD', 'GBP', '0.6', 'British Pound'),
        make_edge('GBP', 'EUR', '0.9', 'Euro'),
    ]


@pytest.fixture
def euro_store(euro_edges):
    return EdgeStore(euro_edges)


@pytest.fixture
def round_trip_store():
    return EdgeStore([
        make_edge('CAD', 'USD', '0.8', 'US Dollar'),
        make_edge('USD', 'CAD', '1.25', 'Canadian Dollar'),
    ])


@pytest.fixture
def long_cycle_store():
    """X <- A <- C <- B <- A is a three-currency cycle; B can also be reached from CAD"""
    return EdgeStore([
        make_edge('A', 'X', '2'),
        make_edge('C', 'A', '1'),
        make_edge('B', 'C', '1'),
        make_edge('A', 'B', '1'),
        make_edge('CAD', 'B', '0.5'),
    ])
