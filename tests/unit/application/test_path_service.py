# nosec B101


from decimal import Decimal

import pytest

from application.services.path_service import CycleGuard, PathEnumerator, select_best_path
from domain.exceptions.currency import EmptyCandidateSetError, PathSearchLimitError
from domain.graph.edge_store import EdgeStore
from domain.models.currency import ConversionPath

BOTH_GUARDS = pytest.mark.parametrize('cycle_guard', [CycleGuard.LOOKBACK, CycleGuard.VISITED])


# ============================================================================
# TEST: enumerate_paths() - Spec scenarios under both guards
# ============================================================================

@BOTH_GUARDS
def test_base_currency_yields_single_trivial_path(euro_store, cycle_guard):
    paths = PathEnumerator(euro_store, cycle_guard=cycle_guard).enumerate_paths('CAD')

    assert paths == [ConversionPath(rate=Decimal(1), sequence=('CAD',))]
    assert paths[0].render() == 'CAD'


@BOTH_GUARDS
def test_single_edge_yields_single_path_with_edge_rate(cycle_guard, edge):
    store = EdgeStore([edge('CAD', 'JPY', '110.5')])

    paths = PathEnumerator(store, cycle_guard=cycle_guard).enumerate_paths('JPY')

    assert paths == [ConversionPath(rate=Decimal('110.5'), sequence=('JPY', 'CAD'))]


@BOTH_GUARDS
def test_two_routes_to_euro_in_edge_order(euro_store, cycle_guard):
    paths = PathEnumerator(euro_store, cycle_guard=cycle_guard).enumerate_paths('EUR')

    assert [(p.rate, p.sequence) for p in paths] == [
        (Decimal('0.7'), ('EUR', 'CAD')),
        (Decimal('0.54'), ('EUR', 'GBP', 'CAD')),
    ]


@BOTH_GUARDS
def test_reciprocal_outgoing_edge_is_not_walked(round_trip_store, cycle_guard):
    paths = PathEnumerator(round_trip_store, cycle_guard=cycle_guard).enumerate_paths('USD')

    assert paths == [ConversionPath(rate=Decimal('0.8'), sequence=('USD', 'CAD'))]


@BOTH_GUARDS
def test_currency_without_incoming_edges_is_unreachable(euro_store, cycle_guard):
    paths = PathEnumerator(euro_store, cycle_guard=cycle_guard).enumerate_paths('ZZZ')

    assert paths == [ConversionPath.unreachable()]


@BOTH_GUARDS
def test_dead_end_branch_contributes_zero_rate_candidate(cycle_guard, edge):
    store = EdgeStore([edge('CAD', 'EUR', '0.7'), edge('XYZ', 'EUR', '5')])

    paths = PathEnumerator(store, cycle_guard=cycle_guard).enumerate_paths('EUR')

    assert paths == [
        ConversionPath(rate=Decimal('0.7'), sequence=('EUR', 'CAD')),
        ConversionPath.unreachable(),
    ]


@BOTH_GUARDS
def test_immediate_back_and_forth_is_pruned(cycle_guard, edge):
    store = EdgeStore([
        edge('Y', 'X', '2'),
        edge('X', 'Y', '3'),
        edge('CAD', 'Y', '0.5'),
    ])

    paths = PathEnumerator(store, cycle_guard=cycle_guard).enumerate_paths('X')

    assert paths == [ConversionPath(rate=Decimal('1.0'), sequence=('X', 'Y', 'CAD'))]


@BOTH_GUARDS
def test_all_branches_pruned_falls_back_to_unreachable(cycle_guard, edge):
    store = EdgeStore([edge('Y', 'X', '2'), edge('X', 'Y', '3')])

    paths = PathEnumerator(store, cycle_guard=cycle_guard).enumerate_paths('X')

    assert paths == [ConversionPath.unreachable()]


def test_sibling_branches_do_not_share_state(edge):
    store = EdgeStore([
        edge('A', 'EUR', '2'),
        edge('B', 'EUR', '3'),
        edge('CAD', 'A', '5'),
        edge('CAD', 'B', '7'),
    ])

    paths = PathEnumerator(store).enumerate_paths('EUR')

    assert [(p.rate, p.sequence) for p in paths] == [
        (Decimal('10'), ('EUR', 'A', 'CAD')),
        (Decimal('21'), ('EUR', 'B', 'CAD')),
    ]


def test_custom_base_currency(edge):
    store = EdgeStore([edge('USD', 'EUR', '0.9'), edge('CAD', 'EUR', '0.7')])

    paths = PathEnumerator(store, base_currency='USD').enumerate_paths('EUR')

    assert [p.sequence for p in paths] == [('EUR', 'USD'), ConversionPath.unreachable().sequence]


# ============================================================================
# TEST: enumerate_paths() - Cycle guards and depth ceiling
# ============================================================================

def test_visited_guard_terminates_on_longer_cycle(long_cycle_store):
    paths = PathEnumerator(long_cycle_store, cycle_guard=CycleGuard.VISITED).enumerate_paths('X')

    assert paths == [ConversionPath(rate=Decimal('1.0'), sequence=('X', 'A', 'C', 'B', 'CAD'))]


def test_lookback_guard_hits_depth_ceiling_on_longer_cycle(long_cycle_store):
    enumerator = PathEnumerator(long_cycle_store, cycle_guard=CycleGuard.LOOKBACK, max_depth=16)

    with pytest.raises(PathSearchLimitError) as exc_info:
        enumerator.enumerate_paths('X')

    assert '16 hops' in str(exc_info.value)


def test_lookback_depth_ceiling_applies_to_acyclic_chains(edge):
    store = EdgeStore([edge('CAD', 'A', '1'), edge('A', 'B', '1'), edge('B', 'C', '1')])

    assert len(PathEnumerator(store, cycle_guard=CycleGuard.LOOKBACK, max_depth=3).enumerate_paths('C')) == 1
    with pytest.raises(PathSearchLimitError):
        PathEnumerator(store, cycle_guard=CycleGuard.LOOKBACK, max_depth=2).enumerate_paths('C')


def test_visited_guard_ignores_depth_ceiling_on_long_chains(edge):
    codes = ['CAD'] + [f'C{i:02d}' for i in range(70)]
    store = EdgeStore([edge(src, dst, '1') for src, dst in zip(codes, codes[1:])])

    paths = PathEnumerator(store, cycle_guard=CycleGuard.VISITED, max_depth=64).enumerate_paths('C69')

    assert len(paths) == 1
    assert paths[0].rate == Decimal(1)
    assert len(paths[0].sequence) == 71
    assert paths[0].render().startswith('CAD | C00 | C01')


def test_cycle_guard_accepts_string_value(euro_store):
    enumerator = PathEnumerator(euro_store, cycle_guard='lookback')

    assert enumerator.cycle_guard is CycleGuard.LOOKBACK


def test_max_depth_must_be_positive(euro_store):
    with pytest.raises(ValueError):
        PathEnumerator(euro_store, max_depth=0)


# ============================================================================
# TEST: select_best_path()
# ============================================================================

def test_select_best_path_picks_highest_rate(euro_store):
    paths = PathEnumerator(euro_store).enumerate_paths('EUR')

    best = select_best_path(paths)

    assert best.rate == Decimal('0.7')
    assert best.sequence == ('EUR', 'CAD')


def test_select_best_path_ties_keep_first_found():
    first = ConversionPath(rate=Decimal('2'), sequence=('EUR', 'A', 'CAD'))
    second = ConversionPath(rate=Decimal('2'), sequence=('EUR', 'B', 'CAD'))

    assert select_best_path([first, second]) is first


def test_select_best_path_unreachable_only_candidate():
    assert select_best_path([ConversionPath.unreachable()]).rate == 0


def test_select_best_path_accepts_iterators():
    paths = iter([ConversionPath(rate=Decimal('1')), ConversionPath(rate=Decimal('3'))])

    assert select_best_path(paths).rate == Decimal('3')


def test_select_best_path_empty_raises():
    with pytest.raises(EmptyCandidateSetError):
        select_best_path([])
