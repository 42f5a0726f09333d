import logging
from collections.abc import Iterable, Iterator

from domain.exceptions.currency import EmptyCandidateSetError, PathSearchLimitError
from domain.graph.cycle_guard import CycleGuard
from domain.graph.edge_store import EdgeStore
from domain.models.currency import ConversionPath

logger = logging.getLogger(__name__)


class PathEnumerator:
	"""Walks incoming edges backwards from a target currency to the base currency.

	Every branch carries its own immutable ConversionPath, so sibling
	branches never observe each other's rate or sequence. The walk uses an
	explicit stack; paths come out in depth-first, edge-input order.

	`max_depth` only bounds LOOKBACK searches. A VISITED branch can never
	hold a currency twice, so it ends after at most one hop per currency.
	"""

	def __init__(
		self,
		store: EdgeStore,
		base_currency: str = 'CAD',
		cycle_guard: CycleGuard = CycleGuard.VISITED,
		max_depth: int = 64,
	):
		if max_depth < 1:
			raise ValueError('max_depth must be at least 1')
		self.store = store
		self.base_currency = base_currency
		self.cycle_guard = CycleGuard(cycle_guard)
		self.max_depth = max_depth

	def enumerate_paths(self, currency_code: str) -> list[ConversionPath]:
		paths = list(self._walk(currency_code))
		if not paths:
			logger.warning(f'Every path to {currency_code} was pruned as cyclic, treating it as unreachable')
			return [ConversionPath.unreachable()]

		logger.debug(f'Found {len(paths)} candidate paths for {currency_code}')
		return paths

	def _walk(self, currency_code: str) -> Iterator[ConversionPath]:
		stack = [(currency_code, ConversionPath())]
		while stack:
			node, path = stack.pop()
			if node == self.base_currency:
				yield path.visit(node)
				continue

			edges = self.store.incoming_edges(node)
			if not edges:
				yield ConversionPath.unreachable()
				continue

			path = path.visit(node)
			if self.cycle_guard is CycleGuard.LOOKBACK and len(path.sequence) > self.max_depth:
				raise PathSearchLimitError(
					f'Path search exceeded {self.max_depth} hops at {" <- ".join(path.sequence)}'
				)

			branches = [
				(edge.from_currency, path.traverse(edge))
				for edge in edges
				if not self._closes_cycle(path.sequence, edge.from_currency)
			]
			# first edge on top of the stack
			stack.extend(reversed(branches))

	def _closes_cycle(self, sequence: tuple[str, ...], currency_code: str) -> bool:
		if self.cycle_guard is CycleGuard.LOOKBACK:
			return len(sequence) >= 2 and sequence[-2] == currency_code
		return currency_code in sequence


def select_best_path(paths: Iterable[ConversionPath]) -> ConversionPath:
	"""Highest rate wins; on a tie the earliest path found is kept."""
	best: ConversionPath | None = None
	for path in paths:
		if best is None or path.rate > best.rate:
			best = path

	if best is None:
		raise EmptyCandidateSetError('No candidate paths to select from')
	return best
