from collections import defaultdict
from collections.abc import Iterable

from domain.models.currency import Currency, ExchangeRateEdge


class EdgeStore:
	"""Read-only index of one snapshot of exchange-rate edges, keyed by destination."""

	def __init__(self, edges: Iterable[ExchangeRateEdge]):
		self._edges: tuple[ExchangeRateEdge, ...] = tuple(edges)
		incoming: dict[str, list[ExchangeRateEdge]] = defaultdict(list)
		for edge in self._edges:
			incoming[edge.to_currency].append(edge)
		self._incoming = {code: tuple(bucket) for code, bucket in incoming.items()}

	def __len__(self) -> int:
		return len(self._edges)

	def incoming_edges(self, currency_code: str) -> tuple[ExchangeRateEdge, ...]:
		return self._incoming.get(currency_code, ())

	def currencies(self) -> list[Currency]:
		names: dict[str, str | None] = {}
		for edge in self._edges:
			if names.get(edge.to_currency) is None:
				names[edge.to_currency] = edge.to_currency_name
		return [Currency(code=code, name=names[code]) for code in sorted(names)]

	def __contains__(self, currency_code: object) -> bool:
		return currency_code in self._incoming
