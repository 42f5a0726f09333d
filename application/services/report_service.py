import logging
from decimal import Decimal
from typing import Protocol

from application.services.conversion_service import ConversionService
from application.services.path_service import CycleGuard, PathEnumerator
from application.services.rate_service import RateService
from domain.graph.edge_store import EdgeStore
from domain.models.currency import ReportRow

logger = logging.getLogger(__name__)


class ReportSink(Protocol):
	def write(self, rows: list[ReportRow]) -> None: ...


class ReportService:
	"""Builds one report row per destination currency of an exchange-rate snapshot."""

	def __init__(
		self,
		rate_service: RateService,
		sink: ReportSink | None = None,
		base_currency: str = 'CAD',
		base_amount: Decimal = Decimal(100),
		decimal_places: int | None = None,
		cycle_guard: CycleGuard = CycleGuard.VISITED,
		max_depth: int = 64,
	):
		self.rate_service = rate_service
		self.sink = sink
		self.base_currency = base_currency
		self.base_amount = base_amount
		self.decimal_places = decimal_places
		self.cycle_guard = cycle_guard
		self.max_depth = max_depth

	def conversion_service(self, store: EdgeStore) -> ConversionService:
		enumerator = PathEnumerator(
			store,
			base_currency=self.base_currency,
			cycle_guard=self.cycle_guard,
			max_depth=self.max_depth,
		)
		return ConversionService(
			enumerator, base_amount=self.base_amount, decimal_places=self.decimal_places
		)

	def build_rows(self, store: EdgeStore) -> list[ReportRow]:
		service = self.conversion_service(store)
		rows = []
		for currency in store.currencies():
			result = service.convert(currency.code)
			rows.append(
				ReportRow(
					currency_code=currency.code,
					country=currency.country,
					amount=result.amount,
					path=result.path,
				)
			)

		unreachable = sum(1 for row in rows if not row.path)
		logger.info(f'Built {len(rows)} report rows ({unreachable} unreachable from {self.base_currency})')
		return rows

	async def generate(self) -> list[ReportRow]:
		store = await self.rate_service.load_edge_store()
		rows = self.build_rows(store)

		if self.sink is not None:
			self.sink.write(rows)
		return rows
