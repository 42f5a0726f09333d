from typing import Protocol

from domain.models.currency import ExchangeRateEdge


class ExchangeRateProvider(Protocol):
	@property
	def name(self) -> str: ...

	async def fetch_conversions(self) -> list[ExchangeRateEdge]: ...

	async def close(self) -> None: ...
