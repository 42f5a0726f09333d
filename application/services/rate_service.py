import logging

from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from domain.exceptions.currency import EmptyEdgeSetError, ProviderUnavailableError
from domain.graph.edge_store import EdgeStore
from domain.models.currency import ExchangeRateEdge
from infrastructure.providers.base import ExchangeRateProvider

logger = logging.getLogger(__name__)


class RateService:
    def __init__(self, provider: ExchangeRateProvider):
        self.provider = provider

    async def load_edge_store(self) -> EdgeStore:
        edges = await self._fetch_from_provider()

        if not edges:
            raise EmptyEdgeSetError(f"Provider {self.provider.name} returned no exchange rates")

        logger.info(f"Loaded {len(edges)} exchange rates from {self.provider.name}")
        return EdgeStore(edges)

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        retry=retry_if_exception_type(ProviderUnavailableError),
        reraise=True,
    )
    async def _fetch_from_provider(self) -> list[ExchangeRateEdge]:
        try:
            return await self.provider.fetch_conversions()
        except ProviderUnavailableError as e:
            logger.warning(f"Provider {self.provider.name} unavailable: {e}")
            raise
