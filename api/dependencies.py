import logging
from typing import Annotated

from fastapi import Depends

from application.services import (
	ConversionService,
	CurrencyService,
	RateService,
	ReportService,
)
from config.settings import Settings, get_settings
from domain.graph.edge_store import EdgeStore
from infrastructure.providers import ExchangeRateProvider, NeoFinancialProvider

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	provider: ExchangeRateProvider | None = None


deps = AppDependencies()


def init_dependencies() -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = get_settings()

	deps.provider = NeoFinancialProvider(
		seed=settings.CONVERSION_API_SEED,
		base_url=settings.CONVERSION_API_URL,
		timeout=settings.HTTP_TIMEOUT,
	)
	logger.info('Dependencies initialized')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.provider:
		await deps.provider.close()
		deps.provider = None

	logger.info('Cleanup complete')


def get_provider() -> ExchangeRateProvider:
	if deps.provider is None:
		raise RuntimeError('Provider not initialized')
	return deps.provider


def get_rate_service(
	provider: Annotated[ExchangeRateProvider, Depends(get_provider)],
) -> RateService:
	return RateService(provider=provider)


def get_report_service(
	rate_service: Annotated[RateService, Depends(get_rate_service)],
	settings: Annotated[Settings, Depends(get_settings)],
) -> ReportService:
	return ReportService(
		rate_service=rate_service,
		base_currency=settings.BASE_CURRENCY,
		base_amount=settings.BASE_AMOUNT,
		decimal_places=settings.AMOUNT_DECIMAL_PLACES,
		cycle_guard=settings.CYCLE_GUARD,
		max_depth=settings.MAX_PATH_DEPTH,
	)


async def get_edge_store(
	rate_service: Annotated[RateService, Depends(get_rate_service)],
) -> EdgeStore:
	return await rate_service.load_edge_store()


def get_currency_service(
	store: Annotated[EdgeStore, Depends(get_edge_store)],
	settings: Annotated[Settings, Depends(get_settings)],
) -> CurrencyService:
	return CurrencyService(store=store, base_currency=settings.BASE_CURRENCY)


def get_conversion_service(
	store: Annotated[EdgeStore, Depends(get_edge_store)],
	report_service: Annotated[ReportService, Depends(get_report_service)],
) -> ConversionService:
	return report_service.conversion_service(store)
