from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from api.dependencies import (
	get_conversion_service,
	get_currency_service,
	get_edge_store,
	get_report_service,
)
from api.schemas import (
	CandidatePathResponse,
	ConversionDetailResponse,
	ConversionReportResponse,
	ReportRowResponse,
	SupportedCurrenciesResponse,
)
from application.services import (
	ConversionService,
	CurrencyService,
	ReportService,
	select_best_path,
)
from domain.graph.edge_store import EdgeStore

router = APIRouter(prefix='/api', tags=['conversions'])


@router.get('/health', status_code=status.HTTP_200_OK, summary='Liveness check')
async def health() -> dict:
	return {'status': 'ok'}


@router.get(
	'/conversions',
	response_model=ConversionReportResponse,
	status_code=status.HTTP_200_OK,
	summary='Best conversion from the base currency to every currency',
)
async def get_conversion_report(
	store: Annotated[EdgeStore, Depends(get_edge_store)],
	service: Annotated[ReportService, Depends(get_report_service)],
) -> ConversionReportResponse:
	rows = service.build_rows(store)
	return ConversionReportResponse(
		base_currency=service.base_currency,
		base_amount=service.base_amount,
		rows=[
			ReportRowResponse(
				currency_code=row.currency_code,
				country=row.country,
				amount=row.amount,
				path=row.path,
			)
			for row in rows
		],
	)


@router.get(
	'/conversions/{currency_code}',
	response_model=ConversionDetailResponse,
	status_code=status.HTTP_200_OK,
	summary='Best conversion path to one currency, with every candidate',
)
async def get_conversion(
	currency_code: Annotated[
		str,
		Path(
			min_length=3,
			max_length=5,
		),
	],
	currency_service: Annotated[CurrencyService, Depends(get_currency_service)],
	service: Annotated[ConversionService, Depends(get_conversion_service)],
) -> ConversionDetailResponse:
	currency = currency_service.validate_currency(currency_code.upper())

	paths = service.enumerator.enumerate_paths(currency.code)
	result = service.project(currency.code, select_best_path(paths))
	return ConversionDetailResponse(
		currency_code=result.currency_code,
		country=currency.country,
		rate=result.rate,
		amount=result.amount,
		path=result.path,
		hops=result.hops,
		candidates=[CandidatePathResponse(rate=p.rate, path=p.render()) for p in paths],
	)


@router.get(
	'/currencies',
	response_model=SupportedCurrenciesResponse,
	status_code=status.HTTP_200_OK,
	summary='List currencies present in the exchange-rate graph',
)
async def get_supported_currencies(
	service: Annotated[CurrencyService, Depends(get_currency_service)],
) -> SupportedCurrenciesResponse:
	currencies = service.get_supported_currencies()
	return SupportedCurrenciesResponse(currencies=[c.code for c in currencies])
