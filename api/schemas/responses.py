from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class ReportRowResponse(BaseModel):
	currency_code: str = Field(..., description='Target currency code')
	country: str = Field(..., description='Country derived from the currency name')
	amount: Decimal = Field(..., description='Amount obtained for the base quantity')
	path: str = Field(..., description='Conversion path, base currency first')


class ConversionReportResponse(BaseModel):
	base_currency: str = Field(..., description='Currency every path starts from')
	base_amount: Decimal = Field(..., description='Quantity of the base currency converted')
	rows: list[ReportRowResponse]

	model_config = ConfigDict(
		json_schema_extra={
			'example': {
				'base_currency': 'CAD',
				'base_amount': 100,
				'rows': [
					{'currency_code': 'EUR', 'country': 'Euro', 'amount': 70.0, 'path': 'CAD | EUR'}
				],
			}
		}
	)


class CandidatePathResponse(BaseModel):
	rate: Decimal = Field(..., description='Product of the rates along the path')
	path: str = Field(..., description='Conversion path, base currency first')


class ConversionDetailResponse(BaseModel):
	currency_code: str = Field(..., description='Target currency code')
	country: str = Field(..., description='Country derived from the currency name')
	rate: Decimal = Field(..., description='Best cumulative exchange rate')
	amount: Decimal = Field(..., description='Amount obtained for the base quantity')
	path: str = Field(..., description='Best conversion path, base currency first')
	hops: int = Field(..., description='Number of conversions on the best path')
	candidates: list[CandidatePathResponse] = Field(
		default_factory=list, description='Every path found, in search order'
	)


class SupportedCurrenciesResponse(BaseModel):
	currencies: list[str] = Field(description='List of currency codes')

	model_config = ConfigDict(json_schema_extra={'examples': [{'currencies': ['CAD', 'EUR', 'GBP', 'USD']}]})
