from decimal import Decimal, InvalidOperation

import httpx

from domain.exceptions.currency import ProviderError, ProviderUnavailableError
from domain.models.currency import ExchangeRateEdge


class NeoFinancialProvider:
	BASE_URL = 'https://api-coding-challenge.neofinancial.com'

	def __init__(
		self,
		seed: str = '12454',
		base_url: str | None = None,
		client: httpx.AsyncClient | None = None,
		timeout: int = 10,
	):
		self.seed = seed
		self.base_url = (base_url or self.BASE_URL).rstrip('/')
		self._client = client or httpx.AsyncClient(timeout=timeout)

	@property
	def name(self) -> str:
		return 'neofinancial'

	async def _request(self, endpoint: str, params: dict) -> list:
		url = f'{self.base_url}/{endpoint}'

		try:
			response = await self._client.get(url, params=params)
			response.raise_for_status()
			data = response.json()
		except httpx.HTTPStatusError as e:
			error = ProviderUnavailableError if e.response.status_code >= 500 else ProviderError
			raise error(
				f'NeoFinancial HTTP error {e.response.status_code}: {e.response.text[:200]}'
			) from e
		except httpx.RequestError as e:
			raise ProviderUnavailableError(f'NeoFinancial request failed: {e.__class__.__name__}') from e
		except Exception as e:
			raise ProviderError(f'NeoFinancial response parsing error: {str(e)}') from e

		if not isinstance(data, list):
			raise ProviderError(f'NeoFinancial response parsing error: expected a list, got {type(data).__name__}')
		return data

	async def fetch_conversions(self) -> list[ExchangeRateEdge]:
		data = await self._request('currency-conversion', {'seed': self.seed})
		return [self._parse_edge(item) for item in data]

	@staticmethod
	def _parse_edge(item: dict) -> ExchangeRateEdge:
		try:
			rate = Decimal(str(item['exchangeRate']))
			edge = ExchangeRateEdge(
				from_currency=item['fromCurrencyCode'],
				to_currency=item['toCurrencyCode'],
				rate=rate,
				from_currency_name=item.get('fromCurrencyName'),
				to_currency_name=item.get('toCurrencyName'),
			)
		except (KeyError, TypeError, AttributeError, InvalidOperation) as e:
			raise ProviderError(f'Malformed conversion entry: {item!r}') from e

		if not rate.is_finite() or rate <= 0:
			raise ProviderError(f'Non-positive exchange rate in entry: {item!r}')
		return edge

	async def close(self) -> None:
		await self._client.aclose()
