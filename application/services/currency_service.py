from domain.exceptions.currency import InvalidCurrencyError
from domain.graph.edge_store import EdgeStore
from domain.models.currency import Currency


class CurrencyService:
	def __init__(self, store: EdgeStore, base_currency: str = 'CAD'):
		self.store = store
		self.base_currency = base_currency

	def get_supported_currencies(self) -> list[Currency]:
		return self.store.currencies()

	def validate_currency(self, code: str) -> Currency:
		for currency in self.store.currencies():
			if currency.code == code:
				return currency

		if code == self.base_currency:
			return Currency(code=code)
		raise InvalidCurrencyError(f'Currency {code} is not in the exchange-rate graph')
