from decimal import Decimal

from application.services.path_service import PathEnumerator, select_best_path
from domain.models.currency import ConversionPath, ConversionResult


class ConversionService:
	def __init__(
		self,
		enumerator: PathEnumerator,
		base_amount: Decimal = Decimal(100),
		decimal_places: int | None = None,
	):
		self.enumerator = enumerator
		self.base_amount = base_amount
		self.decimal_places = decimal_places

	def convert(self, currency_code: str) -> ConversionResult:
		paths = self.enumerator.enumerate_paths(currency_code)
		best = select_best_path(paths)
		return self.project(currency_code, best)

	def project(self, currency_code: str, path: ConversionPath) -> ConversionResult:
		amount = self.base_amount * path.rate
		if self.decimal_places is not None:
			amount = round(amount, self.decimal_places)

		return ConversionResult(
			currency_code=currency_code,
			rate=path.rate,
			amount=amount,
			path=path.render(),
			hops=max(len(path.sequence) - 1, 0),
		)
