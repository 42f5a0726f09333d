from dataclasses import dataclass, field
from decimal import Decimal

PATH_SEPARATOR = ' | '


def country_from_currency_name(currency_name: str | None) -> str:
    """Best-effort country from a currency's English name.

    Drops the last word ("Brazil Real" -> "Brazil"). Wrong for names like
    "Turkish New Lira", which gives "Turkish New".
    """
    if not currency_name:
        return ''
    words = currency_name.split()
    if len(words) <= 1:
        return ''.join(words)
    return ' '.join(words[:-1])


@dataclass(frozen=True)
class ExchangeRateEdge:
    from_currency: str
    to_currency: str
    rate: Decimal
    from_currency_name: str | None = None
    to_currency_name: str | None = None


@dataclass(frozen=True)
class Currency:
    code: str
    name: str | None = None

    @property
    def country(self) -> str:
        return country_from_currency_name(self.name)


@dataclass(frozen=True)
class ConversionPath:
    """A walk from a target currency back towards the base currency.

    `sequence` is ordered target first; `rate` is the product of the rates
    of the edges between consecutive codes.
    """

    rate: Decimal = Decimal(1)
    sequence: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def unreachable(cls) -> 'ConversionPath':
        return cls(rate=Decimal(0), sequence=())

    @property
    def is_unreachable(self) -> bool:
        return self.rate == 0 and not self.sequence

    @property
    def last(self) -> str | None:
        return self.sequence[-1] if self.sequence else None

    def is_complete(self, base_currency: str) -> bool:
        return self.last == base_currency or self.is_unreachable

    def visit(self, currency_code: str) -> 'ConversionPath':
        return ConversionPath(rate=self.rate, sequence=self.sequence + (currency_code,))

    def traverse(self, edge: ExchangeRateEdge) -> 'ConversionPath':
        return ConversionPath(rate=self.rate * edge.rate, sequence=self.sequence)

    def render(self) -> str:
        # base -> ... -> target
        return PATH_SEPARATOR.join(reversed(self.sequence))


@dataclass(frozen=True)
class ConversionResult:
    currency_code: str
    rate: Decimal
    amount: Decimal
    path: str
    hops: int


@dataclass(frozen=True)
class ReportRow:
    currency_code: str
    country: str
    amount: Decimal
    path: str
