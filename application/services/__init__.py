from .conversion_service import ConversionService
from .currency_service import CurrencyService
from .path_service import CycleGuard, PathEnumerator, select_best_path
from .rate_service import RateService
from .report_service import ReportService

__all__ = [
	'ConversionService',
	'CurrencyService',
	'CycleGuard',
	'PathEnumerator',
	'RateService',
	'ReportService',
	'select_best_path',
]
