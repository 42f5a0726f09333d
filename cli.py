import argparse
import asyncio
import logging
import sys

from pydantic import ValidationError

from application.services import CycleGuard, RateService, ReportService
from config.logging_config import configure_logging
from config.settings import Settings, get_settings
from domain.exceptions.currency import CurrencyException
from infrastructure.providers import NeoFinancialProvider
from infrastructure.reports import CsvReportWriter

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	parser = argparse.ArgumentParser(
		prog='currency-report',
		description='Write the best conversion path from the base currency to every currency as CSV.',
	)
	parser.add_argument('-o', '--output', help='CSV file to write (default: REPORT_FILENAME)')
	parser.add_argument(
		'--cycle-guard',
		choices=[guard.value for guard in CycleGuard],
		help='How branches that revisit a currency are pruned (default: CYCLE_GUARD)',
	)
	parser.add_argument('--log-level', help='Logging level (default: LOG_LEVEL)')
	return parser.parse_args(argv)


async def generate_report(settings: Settings, output: str, cycle_guard: CycleGuard) -> int:
	provider = NeoFinancialProvider(
		seed=settings.CONVERSION_API_SEED,
		base_url=settings.CONVERSION_API_URL,
		timeout=settings.HTTP_TIMEOUT,
	)
	service = ReportService(
		rate_service=RateService(provider),
		sink=CsvReportWriter(output),
		base_currency=settings.BASE_CURRENCY,
		base_amount=settings.BASE_AMOUNT,
		decimal_places=settings.AMOUNT_DECIMAL_PLACES,
		cycle_guard=cycle_guard,
		max_depth=settings.MAX_PATH_DEPTH,
	)
	try:
		rows = await service.generate()
	finally:
		await provider.close()
	return len(rows)


def main(argv: list[str] | None = None) -> int:
	args = parse_args(argv)
	try:
		settings = get_settings()
	except ValidationError as e:
		configure_logging(args.log_level or 'INFO')
		logger.error(f'Invalid configuration: {e}')
		return 2
	configure_logging(args.log_level or settings.LOG_LEVEL, json_output=settings.LOG_JSON)

	output = args.output or settings.REPORT_FILENAME
	cycle_guard = CycleGuard(args.cycle_guard) if args.cycle_guard else settings.CYCLE_GUARD
	try:
		count = asyncio.run(generate_report(settings, output, cycle_guard))
	except CurrencyException as e:
		logger.error(f'Report generation failed: {e}')
		return 1

	logger.info(f'Report with {count} currencies written to {output}')
	return 0


if __name__ == '__main__':
	sys.exit(main())
