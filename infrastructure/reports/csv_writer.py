import csv
import logging
import os
import tempfile
from pathlib import Path

from domain.exceptions.currency import ReportError
from domain.models.currency import ReportRow

logger = logging.getLogger(__name__)

CSV_HEADERS = ['Currency Code', 'Country', 'Amount ($ 100 CAD)', 'Path']


class CsvReportWriter:
	def __init__(self, path: str | Path = 'currency_conversion.csv'):
		self.path = Path(path)

	def write(self, rows: list[ReportRow]) -> None:
		"""Write rows to a temporary sibling file, then move it over the target."""
		directory = self.path.parent
		try:
			fd, tmp_name = tempfile.mkstemp(
				prefix=f'.{self.path.name}.', suffix='.tmp', dir=directory
			)
		except OSError as e:
			raise ReportError(f'Cannot create report in {directory}: {e}') from e

		try:
			with os.fdopen(fd, 'w', newline='', encoding='utf-8') as handle:
				writer = csv.writer(handle)
				writer.writerow(CSV_HEADERS)
				for row in rows:
					writer.writerow([row.currency_code, row.country, str(row.amount), row.path])
			os.replace(tmp_name, self.path)
		except OSError as e:
			Path(tmp_name).unlink(missing_ok=True)
			raise ReportError(f'Failed to write report {self.path}: {e}') from e

		logger.info(f'Wrote {len(rows)} rows to {self.path}')
