from .csv_writer import CSV_HEADERS, CsvReportWriter

__all__ = ['CSV_HEADERS', 'CsvReportWriter']
