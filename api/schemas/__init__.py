from .responses import (
	CandidatePathResponse,
	ConversionDetailResponse,
	ConversionReportResponse,
	ReportRowResponse,
	SupportedCurrenciesResponse,
)

__all__ = [
	'CandidatePathResponse',
	'ConversionDetailResponse',
	'ConversionReportResponse',
	'ReportRowResponse',
	'SupportedCurrenciesResponse',
]
