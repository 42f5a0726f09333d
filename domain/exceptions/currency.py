class CurrencyException(Exception):
    pass


class InvalidCurrencyError(CurrencyException):
    pass

class ProviderError(CurrencyException):
    pass


class EmptyEdgeSetError(ProviderError):
    pass


class EmptyCandidateSetError(CurrencyException):
    pass


class PathSearchLimitError(CurrencyException):
    pass


class ReportError(CurrencyException):
    pass


class ProviderUnavailableError(ProviderError):
    pass
