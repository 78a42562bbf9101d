from enum import Enum


class QuoteSource(str, Enum):
    TABLE = "table"
    DEFAULT = "default"

    def __str__(self):
        return self.value


class LookupOutcome(str, Enum):
    OK = "ok"
    API_ERROR = "api_error"
    NO_ROUTE = "no_route"
    TRANSPORT_ERROR = "transport_error"

    def __str__(self):
        return self.value
