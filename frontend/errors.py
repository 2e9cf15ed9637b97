"""Failures the prediction client can report.

Every problem talking to the prediction service ends up as one of these,
so the form only has to catch ``PredictionError``.
"""


class PredictionError(Exception):
    pass


class InvalidURLError(PredictionError):
    def __init__(self, url):
        super().__init__(f"invalid URL: {url!r}")
        self.url = url


class BadStatusError(PredictionError):
    def __init__(self, status_code: int):
        super().__init__(f"HTTP status {status_code}")
        self.status_code = status_code


class EmptyResultsError(PredictionError):
    def __init__(self):
        super().__init__("response contained no results")


class DecodingError(PredictionError):
    def __init__(self, inner: Exception):
        super().__init__(f"could not decode response: {inner}")
        self.inner = inner


class TransportError(PredictionError):
    """Anything else that went wrong on the way: DNS, refused connection, TLS."""

    def __init__(self, inner: Exception):
        super().__init__(str(inner))
        self.inner = inner
