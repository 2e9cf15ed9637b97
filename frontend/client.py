"""HTTP client for the dropout prediction service."""

import logging

import requests
from pydantic import HttpUrl, TypeAdapter, ValidationError

from frontend.config import settings
from frontend.errors import (
    BadStatusError,
    DecodingError,
    EmptyResultsError,
    InvalidURLError,
    TransportError,
)
from frontend.schemas import PredictRequest, PredictResponse, PredictResponseItem, StudentInput

logger = logging.getLogger(__name__)

_url_adapter = TypeAdapter(HttpUrl)

JSON_HEADERS = {"Content-Type": "application/json"}


def predict_url(base_url=None) -> str:
    """Join the service root and the predict path, raising InvalidURLError if malformed."""
    base_url = settings.base_url if base_url is None else base_url
    url = f"{base_url}{settings.predict_path}"
    try:
        _url_adapter.validate_python(url)
    except ValidationError as e:
        raise InvalidURLError(url) from e
    return url


def predict(record: StudentInput, base_url=None, session=None) -> PredictResponseItem:
    """
    Send one student to the prediction service and return its result.

    Args:
        record: Parsed form values
        base_url: Service root, defaults to ``settings.base_url``
        session: Object with a requests-compatible ``post``; a fresh
            ``requests.Session`` when omitted

    Raises:
        PredictionError: one of its subclasses, never a partial result
    """
    url = predict_url(base_url)
    payload = PredictRequest(students=[record]).to_wire()
    logger.debug("POST %s %s", url, payload)

    try:
        if session is None:
            with requests.Session() as s:
                r = s.post(url, json=payload, headers=JSON_HEADERS)
        else:
            r = session.post(url, json=payload, headers=JSON_HEADERS)
    except requests.RequestException as e:
        logger.warning("Request to %s failed: %s", url, e)
        raise TransportError(e) from e

    if not 200 <= r.status_code <= 299:
        logger.warning("Prediction service answered HTTP %s", r.status_code)
        raise BadStatusError(r.status_code)

    try:
        decoded = PredictResponse.decode(r.content)
    except ValidationError as e:
        logger.warning("Could not decode prediction response: %s", e)
        raise DecodingError(e) from e

    if not decoded.results:
        logger.warning("Prediction service returned no results")
        raise EmptyResultsError()

    # Only one student is sent, extra results are ignored
    return decoded.results[0]
