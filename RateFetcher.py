"""
Exchange rate table lookup against exchangerate-api.com.

Overview
--------
`RateFetcher.fetch_rates(base)` issues one GET request to

    https://api.exchangerate-api.com/v4/latest/{base}

and returns the response's `rates` object as a read-only mapping of
currency code -> rate ("units of that currency per 1 unit of base").

Key points
----------
- The base code is sent exactly as given; the API accepts either case.
- One request per call, 30 second timeout, no retries, no caching.
- HTTP 404 means the API does not know the base currency and is reported
  as `UnknownCurrency(base)`. Any other non-2xx status is `HttpError`.
- Connection problems, timeouts and TLS errors become `RequestError`.
- A 2xx body that is not a JSON object with a `rates` object of positive
  finite numbers is reported as `MalformedResponse`.
"""

import logging
import math
from types import MappingProxyType

import requests

from ConvertErrors import HttpError, MalformedResponse, RequestError, UnknownCurrency


API_URL = "https://api.exchangerate-api.com/v4/latest/{}"
TIMEOUT_SECONDS = 30

logger = logging.getLogger(__name__)


class RateFetcher:
    """
    Fetch the rate table for a base currency.

    Attributes
    ----------
    api_url : str
        URL template with a single `{}` placeholder for the base currency.
    timeout : float
        Seconds to wait for the whole request before giving up.
    http : requests.Session | module
        Anything with a `get(url, timeout=...)` method; defaults to the
        `requests` module itself.
    """
    def __init__(self, api_url=API_URL, timeout=TIMEOUT_SECONDS, session=None):
        self.api_url = api_url
        self.timeout = timeout
        self.http = session if session is not None else requests

    def build_url(self, base_currency):
        return self.api_url.format(base_currency)

    def fetch_rates(self, base_currency):
        """
        Return the rate table for `base_currency`.

        Parameters
        ----------
        base_currency : str
            Currency code as typed by the user.

        Returns
        -------
        MappingProxyType[str, float]
            Read-only mapping of uppercase currency code to rate.

        Raises
        ------
        UnknownCurrency
            If the API answers 404 for this base currency.
        HttpError
            For any other non-2xx status.
        RequestError
            If the request could not be completed at all.
        MalformedResponse
            If a successful response does not contain a usable rate table.
        """
        url = self.build_url(base_currency)
        logger.debug("GET %s (timeout=%ss)", url, self.timeout)

        try:
            response = self.http.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.debug("Request to %s failed: %r", url, e)
            raise RequestError() from e

        status = response.status_code
        logger.debug("Response status %s for %s", status, url)
        if status == 404:
            raise UnknownCurrency(base_currency)
        if not 200 <= status < 300:
            raise HttpError(status)

        try:
            payload = response.json()
        except ValueError as e:
            # requests' JSONDecodeError is a ValueError subclass.
            raise MalformedResponse(f"body is not valid JSON: {e}") from e

        rates = parse_rate_table(payload)
        logger.debug("Received %d rates for base %s", len(rates), base_currency)
        return rates


def parse_rate_table(payload):
    """
    Extract and validate the `rates` object of a decoded API response.

    Every other field of the payload is ignored.
    """
    if not isinstance(payload, dict):
        raise MalformedResponse("response is not a JSON object")

    rates = payload.get("rates")
    if not isinstance(rates, dict):
        raise MalformedResponse("response has no 'rates' object")

    table = {}
    for code, rate in rates.items():
        # bool is an int subclass but never a valid rate.
        if isinstance(rate, bool) or not isinstance(rate, (int, float)):
            raise MalformedResponse(f"rate for {code!r} is not a number")
        try:
            rate = float(rate)
        except OverflowError:
            raise MalformedResponse(f"rate for {code!r} is out of range") from None
        # json accepts NaN and Infinity tokens.
        if not math.isfinite(rate) or rate <= 0:
            raise MalformedResponse(f"rate for {code!r} is not a positive number")
        table[code] = rate
    return MappingProxyType(table)


def fetch_rates(base_currency):
    """Fetch a rate table with the default endpoint and timeout."""
    return RateFetcher().fetch_rates(base_currency)
