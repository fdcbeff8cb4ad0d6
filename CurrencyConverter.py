"""
Currency conversion on top of a live rate table.

Overview
--------
`CurrencyConverter` provides a single method, `convert`, which takes a
`ConversionRequest`, fetches the rate table for its input currency and
multiplies the amount by the output currency's rate.

Key points
----------
- Exactly one rate request per conversion; nothing is cached.
- Errors from the rate fetcher (`UnknownCurrency`, `HttpError`,
  `RequestError`, `MalformedResponse`) propagate unchanged.
- A target code missing from the table raises `UnknownCurrency` with the
  (uppercase) target code.
- The rate source is injectable: any callable taking a base currency code
  and returning a mapping of code -> rate.
"""

import logging

from ConvertErrors import UnknownCurrency
from RateFetcher import fetch_rates

logger = logging.getLogger(__name__)


class CurrencyConverter:
    """
    Convert amounts between currencies using a rate source.
    """
    def __init__(self, rate_source=None):
        """
        Parameters
        ----------
        rate_source : callable | None
            `rate_source(base_currency) -> Mapping[str, float]`. Defaults to
            `RateFetcher.fetch_rates`, i.e. the live API.
        """
        self.rate_source = rate_source if rate_source is not None else fetch_rates

    def convert(self, request):
        """
        Convert `request.amount` from the input to the output currency.

        Parameters
        ----------
        request : ConversionRequest

        Returns
        -------
        float
            The converted amount.

        Raises
        ------
        UnknownCurrency
            If either currency is unknown to the API.
        ConvertError
            Any other failure reported by the rate source.
        """
        rates = self.rate_source(request.input_currency)
        return self.apply_rate(rates, request.output_currency, request.amount)

    @staticmethod
    def apply_rate(rates, currency, amount):
        rate = rates.get(currency)
        if rate is None:
            logger.debug("%s not in rate table (%d entries)", currency, len(rates))
            raise UnknownCurrency(currency)
        return rate * amount
