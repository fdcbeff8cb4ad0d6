"""
Error types raised while parsing amounts and converting currencies.

Overview
--------
Two small hierarchies, one per layer:

- `AmountParseError` (a `ValueError`) for amount strings the parser rejects.
- `ConvertError` for everything that can go wrong between sending the rate
  request and looking up the target currency. The rate fetcher and the
  converter raise the same subclasses, so callers only need to catch the
  base class.

The `str()` of every error is the single diagnostic line shown to the user.
"""


class AmountParseError(ValueError):
    """Base class for amount strings that cannot be turned into a number."""
    message = "Invalid Amount"

    def __init__(self, text=""):
        super().__init__(self.message)
        self.text = text


class InvalidFormat(AmountParseError):
    message = "Invalid Format"


class InvalidSuffix(AmountParseError):
    message = "Invalid Suffix"


class InvalidNumber(AmountParseError):
    message = "Invalid Number"


class ConvertError(Exception):
    """Base class for failures while fetching rates or converting."""


class UnknownCurrency(ConvertError):
    """
    A currency code the rate API does not know.

    Raised both for a rejected base currency (HTTP 404) and for a target
    code missing from the returned rate table.

    Attributes
    ----------
    code : str
        The offending currency code, as it was used in the request/lookup.
    """
    def __init__(self, code):
        super().__init__(f"unknown currency: '{code}'")
        self.code = code


class HttpError(ConvertError):
    """The API answered with a non-2xx status other than 404."""
    def __init__(self, status):
        super().__init__(f"request returned code: '{status}'")
        self.status = status


class RequestError(ConvertError):
    # Transport failures only; the cause is chained, never rendered.
    def __init__(self):
        super().__init__("failed to send request to external api")


class MalformedResponse(ConvertError):
    """A 2xx response whose body is not a usable rate table."""
    def __init__(self, reason=""):
        super().__init__("malformed response from external api")
        self.reason = reason
