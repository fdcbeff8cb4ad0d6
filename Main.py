#!/usr/bin/env python3

"""
Command-line currency converter.

Usage examples:
  # 1000 US dollars in euros, human-readable output ("1.00k USD = 910.00 EUR")
  python Main.py usd eur 1k

  # Same conversion with exact numbers ("1000 USD = 910 EUR")
  python Main.py usd eur 1k --real

  # Show the request being made
  python Main.py gbp jpy 2.5m -v

Flow
----
parse amount -> build ConversionRequest -> fetch rates (with a spinner on
stderr) -> multiply -> format -> print one line to stdout.

Any amount or conversion error is printed as a single `error: ...` line on
stderr and the process exits with status 1.
"""
import argparse
import logging
import sys

from rich.console import Console
from rich.markup import escape

from AmountParser import parse_amount
from ConversionRequest import ConversionRequest
from ConvertErrors import AmountParseError, ConvertError
from CurrencyConverter import CurrencyConverter
from HumanFormatter import format_human, format_real

LOG_FORMAT = "[%(levelname).1s] %(message)s"

logger = logging.getLogger(__name__)


def build_parser():
    p = argparse.ArgumentParser(prog="cconv", description="Convert an amount between currencies using live exchange rates.")
    p.add_argument("input", type=str, help="Currency to convert from (e.g. usd)")
    p.add_argument("output", type=str, help="Currency to convert to (e.g. eur)")
    p.add_argument("amount", type=str, help="Amount, optionally suffixed with k, m, b or t (e.g. 2.5k)")
    p.add_argument("-r", "--real", action="store_true",
                   help="toggle between human readable and real numbers")
    p.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    return p


def setup_logging(verbose):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def render_result(request, result, real):
    """
    Build the result line, e.g. "1.00k [bold]USD[/bold] = 910.00 [bold]EUR[/bold]".

    The input code is uppercased for display only; the request itself keeps
    the case the user typed.
    """
    fmt = format_real if real else format_human
    return (
        f"{fmt(request.amount)} [bold]{escape(request.input_currency.upper())}[/bold]"
        f" = {fmt(result)} [bold]{escape(request.output_currency)}[/bold]"
    )


def main(argv=None, converter=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    out = Console(highlight=False, soft_wrap=True)
    err = Console(stderr=True, highlight=False, soft_wrap=True)
    converter = converter or CurrencyConverter()

    try:
        amount = parse_amount(args.amount)
        request = ConversionRequest(args.input, args.output, amount)
        logger.debug("Converting %s", request)
        # Status is transient: the spinner is gone before anything else prints.
        with err.status("sending request to api..."):
            result = converter.convert(request)
    except (AmountParseError, ConvertError) as e:
        err.print(f"[bold red]error:[/bold red] {escape(str(e))}")
        return 1

    out.print(render_result(request, result, args.real))
    return 0


if __name__ == "__main__":
    sys.exit(main())
