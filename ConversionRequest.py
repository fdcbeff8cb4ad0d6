from dataclasses import dataclass


@dataclass(frozen=True)
class ConversionRequest:
    input_currency: str
    output_currency: str
    amount: float

    def __post_init__(self):
        # Rate tables are keyed by uppercase codes; the base code keeps the user's case.
        object.__setattr__(self, "output_currency", self.output_currency.upper())

    def __str__(self):
        return f"{self.amount} {self.input_currency.upper()} -> {self.output_currency}"
