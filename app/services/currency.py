# app/services/currency.py
from typing import Mapping, Optional

BASE_CURRENCY = "XOF"

# 1 XOF = N units of the target currency
EXCHANGE_RATES: dict[str, float] = {
	"XOF": 1.0,
	"EUR": 0.001524,
	"USD": 0.001646,
	"CNY": 0.01189,
	"GBP": 0.001295,
}

# XOF is pegged to the euro
XOF_PER_EUR = 655.957


class CurrencyConverter:
	"""
	Converts amounts from the base currency with multiplicative rates.
	An unknown currency gets rate 1, i.e. the amount is left as it is.
	"""
	
	def __init__(self, rates: Optional[Mapping[str, float]] = None, base_currency: str = BASE_CURRENCY):
		self.base_currency = base_currency.upper()
		source = EXCHANGE_RATES if rates is None else rates
		self.rates = {code.upper(): rate for code, rate in source.items()}
		self.rates[self.base_currency] = 1.0

	def rate_for(self, currency: Optional[str]) -> float:
		if not currency:
			return 1.0
		return self.rates.get(currency.upper(), 1.0)

	def convert(self, amount: float, target_currency: Optional[str] = None) -> float:
		return amount * self.rate_for(target_currency)

	def to_base(self, amount: float, currency: Optional[str]) -> float:
		"""
		Reverse conversion, for prices quoted in another currency.
		Unlike `convert` an unknown currency is an error: a price cannot be guessed.
		"""
		if not currency or currency.upper() == self.base_currency:
			return amount
		rate = self.rates.get(currency.upper())
		if not rate:
			raise ValueError(f"No exchange rate for {currency.upper()}, cannot price in {self.base_currency}")
		return amount / rate


default_converter = CurrencyConverter()


def convert(amount: float, target_currency: Optional[str] = None) -> float:
	return default_converter.convert(amount, target_currency)
