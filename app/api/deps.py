# app/api/deps.py
from fastapi import Depends
from sqlmodel import Session

from app.core.config import settings
from app.core.database import get_session
from app.crud.crud_currency import get_latest_rates
from app.crud.crud_fee import CRUDFee
from app.crud.crud_rate import CRUDRate
from app.services.calculator import QuoteCalculator
from app.services.currency import CurrencyConverter, EXCHANGE_RATES
from app.services.parsers.parser_currency import CurrencyClient
from app.services.rate_resolver import SyntheticForwarderFallback
from app.services.reputation import RandomReputation, FixedReputation


def get_converter(session: Session = Depends(get_session)) -> CurrencyConverter:
	"""Static rates, overridden by the latest synced ones."""
	rates = {**EXCHANGE_RATES, **get_latest_rates(session)}
	return CurrencyConverter(rates, base_currency=settings.BASE_CURRENCY)


def get_currency_client() -> CurrencyClient:
	"""FX feed client, limited to the currencies of the static table."""
	return CurrencyClient(url=settings.FX_RATES_URL, currencies=list(EXCHANGE_RATES),
	                      base_currency=settings.BASE_CURRENCY)


def get_quote_calculator(
		session: Session = Depends(get_session),
		converter: CurrencyConverter = Depends(get_converter)
) -> QuoteCalculator:
	if settings.RANDOM_REPUTATION_ENABLED:
		reputation = RandomReputation(seed=settings.REPUTATION_SEED)
	else:
		reputation = FixedReputation()
	
	return QuoteCalculator(
		fee_provider=CRUDFee(session),
		rate_provider=CRUDRate(session),
		converter=converter,
		fallback=SyntheticForwarderFallback() if settings.SYNTHETIC_FALLBACK_ENABLED else None,
		reputation=reputation,
		platform_name=settings.PLATFORM_NAME,
	)
