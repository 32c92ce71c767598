# app/crud/crud_currency.py
from sqlmodel import Session, select

from app.models.currency import Currency, CurrencyRate


def get_latest_rates(session: Session) -> dict[str, float]:
	"""Latest stored rate of every currency, keyed by ISO code."""
	statement = (
		select(Currency.char_code, CurrencyRate.rate)
		.select_from(CurrencyRate)
		.join(Currency)
		.order_by(CurrencyRate.date.desc(), CurrencyRate.id.desc())
	)
	latest = {}
	for char_code, rate in session.exec(statement).all():
		latest.setdefault(char_code, rate)
	return latest
