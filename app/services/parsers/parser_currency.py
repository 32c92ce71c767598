import logging
from datetime import datetime, timezone
from typing import Optional

import httpx
from fastapi.concurrency import run_in_threadpool
from sqlmodel import Session, select

from app.models.currency import Currency, CurrencyRate
from app.schemas.currency import ExchangeRatesPayload
from app.services.currency import BASE_CURRENCY

logger = logging.getLogger(__name__)

FX_RATES_URL = "https://open.er-api.com/v6/latest/XOF"


class CurrencyClient:
	def __init__(self, url: str = FX_RATES_URL, currencies: Optional[list[str]] = None,
	             transport: Optional[httpx.AsyncBaseTransport] = None, base_currency: str = BASE_CURRENCY):
		self.url = url
		self.base_currency = base_currency.upper()
		# None keeps every currency of the feed
		self.currencies = {code.upper() for code in currencies} if currencies else None
		self.transport = transport
	
	async def fetch_rates(self) -> ExchangeRatesPayload:
		async with httpx.AsyncClient(transport=self.transport) as client:
			response = await client.get(self.url)
			response.raise_for_status()
			payload = ExchangeRatesPayload(**response.json())
		
		if payload.result != "success":
			raise ValueError(f"Exchange rate feed returned '{payload.result}'")
		# Stored rates are read as multipliers from the base currency
		if payload.base_code.upper() != self.base_currency:
			raise ValueError(f"Exchange rate feed is {payload.base_code}-based, expected {self.base_currency}")
		return payload
	
	async def update_rates(self, session: Session):
		payload = await self.fetch_rates()
		return await run_in_threadpool(self.store_rates, session, payload)

	def store_rates(self, session: Session, payload: ExchangeRatesPayload):
		if payload.time_last_update_unix:
			rate_date = datetime.fromtimestamp(payload.time_last_update_unix, tz=timezone.utc).date()
		else:
			rate_date = datetime.now(timezone.utc).date()
		
		updated_count = 0
		for char_code, rate_value in payload.rates.items():
			char_code = char_code.upper()
			if self.currencies is not None and char_code not in self.currencies:
				continue
			
			# 1. Currency, created on first sight
			currency = session.exec(select(Currency).where(Currency.char_code == char_code)).first()
			if not currency:
				currency = Currency(char_code=char_code)
				session.add(currency)
				session.commit()
				session.refresh(currency)
			
			# 2. One rate per currency per day
			existing_rate = session.exec(
				select(CurrencyRate).where(
					CurrencyRate.currency_id == currency.id,
					CurrencyRate.date == rate_date
				)
			).first()
			
			if not existing_rate:
				session.add(CurrencyRate(currency_id=currency.id, rate=float(rate_value), date=rate_date))
				updated_count += 1
		
		session.commit()
		logger.info("Stored %d new %s-based exchange rates for %s", updated_count, payload.base_code, rate_date)
		return {"status": "success", "new_rates_added": updated_count}
