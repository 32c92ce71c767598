# app/api/v1/endpoints/currency.py
from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session
import httpx

from app.api.deps import get_converter, get_currency_client
from app.core.database import get_session
from app.schemas.currency import CurrencyRatesResponse
from app.services.currency import CurrencyConverter
from app.services.parsers.parser_currency import CurrencyClient

router = APIRouter()


@router.get("/currency/rates", response_model=CurrencyRatesResponse)
def get_rates(converter: CurrencyConverter = Depends(get_converter)):
	"""
	Rates used for quotes: 1 unit of the base currency = N units of the currency.
	"""
	return CurrencyRatesResponse(base_currency=converter.base_currency, rates=converter.rates)


@router.post("/currency/sync")
async def sync_rates(
		session: Session = Depends(get_session),
		client: CurrencyClient = Depends(get_currency_client)
):
	"""
	Pulls the latest rates of the supported currencies from the exchange rate feed.
	"""
	try:
		return await client.update_rates(session)
	except (httpx.HTTPError, ValueError) as e:
		session.rollback()
		raise HTTPException(status_code=502, detail=f"Exchange rate sync failed: {str(e)}")
