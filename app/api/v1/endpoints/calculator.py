import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError

from app.api.deps import get_quote_calculator
from app.schemas.calculation import QuoteRequest, QuoteResult, CalculationMode
from app.schemas.rates import UnitRates
from app.services.calculator import QuoteCalculator

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/quotes/calculate", response_model=List[QuoteResult])
async def calculate_quotes(
		request: QuoteRequest,
		calculator: QuoteCalculator = Depends(get_quote_calculator)
):
	"""
	Prices a shipment:
	1. platform - house rate card, at most one quote
	2. compare - every forwarder on the service, cheapest first
	3. specific - the given forwarder only

	An empty list means there is nothing to quote (no quantity, no rate card).
	"""
	try:
		return await calculator.calculate_quotes(request)
	except (SQLAlchemyError, ValueError) as e:
		logger.exception("Quote calculation failed")
		raise HTTPException(status_code=500, detail=f"Quote calculation failed: {e.__class__.__name__}")


@router.get("/quotes/unit-rates", response_model=UnitRates)
async def get_unit_rates(
		calculation_mode: CalculationMode = CalculationMode.PLATFORM,
		forwarder_id: Optional[str] = None,
		target_currency: Optional[str] = None,
		calculator: QuoteCalculator = Depends(get_quote_calculator)
):
	try:
		return await calculator.get_unit_rates(calculation_mode, forwarder_id, target_currency)
	except (SQLAlchemyError, ValueError) as e:
		logger.exception("Unit rate lookup failed")
		raise HTTPException(status_code=500, detail=f"Unit rate lookup failed: {e.__class__.__name__}")
