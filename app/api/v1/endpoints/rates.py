# app/api/v1/endpoints/rates.py
from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from app.core.config import settings
from app.core.database import get_session
from app.schemas.rates import SyncStatus
from app.services.importers.import_rates import import_platform_rates, import_forwarder_rates

router = APIRouter()

PLATFORM_RATES_FILE = "platform_rates.csv"
FORWARDER_RATES_FILE = "forwarder_rates.csv"


@router.post("/rates/sync", response_model=SyncStatus)
def sync_rate_cards(db: Session = Depends(get_session)):
	"""
	Reloads the rate cards from the CSV files of the rates directory:
	1. platform_rates.csv -> platform rate card
	2. forwarder_rates.csv -> forwarder rate cards (optional)
	"""
	platform_csv = settings.RATES_DIR / PLATFORM_RATES_FILE
	forwarder_csv = settings.RATES_DIR / FORWARDER_RATES_FILE
	if not platform_csv.exists():
		raise HTTPException(status_code=404, detail=f"{PLATFORM_RATES_FILE} not found in {settings.RATES_DIR}")
	
	try:
		processed = [PLATFORM_RATES_FILE]
		total = import_platform_rates(session=db, csv_path=platform_csv, base_currency=settings.BASE_CURRENCY)
		
		if forwarder_csv.exists():
			total += import_forwarder_rates(session=db, csv_path=forwarder_csv, base_currency=settings.BASE_CURRENCY)
			processed.append(FORWARDER_RATES_FILE)
		
		db.commit()
		
		return SyncStatus(
			status="success",
			message=f"Rate cards reloaded: {total} rates.",
			processed_files=", ".join(processed),
			total_rates=total
		)
	
	except Exception as e:
		db.rollback()  # nothing is kept from a half-finished import
		raise HTTPException(status_code=500, detail=f"Rate card sync failed: {str(e)}")
