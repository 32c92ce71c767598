from contextlib import asynccontextmanager

from fastapi import FastAPI, APIRouter
from app.api.v1.endpoints import calculator, currency, rates, volume
from app.core.database import create_db_and_tables

router = APIRouter()
router.include_router(calculator.router, prefix="/api/v1", tags=["Quotes"])
router.include_router(volume.router, prefix="/api/v1", tags=["Volume"])
router.include_router(currency.router, prefix="/api/v1", tags=["Currency"])
router.include_router(rates.router, prefix="/api/v1", tags=["Rate cards"])


@asynccontextmanager
async def lifespan(app: FastAPI):
	create_db_and_tables()
	yield
