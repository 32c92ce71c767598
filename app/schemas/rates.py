# app/schemas/rates.py
from typing import Optional, Dict
from pydantic import BaseModel

from app.models.rates import TransportMode, ServiceType, RateUnit


class RateConfig(BaseModel):
	"""Rate card as handed to the pricing engine by a rate provider."""
	id: str
	mode: TransportMode
	type: ServiceType
	price: float  # per unit, base currency
	min_days: int
	max_days: int
	unit: RateUnit
	currency: str = "XOF"
	insurance_rate: Optional[float] = None
	
	# Forwarder rate cards only
	forwarder_id: Optional[str] = None
	forwarder_name: Optional[str] = None
	is_featured: bool = False
	
	class Config:
		from_attributes = True


class ResolvedRate(BaseModel):
	"""A rate card with its pricing source and effective insurance rate settled."""
	id: str
	source_id: str
	source_name: str
	mode: TransportMode
	type: ServiceType
	price_per_unit: float
	insurance_rate: float
	transit_min: int
	transit_max: int
	currency: str
	is_platform: bool = False
	is_featured: bool = False
	is_synthetic: bool = False


# {"sea": {"standard": 80.0, "express": None}, "air": {...}}
UnitRates = Dict[str, Dict[str, Optional[float]]]


class SyncStatus(BaseModel):
	status: str
	message: str
	processed_files: Optional[str] = None
	total_rates: Optional[int] = None
