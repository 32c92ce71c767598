from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, model_validator

from app.models.rates import TransportMode, ServiceType, RateUnit


class CalculationMode(str, Enum):
	PLATFORM = "platform"  # house rate card
	COMPARE = "compare"  # every forwarder on the route
	SPECIFIC = "specific"  # one forwarder


class AdditionalServices(BaseModel):
	insurance: bool = False
	priority: bool = False
	packaging: bool = False
	inspection: bool = False
	customs_clearance: bool = False
	door_to_door: bool = False
	storage: bool = False


# --- Input ---
class CalculationParams(BaseModel):
	origin: str
	destination: str
	mode: TransportMode
	type: ServiceType
	weight_kg: Optional[float] = Field(default=None, allow_inf_nan=False)
	volume_cbm: Optional[float] = Field(default=None, allow_inf_nan=False)
	
	calculation_mode: CalculationMode = Field(default=CalculationMode.PLATFORM, alias="calculationMode")
	forwarder_id: Optional[str] = None
	target_currency: Optional[str] = Field(default=None, alias="targetCurrency")
	
	# Declared value of the goods in the base currency, drives the insurance surcharge
	cargo_value: Optional[float] = Field(default=None, ge=0, alias="cargoValue")
	additional_services: Optional[AdditionalServices] = Field(default=None, alias="additionalServices")
	
	class Config:
		populate_by_name = True


class QuoteRequest(CalculationParams):
	"""Calculation request as accepted over HTTP."""
	
	@model_validator(mode="after")
	def check_forwarder(self):
		if self.calculation_mode == CalculationMode.SPECIFIC and not self.forwarder_id:
			raise ValueError("forwarder_id is required for the 'specific' calculation mode")
		return self


# --- Output ---
class QuoteResult(BaseModel):
	id: str
	forwarder_id: str
	forwarder_name: str
	mode: TransportMode
	type: ServiceType
	
	# All amounts are in `currency`
	base_cost: float
	insurance_cost: float
	additional_services_cost: float
	tax_cost: float
	total_cost: float
	currency: str
	
	transit_time: str
	price_per_unit: float
	unit: RateUnit
	
	is_platform_rate: bool
	is_featured: bool = False
	is_synthetic: bool = False
	rating: float
	review_count: int
