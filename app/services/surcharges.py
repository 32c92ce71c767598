# app/services/surcharges.py
from typing import Optional
from pydantic import BaseModel

from app.schemas.calculation import AdditionalServices
from app.services.currency import XOF_PER_EUR


class SurchargeSchedule(BaseModel):
	"""Prices of the optional services, base currency."""
	insurance_rate: float = 0.05  # share of the declared cargo value
	insurance_min_fee: float = 50.0
	
	# Flat fees are set in euros and charged in XOF
	priority: float = 150 * XOF_PER_EUR
	packaging: float = 75 * XOF_PER_EUR
	inspection: float = 100 * XOF_PER_EUR
	customs_clearance: float = 120 * XOF_PER_EUR
	door_to_door: float = 200 * XOF_PER_EUR
	storage: float = 50 * XOF_PER_EUR


DEFAULT_SCHEDULE = SurchargeSchedule()

FLAT_FEE_SERVICES = ("priority", "packaging", "inspection", "customs_clearance", "door_to_door", "storage")


def surcharge_breakdown(selections: Optional[AdditionalServices], cargo_value: Optional[float] = None,
                        schedule: SurchargeSchedule = DEFAULT_SCHEDULE) -> dict[str, float]:
	"""
	Price of every selected service.
	Insurance is max(cargo value * rate, minimum fee) and needs a declared value,
	the other services are flat fees.
	"""
	if selections is None:
		return {}
	
	breakdown = {}
	if selections.insurance and cargo_value:
		breakdown["insurance"] = max(cargo_value * schedule.insurance_rate, schedule.insurance_min_fee)
	
	for service in FLAT_FEE_SERVICES:
		if getattr(selections, service):
			breakdown[service] = getattr(schedule, service)
	
	return breakdown


def compute_surcharges(selections: Optional[AdditionalServices], cargo_value: Optional[float] = None,
                       schedule: SurchargeSchedule = DEFAULT_SCHEDULE) -> float:
	return sum(surcharge_breakdown(selections, cargo_value, schedule).values())
