from typing import Optional, List
from datetime import datetime
from enum import Enum
from sqlmodel import SQLModel, Field, Relationship
from sqlalchemy import Column, DateTime, func


class TransportMode(str, Enum):
	SEA = "sea"
	AIR = "air"


class ServiceType(str, Enum):
	STANDARD = "standard"
	EXPRESS = "express"


# Unit in which the billable quantity is measured
class RateUnit(str, Enum):
	CBM = "cbm"  # cubic meters (sea)
	KG = "kg"  # kilograms (air)


# Sea freight is billed by volume, air freight by weight
BILLABLE_UNITS = {
	TransportMode.SEA: RateUnit.CBM,
	TransportMode.AIR: RateUnit.KG,
}


class Forwarder(SQLModel, table=True):
	__tablename__ = "forwarders"
	
	id: str = Field(primary_key=True, max_length=64)
	company_name: str = Field(index=True)
	
	rates: List["ForwarderRate"] = Relationship(back_populates="forwarder")


# --- House rate card of the marketplace ---
class PlatformRate(SQLModel, table=True):
	__tablename__ = "platform_rates"
	
	id: Optional[int] = Field(default=None, primary_key=True)
	mode: TransportMode = Field(index=True)
	type: ServiceType = Field(index=True)
	
	price: float  # price per unit, base currency
	currency: str = Field(default="XOF")
	unit: RateUnit
	
	min_days: int
	max_days: int
	insurance_rate: Optional[float] = Field(default=None)  # fraction of base cost
	
	# Global rates apply to every route
	is_global: bool = Field(default=True, index=True)
	
	updated_at: Optional[datetime] = Field(
		default=None,
		sa_column=Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
	)


# --- Rate card owned by a forwarder ---
class ForwarderRate(SQLModel, table=True):
	__tablename__ = "forwarder_rates"
	
	id: Optional[int] = Field(default=None, primary_key=True)
	forwarder_id: str = Field(foreign_key="forwarders.id", index=True)
	mode: TransportMode = Field(index=True)
	type: ServiceType = Field(index=True)
	
	price: float
	currency: str = Field(default="XOF")
	unit: RateUnit
	
	min_days: int
	max_days: int
	# None -> the platform insurance rate is used
	insurance_rate: Optional[float] = Field(default=None)
	
	is_active: bool = Field(default=True, index=True)
	is_featured: bool = Field(default=False)
	
	created_at: Optional[datetime] = Field(
		default=None,
		sa_column=Column(DateTime(timezone=True), server_default=func.now())
	)
	
	forwarder: Optional[Forwarder] = Relationship(back_populates="rates")
