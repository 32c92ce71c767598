from typing import Optional
from enum import Enum
from sqlmodel import SQLModel, Field


class FeeType(str, Enum):
	PERCENTAGE = "percentage"
	FIXED = "fixed"


class FeeCategory(str, Enum):
	INSURANCE = "insurance"
	GUARANTEE = "guarantee"
	MANAGEMENT = "management"
	STORAGE = "storage"
	PENALTY = "penalty"
	TAX = "tax"
	OTHER = "other"


class FeeTarget(str, Enum):
	CLIENT = "client"
	FORWARDER = "forwarder"


class FeeConfig(SQLModel, table=True):
	__tablename__ = "fee_configs"
	
	id: Optional[int] = Field(default=None, primary_key=True)
	name: str = Field(index=True)
	type: FeeType = Field(default=FeeType.PERCENTAGE)
	value: float  # percent for percentage fees, amount for fixed ones
	min_amount: Optional[float] = None
	max_amount: Optional[float] = None
	description: Optional[str] = None
	is_active: bool = Field(default=True, index=True)
	category: FeeCategory = Field(default=FeeCategory.OTHER, index=True)
	target: FeeTarget = Field(default=FeeTarget.CLIENT)
