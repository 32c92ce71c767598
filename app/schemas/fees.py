from typing import Optional
from pydantic import BaseModel

from app.models.fees import FeeType, FeeCategory, FeeTarget


class FeeRead(BaseModel):
	id: int
	name: str
	type: FeeType
	value: float
	category: FeeCategory
	is_active: bool
	target: FeeTarget = FeeTarget.CLIENT
	min_amount: Optional[float] = None
	max_amount: Optional[float] = None
	description: Optional[str] = None
	
	class Config:
		from_attributes = True
