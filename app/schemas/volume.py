from enum import Enum
from pydantic import BaseModel


class LengthUnit(str, Enum):
	M = "m"
	CM = "cm"
	IN = "in"


class Dimensions(BaseModel):
	length: float
	width: float
	height: float
	unit: LengthUnit = LengthUnit.CM


class VolumeResponse(BaseModel):
	volume_cbm: float
