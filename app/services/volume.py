from app.schemas.volume import LengthUnit

METERS_PER_UNIT = {
	LengthUnit.M: 1.0,
	LengthUnit.CM: 0.01,
	LengthUnit.IN: 0.0254,
}


def calculate_cbm(length: float, width: float, height: float, unit: LengthUnit = LengthUnit.CM) -> float:
	"""
	Volume in cubic meters.
	Rounded to 6 decimals so that a 1cm cube still gives 0.000001.
	"""
	if length <= 0 or width <= 0 or height <= 0:
		return 0.0
	
	factor = METERS_PER_UNIT[LengthUnit(unit)]
	cbm = (length * factor) * (width * factor) * (height * factor)
	return round(cbm, 6)
