from fastapi import APIRouter

from app.schemas.volume import Dimensions, VolumeResponse
from app.services.volume import calculate_cbm

router = APIRouter()


@router.post("/volume/cbm", response_model=VolumeResponse)
def get_volume(dimensions: Dimensions):
	"""Volume in cubic meters from package dimensions."""
	return VolumeResponse(
		volume_cbm=calculate_cbm(dimensions.length, dimensions.width, dimensions.height, dimensions.unit)
	)
