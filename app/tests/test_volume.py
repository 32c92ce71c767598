import pytest

from app.schemas.volume import LengthUnit
from app.services.volume import calculate_cbm


def test_centimeters():
	assert calculate_cbm(100, 100, 100, LengthUnit.CM) == 1.0
	assert calculate_cbm(120, 80, 50, "cm") == pytest.approx(0.48)


def test_smallest_package_is_not_rounded_away():
	assert calculate_cbm(1, 1, 1, LengthUnit.CM) == 0.000001


def test_meters_and_inches():
	assert calculate_cbm(2, 1.5, 1, LengthUnit.M) == 3.0
	assert calculate_cbm(10, 10, 10, LengthUnit.IN) == pytest.approx(0.016387)


@pytest.mark.parametrize("dims", [(0, 10, 10), (10, -1, 10), (10, 10, 0)])
def test_non_positive_dimension(dims):
	assert calculate_cbm(*dims, LengthUnit.CM) == 0.0
