import pytest

from app.schemas.calculation import AdditionalServices
from app.services.currency import XOF_PER_EUR
from app.services.surcharges import compute_surcharges, surcharge_breakdown, SurchargeSchedule, DEFAULT_SCHEDULE


def test_nothing_selected():
	assert compute_surcharges(None) == 0
	assert compute_surcharges(AdditionalServices(), cargo_value=10_000) == 0


def test_insurance_percentage_of_cargo_value():
	services = AdditionalServices(insurance=True)
	assert compute_surcharges(services, cargo_value=10_000) == pytest.approx(500.0)


def test_insurance_minimum_fee():
	"""10 * 5% = 0.5, the minimum fee applies"""
	services = AdditionalServices(insurance=True)
	assert compute_surcharges(services, cargo_value=10) == DEFAULT_SCHEDULE.insurance_min_fee == 50.0


def test_insurance_without_cargo_value():
	services = AdditionalServices(insurance=True)
	assert compute_surcharges(services) == 0
	assert compute_surcharges(services, cargo_value=0) == 0


def test_cargo_value_ignored_when_insurance_off():
	services = AdditionalServices(priority=True)
	assert compute_surcharges(services, cargo_value=1_000_000) == pytest.approx(150 * XOF_PER_EUR)


@pytest.mark.parametrize("service, euros", [
	("priority", 150),
	("packaging", 75),
	("inspection", 100),
	("customs_clearance", 120),
	("door_to_door", 200),
	("storage", 50),
])
def test_flat_fees(service, euros):
	services = AdditionalServices(**{service: True})
	assert compute_surcharges(services) == pytest.approx(euros * XOF_PER_EUR)


def test_services_add_up():
	services = AdditionalServices(insurance=True, priority=True, packaging=True, storage=True)
	breakdown = surcharge_breakdown(services, cargo_value=2000)
	
	assert set(breakdown) == {"insurance", "priority", "packaging", "storage"}
	assert breakdown["insurance"] == pytest.approx(100.0)
	assert compute_surcharges(services, cargo_value=2000) == pytest.approx(sum(breakdown.values()))


def test_custom_schedule():
	schedule = SurchargeSchedule(insurance_rate=0.1, insurance_min_fee=0, priority=1000)
	services = AdditionalServices(insurance=True, priority=True)
	assert compute_surcharges(services, cargo_value=300, schedule=schedule) == pytest.approx(1030.0)
