import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

import app.models  # noqa: F401  registers the tables
from app.schemas.fees import FeeRead
from app.schemas.rates import RateConfig


def platform_rate(mode="sea", type="standard", price=80.0, insurance_rate=0.05, min_days=30, max_days=40, id="1"):
	return RateConfig(
		id=id, mode=mode, type=type, price=price, min_days=min_days, max_days=max_days,
		unit="cbm" if mode == "sea" else "kg", insurance_rate=insurance_rate,
	)


def forwarder_rate(forwarder_id, price, mode="sea", type="standard", insurance_rate=0.05,
                   min_days=20, max_days=30, id=None, name=None, is_featured=False):
	return RateConfig(
		id=id or f"{forwarder_id}-{mode}-{type}", mode=mode, type=type, price=price,
		min_days=min_days, max_days=max_days, unit="cbm" if mode == "sea" else "kg",
		insurance_rate=insurance_rate, forwarder_id=forwarder_id, forwarder_name=name or forwarder_id.title(),
		is_featured=is_featured,
	)


def fee(category="tax", type="percentage", value=18.0, is_active=True, id=1, name="VAT"):
	return FeeRead(id=id, name=name, type=type, value=value, category=category, is_active=is_active)


class FakeFeeProvider:
	def __init__(self, fees=(), error=None):
		self.fees = list(fees)
		self.error = error
		self.calls = 0
	
	async def get_active_fees(self):
		self.calls += 1
		if self.error:
			raise self.error
		return list(self.fees)


class FakeRateProvider:
	def __init__(self, platform_rates=(), forwarder_rates=(), error=None):
		self.platform_rates = list(platform_rates)
		self.forwarder_rates = list(forwarder_rates)
		self.error = error
		self.forwarder_queries = []
	
	async def get_platform_rate(self, mode, service_type):
		if self.error:
			raise self.error
		for rate in self.platform_rates:
			if rate.mode == mode and rate.type == service_type:
				return rate
		return None
	
	async def get_forwarder_rates(self, mode, service_type, forwarder_id=None):
		if self.error:
			raise self.error
		self.forwarder_queries.append((mode, service_type, forwarder_id))
		return [
			rate for rate in self.forwarder_rates
			if rate.mode == mode and rate.type == service_type
			and (forwarder_id is None or rate.forwarder_id == forwarder_id)
		]
	
	async def list_platform_rates(self):
		if self.error:
			raise self.error
		return list(self.platform_rates)
	
	async def list_forwarder_rates(self, forwarder_id):
		if self.error:
			raise self.error
		return [rate for rate in self.forwarder_rates if rate.forwarder_id == forwarder_id]


@pytest.fixture
def session():
	engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
	SQLModel.metadata.create_all(engine)
	with Session(engine) as session:
		yield session
