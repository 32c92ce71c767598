# app/crud/crud_rate.py
from typing import Optional

from fastapi.concurrency import run_in_threadpool
from sqlmodel import Session, select

from app.models.rates import PlatformRate, ForwarderRate, Forwarder, TransportMode, ServiceType
from app.schemas.rates import RateConfig


def platform_rate_to_config(rate: PlatformRate) -> RateConfig:
	return RateConfig(
		id=str(rate.id),
		mode=rate.mode,
		type=rate.type,
		price=rate.price,
		min_days=rate.min_days,
		max_days=rate.max_days,
		unit=rate.unit,
		currency=rate.currency,
		insurance_rate=rate.insurance_rate,
	)


def forwarder_rate_to_config(rate: ForwarderRate, company_name: Optional[str]) -> RateConfig:
	return RateConfig(
		id=str(rate.id),
		mode=rate.mode,
		type=rate.type,
		price=rate.price,
		min_days=rate.min_days,
		max_days=rate.max_days,
		unit=rate.unit,
		currency=rate.currency,
		insurance_rate=rate.insurance_rate,
		forwarder_id=rate.forwarder_id,
		forwarder_name=company_name,
		is_featured=rate.is_featured,
	)


class CRUDRate:
	"""
	Rate provider backed by the platform_rates and forwarder_rates tables.
	Queries run on the sync Session in the threadpool, off the event loop.
	"""
	
	def __init__(self, session: Session):
		self.session = session
	
	async def _first(self, statement):
		return await run_in_threadpool(lambda: self.session.exec(statement).first())
	
	async def _all(self, statement):
		return await run_in_threadpool(lambda: self.session.exec(statement).all())
	
	async def get_platform_rate(self, mode: TransportMode, service_type: ServiceType) -> Optional[RateConfig]:
		statement = (
			select(PlatformRate)
			.where(PlatformRate.mode == mode, PlatformRate.type == service_type, PlatformRate.is_global == True)  # noqa: E712
			.order_by(PlatformRate.id)
		)
		rate = await self._first(statement)
		return platform_rate_to_config(rate) if rate else None
	
	async def get_forwarder_rates(self, mode: TransportMode, service_type: ServiceType,
	                              forwarder_id: Optional[str] = None) -> list[RateConfig]:
		statement = (
			select(ForwarderRate, Forwarder.company_name)
			.join(Forwarder, isouter=True)
			.where(ForwarderRate.mode == mode, ForwarderRate.type == service_type, ForwarderRate.is_active == True)  # noqa: E712
			.order_by(ForwarderRate.id)
		)
		if forwarder_id:
			statement = statement.where(ForwarderRate.forwarder_id == forwarder_id)
		
		rows = await self._all(statement)
		return [forwarder_rate_to_config(rate, name) for rate, name in rows]
	
	async def list_platform_rates(self) -> list[RateConfig]:
		statement = (
			select(PlatformRate)
			.where(PlatformRate.is_global == True)  # noqa: E712
			.order_by(PlatformRate.mode, PlatformRate.type)
		)
		rows = await self._all(statement)
		return [platform_rate_to_config(rate) for rate in rows]
	
	async def list_forwarder_rates(self, forwarder_id: str) -> list[RateConfig]:
		statement = (
			select(ForwarderRate, Forwarder.company_name)
			.join(Forwarder, isouter=True)
			.where(ForwarderRate.forwarder_id == forwarder_id)
			.order_by(ForwarderRate.id)
		)
		rows = await self._all(statement)
		return [forwarder_rate_to_config(rate, name) for rate, name in rows]
