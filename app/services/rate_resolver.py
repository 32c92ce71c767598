# app/services/rate_resolver.py
import logging
from typing import Optional, Protocol

from app.models.rates import TransportMode, ServiceType, BILLABLE_UNITS
from app.schemas.calculation import CalculationMode
from app.schemas.rates import RateConfig, ResolvedRate

logger = logging.getLogger(__name__)

DEFAULT_INSURANCE_RATE = 0.05
PLATFORM_SOURCE_ID = "platform"
SYNTHETIC_ID_PREFIX = "mock-"


class RateProvider(Protocol):
	async def get_platform_rate(self, mode: TransportMode, service_type: ServiceType) -> Optional[RateConfig]:
		...

	async def get_forwarder_rates(self, mode: TransportMode, service_type: ServiceType,
	                              forwarder_id: Optional[str] = None) -> list[RateConfig]:
		...


class SyntheticForwarderFallback:
	"""
	Example forwarders shown in compare mode while no forwarder has published
	a rate card for the requested service. Every id starts with "mock-".
	"""

	# Base-currency price per billable unit before the forwarder factor
	BASE_PRICES = {
		TransportMode.SEA: 65_000.0,  # per cbm
		TransportMode.AIR: 3_500.0,  # per kg
	}
	EXPRESS_FACTOR = 1.4

	# (slug, name, price factor, insurance rate, transit days per mode)
	FORWARDERS = (
		("ocean-express", "Ocean Express Logistics", 0.85, 0.03,
		 {TransportMode.SEA: (35, 45), TransportMode.AIR: (7, 10)}),
		("swift-cargo", "Swift Cargo International", 1.30, 0.06,
		 {TransportMode.SEA: (20, 28), TransportMode.AIR: (2, 4)}),
		("green-freight", "Green Freight Solutions", 1.0, 0.04,
		 {TransportMode.SEA: (28, 35), TransportMode.AIR: (4, 6)}),
	)

	def rates_for(self, mode: TransportMode, service_type: ServiceType) -> list[RateConfig]:
		base_price = self.BASE_PRICES[mode]
		if service_type == ServiceType.EXPRESS:
			base_price *= self.EXPRESS_FACTOR

		rates = []
		for slug, name, factor, insurance_rate, transit in self.FORWARDERS:
			forwarder_id = f"{SYNTHETIC_ID_PREFIX}{slug}"
			min_days, max_days = transit[mode]
			rates.append(RateConfig(
				id=f"{forwarder_id}-{mode.value}-{service_type.value}",
				mode=mode,
				type=service_type,
				price=round(base_price * factor, 2),
				min_days=min_days,
				max_days=max_days,
				unit=BILLABLE_UNITS[mode],
				insurance_rate=insurance_rate,
				forwarder_id=forwarder_id,
				forwarder_name=name,
			))
		return rates


def is_synthetic(rate_id: str) -> bool:
	return rate_id.startswith(SYNTHETIC_ID_PREFIX)


class RateResolver:
	def __init__(self, provider: RateProvider, fallback: Optional[SyntheticForwarderFallback] = None,
	             platform_name: str = "NextMove Platform"):
		self.provider = provider
		self.fallback = fallback
		self.platform_name = platform_name

	async def resolve(self, mode: TransportMode, service_type: ServiceType,
	                  calculation_mode: CalculationMode, forwarder_id: Optional[str] = None) -> list[ResolvedRate]:
		mode = TransportMode(mode)
		service_type = ServiceType(service_type)
		calculation_mode = CalculationMode(calculation_mode)

		if calculation_mode == CalculationMode.PLATFORM:
			rate = await self.provider.get_platform_rate(mode, service_type)
			if rate is None:
				return []
			insurance_rate = rate.insurance_rate if rate.insurance_rate is not None else DEFAULT_INSURANCE_RATE
			return [self._platform_rate(rate, insurance_rate)]

		if calculation_mode == CalculationMode.SPECIFIC:
			if not forwarder_id:
				return []
			rates = await self.provider.get_forwarder_rates(mode, service_type, forwarder_id)
		else:
			rates = await self.provider.get_forwarder_rates(mode, service_type)
			if not rates and self.fallback is not None:
				logger.warning("No forwarder rates for %s/%s, using synthetic example forwarders",
				               mode.value, service_type.value)
				rates = self.fallback.rates_for(mode, service_type)

		if not rates:
			return []

		default_insurance = None
		if any(rate.insurance_rate is None for rate in rates):
			default_insurance = await self._platform_insurance_rate(mode, service_type)

		resolved = []
		for rate in rates:
			insurance_rate = rate.insurance_rate if rate.insurance_rate is not None else default_insurance
			resolved.append(self._forwarder_rate(rate, insurance_rate))
		return resolved

	async def _platform_insurance_rate(self, mode: TransportMode, service_type: ServiceType) -> float:
		platform_rate = await self.provider.get_platform_rate(mode, service_type)
		if platform_rate is not None and platform_rate.insurance_rate is not None:
			return platform_rate.insurance_rate
		return DEFAULT_INSURANCE_RATE

	def _platform_rate(self, rate: RateConfig, insurance_rate: float) -> ResolvedRate:
		return ResolvedRate(
			id=rate.id,
			source_id=PLATFORM_SOURCE_ID,
			source_name=self.platform_name,
			mode=rate.mode,
			type=rate.type,
			price_per_unit=rate.price,
			insurance_rate=insurance_rate,
			transit_min=rate.min_days,
			transit_max=rate.max_days,
			currency=rate.currency,
			is_platform=True,
		)

	@staticmethod
	def _forwarder_rate(rate: RateConfig, insurance_rate: float) -> ResolvedRate:
		return ResolvedRate(
			id=rate.id,
			source_id=rate.forwarder_id or "",
			source_name=rate.forwarder_name or "Unknown",
			mode=rate.mode,
			type=rate.type,
			price_per_unit=rate.price,
			insurance_rate=insurance_rate,
			transit_min=rate.min_days,
			transit_max=rate.max_days,
			currency=rate.currency,
			is_featured=rate.is_featured,
			is_synthetic=is_synthetic(rate.id),
		)
