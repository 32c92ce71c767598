import logging
import math
from typing import Optional, Protocol, Sequence

from app.models.fees import FeeCategory, FeeType
from app.models.rates import TransportMode, ServiceType, RateUnit, BILLABLE_UNITS
from app.schemas.calculation import CalculationParams, CalculationMode, QuoteResult
from app.schemas.fees import FeeRead
from app.schemas.rates import ResolvedRate, UnitRates
from app.services.currency import CurrencyConverter
from app.services.rate_resolver import RateResolver, RateProvider, SyntheticForwarderFallback
from app.services.reputation import ReputationPolicy, RandomReputation, PLATFORM_RATING, PLATFORM_REVIEW_COUNT
from app.services.surcharges import SurchargeSchedule, DEFAULT_SCHEDULE, compute_surcharges

logger = logging.getLogger(__name__)

# Which input field holds the billable quantity for each unit
QUANTITY_FIELDS = {
	RateUnit.CBM: "volume_cbm",
	RateUnit.KG: "weight_kg",
}


class FeeProvider(Protocol):
	async def get_active_fees(self) -> Sequence[FeeRead]:
		...


class UnitRateProvider(Protocol):
	async def list_platform_rates(self):
		...

	async def list_forwarder_rates(self, forwarder_id: str):
		...


def billable_quantity(params: CalculationParams) -> float:
	unit = BILLABLE_UNITS[TransportMode(params.mode)]
	return float(getattr(params, QUANTITY_FIELDS[unit]) or 0)


def resolve_tax_rate(fees: Sequence[FeeRead]) -> float:
	"""First active percentage tax fee, as a fraction. 0 when there is none."""
	for fee in fees:
		if fee.is_active and fee.category == FeeCategory.TAX and fee.type == FeeType.PERCENTAGE:
			return fee.value / 100
	return 0.0


class QuoteCalculator:
	"""
	Prices a shipment against the platform rate card or forwarder rate cards.

	Everything is computed in the base currency, every cost component is then
	converted on its own into the requested currency.
	"""

	def __init__(self, fee_provider: FeeProvider, rate_provider: RateProvider,
	             converter: Optional[CurrencyConverter] = None,
	             fallback: Optional[SyntheticForwarderFallback] = None,
	             reputation: Optional[ReputationPolicy] = None,
	             schedule: SurchargeSchedule = DEFAULT_SCHEDULE,
	             platform_name: str = "NextMove Platform"):
		self.fee_provider = fee_provider
		self.rate_provider = rate_provider
		self.converter = converter or CurrencyConverter()
		self.resolver = RateResolver(rate_provider, fallback=fallback, platform_name=platform_name)
		self.reputation = reputation or RandomReputation()
		self.schedule = schedule

	async def calculate_quotes(self, params: CalculationParams) -> list[QuoteResult]:
		quantity = billable_quantity(params)
		if not math.isfinite(quantity) or quantity <= 0:
			return []

		target_currency = params.target_currency or self.converter.base_currency

		fees = await self.fee_provider.get_active_fees()
		tax_rate = resolve_tax_rate(fees)

		rates = await self.resolver.resolve(params.mode, params.type, params.calculation_mode, params.forwarder_id)
		if not rates:
			return []

		quotes = [self._build_quote(rate, quantity, tax_rate, target_currency, params) for rate in rates]

		if params.calculation_mode == CalculationMode.COMPARE:
			quotes.sort(key=lambda quote: quote.total_cost)

		logger.debug("Priced %d quote(s) for %s/%s in %s mode", len(quotes), params.mode.value,
		             params.type.value, params.calculation_mode.value)
		return quotes

	def _build_quote(self, rate: ResolvedRate, quantity: float, tax_rate: float,
	                 target_currency: str, params: CalculationParams) -> QuoteResult:
		# 1. Base currency
		price_per_unit = self.converter.to_base(rate.price_per_unit, rate.currency)
		base = quantity * price_per_unit
		insurance = base * rate.insurance_rate
		services = compute_surcharges(params.additional_services, params.cargo_value, self.schedule)
		tax = (base + insurance + services) * tax_rate

		# 2. Target currency, component by component
		convert = self.converter.convert
		base_cost = convert(base, target_currency)
		insurance_cost = convert(insurance, target_currency)
		services_cost = convert(services, target_currency)
		tax_cost = convert(tax, target_currency)

		if rate.is_platform:
			rating, review_count = PLATFORM_RATING, PLATFORM_REVIEW_COUNT
		else:
			rating, review_count = self.reputation.for_forwarder(rate.source_id)

		return QuoteResult(
			id=rate.id,
			forwarder_id=rate.source_id,
			forwarder_name=rate.source_name,
			mode=rate.mode,
			type=rate.type,
			base_cost=base_cost,
			insurance_cost=insurance_cost,
			additional_services_cost=services_cost,
			tax_cost=tax_cost,
			total_cost=base_cost + insurance_cost + services_cost + tax_cost,
			currency=target_currency,
			transit_time=f"{rate.transit_min}-{rate.transit_max} days",
			price_per_unit=convert(price_per_unit, target_currency),
			unit=BILLABLE_UNITS[rate.mode],
			is_platform_rate=rate.is_platform,
			is_featured=rate.is_featured,
			is_synthetic=rate.is_synthetic,
			rating=rating,
			review_count=review_count,
		)

	async def get_unit_rates(self, calculation_mode: CalculationMode, forwarder_id: Optional[str] = None,
	                         target_currency: Optional[str] = None) -> UnitRates:
		"""
		Price per unit for every mode/type pair, for the service cards.
		Compare mode has no single price per card, so every entry stays None.
		"""
		unit_rates: UnitRates = {
			mode.value: {service_type.value: None for service_type in ServiceType}
			for mode in TransportMode
		}
		target_currency = target_currency or self.converter.base_currency
		calculation_mode = CalculationMode(calculation_mode)

		if calculation_mode == CalculationMode.PLATFORM:
			rates = await self.rate_provider.list_platform_rates()
		elif calculation_mode == CalculationMode.SPECIFIC and forwarder_id:
			rates = await self.rate_provider.list_forwarder_rates(forwarder_id)
		else:
			return unit_rates

		for rate in rates:
			mode = getattr(rate.mode, "value", rate.mode)
			service_type = getattr(rate.type, "value", rate.type)
			if mode in unit_rates and service_type in unit_rates[mode]:
				price = self.converter.to_base(rate.price, rate.currency)
				unit_rates[mode][service_type] = self.converter.convert(price, target_currency)
		return unit_rates
