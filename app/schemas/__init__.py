from .calculation import CalculationParams, CalculationMode, AdditionalServices, QuoteRequest, QuoteResult
from .rates import RateConfig, ResolvedRate, UnitRates, SyncStatus
from .fees import FeeRead
from .currency import ExchangeRatesPayload, CurrencyRatesResponse
from .volume import Dimensions, LengthUnit, VolumeResponse

__all__ = ["CalculationParams", "CalculationMode", "AdditionalServices", "QuoteRequest", "QuoteResult",
           "RateConfig", "ResolvedRate", "UnitRates", "SyncStatus", "FeeRead", "ExchangeRatesPayload",
           "CurrencyRatesResponse", "Dimensions", "LengthUnit", "VolumeResponse"]
