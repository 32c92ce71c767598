# app/models/__init__.py
# Model imports register the tables on the ORM metadata
from .rates import Forwarder, PlatformRate, ForwarderRate, TransportMode, ServiceType, RateUnit, BILLABLE_UNITS
from .fees import FeeConfig, FeeType, FeeCategory, FeeTarget
from .currency import Currency, CurrencyRate

__all__ = ["Forwarder", "PlatformRate", "ForwarderRate", "TransportMode", "ServiceType", "RateUnit",
           "BILLABLE_UNITS", "FeeConfig", "FeeType", "FeeCategory", "FeeTarget", "Currency", "CurrencyRate"]
