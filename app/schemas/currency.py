from typing import Dict, Optional
from pydantic import BaseModel


# Payload of the exchange rate feed (open.er-api.com format)
class ExchangeRatesPayload(BaseModel):
	result: str
	base_code: str
	time_last_update_unix: Optional[int] = None
	rates: Dict[str, float]


class CurrencyRatesResponse(BaseModel):
	base_currency: str
	rates: Dict[str, float]
