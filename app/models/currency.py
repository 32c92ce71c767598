from typing import Optional, List
from datetime import date as date_type
from sqlmodel import SQLModel, Field, Relationship


# --- Currency directory ---
class Currency(SQLModel, table=True):
	__tablename__ = "currencies"
	
	id: Optional[int] = Field(default=None, primary_key=True)
	char_code: str = Field(index=True, unique=True)  # ISO code (EUR)
	name: Optional[str] = None
	
	rates: List["CurrencyRate"] = Relationship(back_populates="currency")


# --- Exchange rate history ---
class CurrencyRate(SQLModel, table=True):
	__tablename__ = "currency_rates"
	
	id: Optional[int] = Field(default=None, primary_key=True)
	currency_id: int = Field(foreign_key="currencies.id")
	
	rate: float  # units of this currency per 1 unit of the base currency
	
	date: date_type = Field(index=True)
	
	currency: "Currency" = Relationship(back_populates="rates")
