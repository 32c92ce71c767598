import logging

import pandas as pd
from sqlmodel import Session, select, delete

from app.models.rates import PlatformRate, ForwarderRate, Forwarder, TransportMode, ServiceType, RateUnit, BILLABLE_UNITS
from app.services.currency import BASE_CURRENCY

logger = logging.getLogger(__name__)

PLATFORM_COLUMNS = ["mode", "type", "price", "min_days", "max_days"]
FORWARDER_COLUMNS = PLATFORM_COLUMNS + ["forwarder_id", "forwarder_name"]


def _optional_float(value):
	if pd.isna(value) or str(value).strip() == "":
		return None
	return float(str(value).replace(',', '.'))


def _text(value, default: str) -> str:
	if value is None or pd.isna(value) or str(value).strip() == "":
		return default
	return str(value).strip()


def _flag(value) -> bool:
	if pd.isna(value):
		return False
	return str(value).strip().lower() in ("1", "true", "yes", "y")


def _read_rates_csv(csv_path, required_columns):
	df = pd.read_csv(csv_path, sep=';', dtype=str)
	df.columns = [column.strip().lower() for column in df.columns]
	
	missing = [column for column in required_columns if column not in df.columns]
	if missing:
		raise ValueError(f"{csv_path}: missing columns {', '.join(missing)}")
	
	# Rows without a price are drafts
	return df.dropna(subset=["price"])


def _rate_fields(row, base_currency: str) -> dict:
	mode = TransportMode(row['mode'].strip().lower())
	unit = _text(row.get("unit"), BILLABLE_UNITS[mode].value)

	# Rate cards are priced in the base currency only
	currency = _text(row.get("currency"), base_currency).upper()
	if currency != base_currency.upper():
		raise ValueError(f"{mode.value}/{row['type']}: price in {currency}, rate cards must be in {base_currency.upper()}")

	return {
		"mode": mode,
		"type": ServiceType(row['type'].strip().lower()),
		"price": float(str(row['price']).replace(',', '.')),
		"currency": currency,
		"unit": RateUnit(unit.lower()),
		"min_days": int(row['min_days']),
		"max_days": int(row['max_days']),
		"insurance_rate": _optional_float(row.get('insurance_rate')),
	}


def import_platform_rates(session: Session, csv_path, base_currency: str = BASE_CURRENCY) -> int:
	"""
	Replaces the platform rate card with the CSV content.
	Columns: mode;type;price;min_days;max_days[;insurance_rate;unit;currency]
	"""
	logger.info("Importing platform rates from %s", csv_path)
	df = _read_rates_csv(csv_path, PLATFORM_COLUMNS)
	
	session.exec(delete(PlatformRate))
	
	rates = [PlatformRate(**_rate_fields(row, base_currency), is_global=True) for _, row in df.iterrows()]
	session.add_all(rates)
	session.flush()
	
	logger.info("Imported %d platform rates", len(rates))
	return len(rates)


def import_forwarder_rates(session: Session, csv_path, base_currency: str = BASE_CURRENCY) -> int:
	"""
	Replaces every forwarder rate card with the CSV content, creating unknown forwarders.
	Columns: forwarder_id;forwarder_name;mode;type;price;min_days;max_days[;insurance_rate;unit;currency;is_featured;is_active]
	"""
	logger.info("Importing forwarder rates from %s", csv_path)
	df = _read_rates_csv(csv_path, FORWARDER_COLUMNS)
	
	session.exec(delete(ForwarderRate))
	
	forwarders = {forwarder.id: forwarder for forwarder in session.exec(select(Forwarder)).all()}
	
	rates = []
	for _, row in df.iterrows():
		forwarder_id = str(row['forwarder_id']).strip()
		company_name = str(row['forwarder_name']).strip()
		
		forwarder = forwarders.get(forwarder_id)
		if forwarder is None:
			forwarder = Forwarder(id=forwarder_id, company_name=company_name)
			session.add(forwarder)
			forwarders[forwarder_id] = forwarder
		elif company_name and forwarder.company_name != company_name:
			forwarder.company_name = company_name
		
		is_active = row.get('is_active')
		rates.append(ForwarderRate(
			**_rate_fields(row, base_currency),
			forwarder_id=forwarder_id,
			is_featured=_flag(row.get('is_featured')),
			is_active=_flag(_text(is_active, "true")),
		))
	
	session.add_all(rates)
	session.flush()
	
	logger.info("Imported %d forwarder rates", len(rates))
	return len(rates)
