import asyncio
import threading
from datetime import date

from app.crud.crud_currency import get_latest_rates
from app.crud.crud_fee import CRUDFee
from app.crud.crud_rate import CRUDRate
from app.models import Forwarder, PlatformRate, ForwarderRate, FeeConfig, Currency, CurrencyRate
from app.models.fees import FeeType, FeeCategory
from app.models.rates import TransportMode, ServiceType, RateUnit


def seed_rates(session):
	session.add(Forwarder(id="acme", company_name="Acme Freight"))
	session.add(Forwarder(id="globex", company_name="Globex Shipping"))
	session.add_all([
		PlatformRate(mode=TransportMode.SEA, type=ServiceType.STANDARD, price=80, unit=RateUnit.CBM,
		             min_days=30, max_days=40, insurance_rate=0.05),
		PlatformRate(mode=TransportMode.AIR, type=ServiceType.EXPRESS, price=6500, unit=RateUnit.KG,
		             min_days=2, max_days=4, insurance_rate=None),
		PlatformRate(mode=TransportMode.SEA, type=ServiceType.EXPRESS, price=999, unit=RateUnit.CBM,
		             min_days=1, max_days=2, is_global=False),
		ForwarderRate(forwarder_id="acme", mode=TransportMode.SEA, type=ServiceType.STANDARD, price=70,
		              unit=RateUnit.CBM, min_days=35, max_days=45, is_featured=True),
		ForwarderRate(forwarder_id="globex", mode=TransportMode.SEA, type=ServiceType.STANDARD, price=75,
		              unit=RateUnit.CBM, min_days=25, max_days=30, insurance_rate=0.04),
		ForwarderRate(forwarder_id="globex", mode=TransportMode.SEA, type=ServiceType.STANDARD, price=10,
		              unit=RateUnit.CBM, min_days=25, max_days=30, is_active=False),
		ForwarderRate(forwarder_id="globex", mode=TransportMode.AIR, type=ServiceType.STANDARD, price=4000,
		              unit=RateUnit.KG, min_days=5, max_days=7),
	])
	session.commit()


def test_platform_rate_lookup(session):
	seed_rates(session)
	crud = CRUDRate(session)
	
	rate = asyncio.run(crud.get_platform_rate(TransportMode.SEA, ServiceType.STANDARD))
	assert rate.price == 80
	assert rate.insurance_rate == 0.05
	assert rate.unit == RateUnit.CBM
	
	# Route specific (non global) rates are not part of the house rate card
	assert asyncio.run(crud.get_platform_rate(TransportMode.SEA, ServiceType.EXPRESS)) is None
	assert asyncio.run(crud.get_platform_rate(TransportMode.AIR, ServiceType.STANDARD)) is None


def test_forwarder_rates(session):
	seed_rates(session)
	crud = CRUDRate(session)
	
	rates = asyncio.run(crud.get_forwarder_rates(TransportMode.SEA, ServiceType.STANDARD))
	assert [(rate.forwarder_id, rate.price) for rate in rates] == [("acme", 70), ("globex", 75)]
	assert rates[0].forwarder_name == "Acme Freight"
	assert rates[0].is_featured
	assert rates[0].insurance_rate is None
	
	only_globex = asyncio.run(crud.get_forwarder_rates(TransportMode.SEA, ServiceType.STANDARD, "globex"))
	assert [rate.price for rate in only_globex] == [75]


def test_rate_listings(session):
	seed_rates(session)
	crud = CRUDRate(session)
	
	platform = asyncio.run(crud.list_platform_rates())
	assert {(rate.mode, rate.type) for rate in platform} == {
		(TransportMode.SEA, ServiceType.STANDARD), (TransportMode.AIR, ServiceType.EXPRESS)
	}
	
	globex = asyncio.run(crud.list_forwarder_rates("globex"))
	assert len(globex) == 3
	assert all(rate.forwarder_name == "Globex Shipping" for rate in globex)


def test_fees_are_returned_with_inactive_ones(session):
	session.add_all([
		FeeConfig(name="VAT", type=FeeType.PERCENTAGE, value=18, category=FeeCategory.TAX),
		FeeConfig(name="Old VAT", type=FeeType.PERCENTAGE, value=20, category=FeeCategory.TAX, is_active=False),
	])
	session.commit()
	
	fees = asyncio.run(CRUDFee(session).get_active_fees())
	assert [(fee.name, fee.is_active) for fee in fees] == [("Old VAT", False), ("VAT", True)]


def test_latest_exchange_rates(session):
	eur = Currency(char_code="EUR")
	usd = Currency(char_code="USD")
	session.add_all([eur, usd])
	session.commit()
	session.add_all([
		CurrencyRate(currency_id=eur.id, rate=0.0015, date=date(2026, 1, 1)),
		CurrencyRate(currency_id=eur.id, rate=0.0016, date=date(2026, 2, 1)),
		CurrencyRate(currency_id=usd.id, rate=0.0017, date=date(2026, 1, 15)),
	])
	session.commit()
	
	assert get_latest_rates(session) == {"EUR": 0.0016, "USD": 0.0017}


def test_queries_run_off_the_event_loop(session, monkeypatch):
	seed_rates(session)
	query_threads = []
	session_exec = session.exec
	
	def recording_exec(*args, **kwargs):
		query_threads.append(threading.get_ident())
		return session_exec(*args, **kwargs)
	
	monkeypatch.setattr(session, "exec", recording_exec)
	
	async def run():
		crud = CRUDRate(session)
		await crud.get_platform_rate(TransportMode.SEA, ServiceType.STANDARD)
		await crud.get_forwarder_rates(TransportMode.SEA, ServiceType.STANDARD)
		await crud.list_platform_rates()
		await CRUDFee(session).get_active_fees()
		return threading.get_ident()
	
	loop_thread = asyncio.run(run())
	assert len(query_threads) == 4
	assert loop_thread not in query_threads
