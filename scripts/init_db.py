import asyncio
import logging
from sqlmodel import Session, select, func

from app.core.database import engine, create_db_and_tables
from app.core.config import settings
from app.models.rates import PlatformRate
from app.services.currency import EXCHANGE_RATES
from app.services.importers.import_rates import import_platform_rates, import_forwarder_rates
from app.services.parsers.parser_currency import CurrencyClient

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def init_async_data(session: Session):
	"""Exchange rates of the supported currencies"""
	logger.info("Updating exchange rates...")
	client = CurrencyClient(url=settings.FX_RATES_URL, currencies=list(EXCHANGE_RATES),
	                        base_currency=settings.BASE_CURRENCY)
	await client.update_rates(session)


def main():
	logger.info("Checking database state...")
	create_db_and_tables()
	
	with Session(engine) as session:
		count = session.exec(select(func.count(PlatformRate.id))).one()
		
		if count > 0:
			logger.info(f"{count} platform rates already loaded, skipping initialization.")
			return
		
		logger.info("Empty database, loading rate cards...")
		
		# 1. Platform rate card (required)
		platform_csv = settings.RATES_DIR / "platform_rates.csv"
		if not platform_csv.exists():
			logger.error(f"{platform_csv} not found, nothing to load.")
			return
		import_platform_rates(session, platform_csv, settings.BASE_CURRENCY)
		
		# 2. Forwarder rate cards
		forwarder_csv = settings.RATES_DIR / "forwarder_rates.csv"
		if forwarder_csv.exists():
			import_forwarder_rates(session, forwarder_csv, settings.BASE_CURRENCY)
		session.commit()
		
		# 3. Exchange rates; the static table is used when the feed is down
		try:
			asyncio.run(init_async_data(session))
		except Exception as e:
			session.rollback()
			logger.error(f"Exchange rate update failed: {e}")
		
		logger.info("Initialization complete.")


if __name__ == "__main__":
	main()
