from sqlalchemy import create_engine
from sqlmodel import SQLModel, Session

from app.core.config import settings

# SQLite needs the connection shared across FastAPI's worker threads
connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(settings.DATABASE_URL, connect_args=connect_args)


def create_db_and_tables():
	"""Creates the tables if they do not exist yet"""
	# Models must be imported so they are registered on the metadata
	import app.models  # noqa: F401
	SQLModel.metadata.create_all(engine)


def get_session():
	"""Session generator for FastAPI"""
	with Session(engine) as session:
		yield session
