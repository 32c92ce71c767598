# app/crud/crud_fee.py
from fastapi.concurrency import run_in_threadpool
from sqlmodel import Session, select

from app.models.fees import FeeConfig
from app.schemas.fees import FeeRead


class CRUDFee:
	def __init__(self, session: Session):
		self.session = session

	def _load_fees(self) -> list[FeeRead]:
		# Every fee, active or not: callers filter by is_active themselves
		fees = self.session.exec(select(FeeConfig).order_by(FeeConfig.name)).all()
		return [FeeRead.model_validate(fee) for fee in fees]

	async def get_active_fees(self) -> list[FeeRead]:
		return await run_in_threadpool(self._load_fees)
