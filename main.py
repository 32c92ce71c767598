import logging

from fastapi import FastAPI
from app.api.v1 import api
from app.core.config import settings

logging.basicConfig(level=settings.LOG_LEVEL)

app = FastAPI(
	title=settings.PROJECT_NAME,
	description="Freight quote pricing: platform rate card, forwarder comparison and specific forwarder quotes",
	version="1.0.0",
	lifespan=api.lifespan,
)

app.include_router(api.router)


if __name__ == "__main__":
	import uvicorn
	
	uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
