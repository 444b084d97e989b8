from contextlib import asynccontextmanager

from fastapi import FastAPI

from energy_harmony.core.database import Base, engine
from energy_harmony.core.errors import register_exception_handlers
from energy_harmony.routers import auth, budget, device, summary, usage
from energy_harmony.utils.logger import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    logger.info("api_starting")
    yield


app = FastAPI(title="Energy Harmony API", lifespan=lifespan)

register_exception_handlers(app)

app.include_router(auth.router)
app.include_router(device.router)
app.include_router(usage.router)
app.include_router(budget.router)
app.include_router(summary.router)

@app.get("/")
def root():
    return {"status": "Energy Harmony backend running"}
