# pizza_crm/main.py
from contextlib import asynccontextmanager
import logging

from fastapi.middleware.cors import CORSMiddleware
from fastapi import FastAPI

from pizza_crm.core.config import get_settings
from pizza_crm.core.seed import seed_demo_data
from pizza_crm.store import get_store

# Routers
from pizza_crm.routers.pizzas import router as pizzas_router
from pizza_crm.routers.couriers import router as couriers_router
from pizza_crm.routers.orders import router as orders_router
from pizza_crm.routers.stats import router as stats_router

settings = get_settings()

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger("uvicorn")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup:
      - Load demo data into the in-memory store (if enabled).

    Shutdown:
      - Nothing to flush; state is not persisted.
    """
    if settings.SEED_DEMO_DATA:
        seed_demo_data(get_store())
        logger.info("Startup: demo menu, couriers and orders loaded.")
    else:
        logger.info("Startup: empty store.")
    yield


app = FastAPI(
    title=settings.PROJECT_NAME or "Pizza CRM API",
    version="0.1.0",
    lifespan=lifespan,
)


# Browser admin UI runs on a separate dev server
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# All entity routes live under API_V1_STR
app.include_router(pizzas_router, prefix=settings.API_V1_STR)
app.include_router(couriers_router, prefix=settings.API_V1_STR)
app.include_router(orders_router, prefix=settings.API_V1_STR)
app.include_router(stats_router, prefix=settings.API_V1_STR)


@app.get("/")
def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "pizza-crm"}
