### restaurant-backoffice/app/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api import food_routes, invoice_routes, order_item_routes, user_routes
from app.core.config import settings
from app.core.exceptions import register_exception_handlers
from app.core.logging import configure_logging
from app.db import create_db_and_tables
from app.middleware.request_logging import RequestLogMiddleware

configure_logging(settings.log_level, echo_sql=settings.database_echo)
log = logging.getLogger(__name__)

# Create the FastAPI app
app = FastAPI(
    title="Restaurant Back-of-House API",
    version="1.0.0",
    description="Menus, foods, orders and invoices for the restaurant floor.",
)

app.add_middleware(RequestLogMiddleware)

# ✅ Allow frontend dev (CORS)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In prod, restrict this!
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.on_event("startup")
async def on_startup():
    log.info("Starting DB setup...")
    await create_db_and_tables()
    log.info("DB schema ready.")


@app.get("/health")
async def health():
    return {"status": "ok"}


# ✅ Core app routers
app.include_router(user_routes.router, prefix="/users", tags=["users"])
app.include_router(food_routes.router, prefix="/foods", tags=["foods"])
app.include_router(order_item_routes.router, prefix="/order-items", tags=["order items"])
app.include_router(invoice_routes.router, prefix="/invoices", tags=["invoices"])
