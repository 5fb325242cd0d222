# app/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.core.config import settings
from shared.core.database import Base, rental_engine
from shared.core.logging_config import configure_logging
from shared.helpers.exception_handler import setup_exception_handlers
from shared.wrappers.response_wrapper import JsonResponseMiddleware
from shared.models import users
from .models.common import attachments
from .models.leasing import landlords, leases, tenants
from .models.ledger import expenses, payments
from .models.properties import properties
from .enum.properties_enum import AttachmentModule
from .crud.leasing import landlords_crud, leases_crud, tenants_crud
from .crud.ledger import expenses_crud, payments_crud
from .router.auth import auth_router
from .router.common.attachments_router import build_files_router
from .router.leasing import landlords_router, leases_router, tenants_router
from .router.ledger import expenses_router, payments_router
from .router.properties import properties_router

configure_logging()
logger = logging.getLogger(__name__)

# Create all tables
Base.metadata.create_all(bind=rental_engine)

app = FastAPI(title="Rental Back-Office API")

# 1️⃣ CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 2️⃣ Custom JSON response wrapper middleware
app.add_middleware(JsonResponseMiddleware)

# Register exception handlers
setup_exception_handlers(app)

# Include routers
app.include_router(auth_router.router)
app.include_router(properties_router.router)
app.include_router(tenants_router.router)
app.include_router(landlords_router.router)
app.include_router(leases_router.router)
app.include_router(payments_router.router)
app.include_router(expenses_router.router)

# File records hang off every entity that can carry documents
app.include_router(build_files_router(
    AttachmentModule.tenants, "Tenant", tenants_crud.get_by_id))
app.include_router(build_files_router(
    AttachmentModule.landlords, "Landlord", landlords_crud.get_by_id))
app.include_router(build_files_router(
    AttachmentModule.leases, "Lease", leases_crud.get_by_id))
app.include_router(build_files_router(
    AttachmentModule.payments, "Payment", payments_crud.get_by_id))
app.include_router(build_files_router(
    AttachmentModule.expenses, "Expense", expenses_crud.get_by_id))

logger.info("Rental service ready")


@app.get("/api/health")
def health():
    return {"status": "healthy"}
