"""Storefront FastAPI application.

Serves order processing, availability and shipping lookups, and discount
calculation over HTTP. Order routes run inside the ordering domain context.

Usage:
    uvicorn src.app:app --host 0.0.0.0 --port 8000 --reload
"""

from decimal import Decimal
from uuid import uuid4

from fastapi import Depends, FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from protean.exceptions import ValidationError

from ordering.api.routes import get_orchestrator, order_router
from ordering.checkout.orchestrator import OrderOrchestrator
from ordering.checkout.report import operation_report
from ordering.domain import ordering
from pricing.api.routes import pricing_router
from pricing.exceptions import UnsupportedDiscountPolicy
from shared.config import get_config
from shared.logging import add_context, clear_context, configure_logging

configure_logging()

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# Initialized at module level so uvicorn workers share it.
ordering.init()

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Storefront API",
    description="Order processing over inventory, payment and delivery stations, plus discount pricing",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    """Tag log lines with a request id and push the ordering domain context."""
    add_context(request_id=uuid4().hex[:12], path=request.url.path)
    try:
        if request.url.path.startswith("/orders"):
            with ordering.domain_context():
                return await call_next(request)
        return await call_next(request)
    finally:
        clear_context()


# ---------------------------------------------------------------------------
# Error handlers
# ---------------------------------------------------------------------------
@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):  # noqa: ARG001
    return JSONResponse(
        status_code=400,
        content={
            "error": "Invalid input data",
            "status": 400,
            "validationErrors": exc.messages,
        },
    )


@app.exception_handler(UnsupportedDiscountPolicy)
async def unsupported_policy_handler(request: Request, exc: UnsupportedDiscountPolicy):  # noqa: ARG001
    return JSONResponse(
        status_code=400,
        content={
            "error": "Unsupported discount policy",
            "status": 400,
            "message": str(exc),
        },
    )


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
app.include_router(order_router)
app.include_router(pricing_router)


# ---------------------------------------------------------------------------
# Health / app info / report
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domains": {"ordering": {"name": ordering.name}}})


@app.get("/app-info")
async def app_info():
    config = get_config()
    return JSONResponse(
        content={
            "applicationInfo": config.describe(),
            "name": config.name,
            "version": config.version,
            "environment": config.environment,
        }
    )


@app.get("/report", response_class=PlainTextResponse)
async def report(
    product_id: str = Query(min_length=1),
    quantity: int = Query(ge=1),
    original_price: Decimal = Query(gt=0),
    zip_code: str = Query(min_length=1),
    orchestrator: OrderOrchestrator = Depends(get_orchestrator),
):
    return operation_report(get_config(), orchestrator, product_id, quantity, original_price, zip_code)
