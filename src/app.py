"""Chef Bazaar FastAPI application.

Web server that processes commands synchronously via HTTP. Each request is
wrapped in the bazaar domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the config overlay from domain.toml
# (memory stores by default, PostgreSQL under "production").
from bazaar import config
from bazaar.domain import bazaar
from bazaar.utils.logging import bind_request_context, clear_request_context
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

bazaar.init()

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Chef Bazaar API",
    description="Home-cooked meal marketplace: accounts, role elevation, orders and payments",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the bazaar domain context for each request."""
    bind_request_context(method=request.method, path=request.url.path)
    try:
        with bazaar.domain_context():
            response = await call_next(request)
        return response
    finally:
        clear_request_context()


# ---------------------------------------------------------------------------
# Exception handlers & routers
# ---------------------------------------------------------------------------
from bazaar.api import (  # noqa: E402
    account_router,
    admin_router,
    elevation_router,
    favorite_router,
    meal_router,
    order_router,
    payment_router,
    review_router,
    session_router,
)
from bazaar.api.errors import register_error_handlers  # noqa: E402

register_error_handlers(app)

app.include_router(session_router)
app.include_router(account_router)
app.include_router(elevation_router)
app.include_router(order_router)
app.include_router(payment_router)
app.include_router(admin_router)
app.include_router(meal_router)
app.include_router(review_router)
app.include_router(favorite_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/")
async def root():
    return {"message": "Chef Bazaar server is running"}


@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": {"name": bazaar.name}})
