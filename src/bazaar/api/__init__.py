"""Chef Bazaar API package."""

from bazaar.api.routes import (
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

__all__ = [
    "session_router",
    "account_router",
    "elevation_router",
    "order_router",
    "payment_router",
    "admin_router",
    "meal_router",
    "review_router",
    "favorite_router",
]
