"""Application settings read from the environment.

Protean infrastructure (databases, brokers, event store) is configured in
``domain.toml``; the values here cover the HTTP surface and the session layer.
"""

import os


def environment() -> str:
    return (os.getenv("PROTEAN_ENV") or "development").lower()


def is_production() -> bool:
    return environment() == "production"


JWT_SECRET = os.getenv("JWT_SECRET", "chef-bazaar-dev-secret-change-me")
JWT_ALGORITHM = "HS256"
SESSION_TTL_DAYS = int(os.getenv("SESSION_TTL_DAYS", "30"))
SESSION_COOKIE_NAME = os.getenv("SESSION_COOKIE_NAME", "token")

PAYMENT_CURRENCY = os.getenv("PAYMENT_CURRENCY", "usd")

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]
