"""Chef Bazaar bounded context: accounts, role elevation, orders, and the meal catalogue.

Handles account sync and moderation (CQRS), the role-elevation request
workflow, the order lifecycle with its independent payment status, and the
supporting catalogue records (meals, reviews, favorites).
"""

from protean.domain import Domain

from bazaar.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

logger = get_logger(__name__)

# Domain Composition Root
bazaar = Domain(name="bazaar")
