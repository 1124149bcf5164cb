"""Menu bounded context — product catalog and product options.

Holds the café's default catalog, the admin-managed product records that
replace it once any exist, and the option groups offered on the product
detail screen.
"""

import structlog

logger = structlog.get_logger(__name__)
