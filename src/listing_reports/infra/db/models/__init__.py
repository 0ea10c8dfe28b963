from listing_reports.infra.db.models.base import Base
from listing_reports.infra.db.models.listing import ListingRow

__all__ = ["Base", "ListingRow"]
