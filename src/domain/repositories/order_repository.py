"""
Order Repository Interface

Read access to the order records of a business. The forecasting pipeline
only ever sees one tenant's orders, selected by an explicit business id.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from src.domain.entities.order import OrderRecord


class IOrderRepository(ABC):
    """Interface for order repository implementations."""

    @abstractmethod
    async def find_by_business(
        self,
        business_id: str,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> List[OrderRecord]:
        """
        Find the orders of a business, oldest first.

        Args:
            business_id: Identifier of the business (tenant)
            start: Only orders created at or after this instant
            end: Only orders created at or before this instant

        Returns:
            Orders sorted by ``created_at`` ascending
        """
        pass
