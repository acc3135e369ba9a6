"""Holiday repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from timekeeper.domain.models.holiday import Holiday


class HolidayRepository(ABC):
    """Repository interface for Holiday entity."""

    @abstractmethod
    def save(self, holiday: Holiday) -> Holiday:
        pass

    @abstractmethod
    def get_by_id(self, holiday_id: str) -> Optional[Holiday]:
        pass

    @abstractmethod
    def list_all(self) -> List[Holiday]:
        """All holidays ordered by date."""
        pass

    @abstractmethod
    def delete(self, holiday_id: str) -> bool:
        pass
