"""
Balance use cases for the application layer.
"""

from typing import Optional, Tuple

from timekeeper.application.use_cases.base_use_case import (
    AuthorizedUseCase,
    CurrentUser,
    Clock,
    require_found
)
from timekeeper.domain.models.user import User
from timekeeper.domain.repositories.time_entry_repository import TimeEntryRepository
from timekeeper.domain.repositories.user_repository import UserRepository
from timekeeper.domain.repositories.holiday_repository import HolidayRepository
from timekeeper.domain.services.balance_service import BalanceService, BalanceSummary


class GetBalanceUseCase(AuthorizedUseCase):
    """
    Use case for a user's overtime balance.
    Administrators may look at any user; everybody else only at themselves.
    """

    def __init__(
        self,
        time_entry_repository: TimeEntryRepository,
        user_repository: UserRepository,
        holiday_repository: HolidayRepository,
        balance_service: Optional[BalanceService] = None,
        clock: Optional[Clock] = None
    ):
        self.time_entry_repository = time_entry_repository
        self.user_repository = user_repository
        self.holiday_repository = holiday_repository
        self.balance_service = balance_service or BalanceService()
        self.clock = clock or Clock()

    def execute(self, current_user: CurrentUser, user_id: Optional[str] = None) -> Tuple[User, BalanceSummary]:
        user = current_user.user
        if user_id and user_id != current_user.user_id:
            self._require_admin(current_user)
            user = require_found(self.user_repository.get_by_id(user_id), "User", user_id)

        entries = self.time_entry_repository.list_by_user(user.id)
        holidays = self.holiday_repository.list_all()

        summary = self.balance_service.calculate_balance(
            entries,
            user.target_hours_per_day,
            today=self.clock.today(),
            holidays=holidays
        )
        return user, summary
