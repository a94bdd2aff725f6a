from datetime import date, timedelta
from typing import Any, Dict, List

from loguru import logger

from tire_pickup.Core.Exceptions.errors import NotFound, ValidationError
from tire_pickup.Core.Utils.fields import clean_str, parse_calendar_date
from tire_pickup.Domains.Account.Models.account import Notification
from tire_pickup.Domains.Account.Repositories.account_repository import AccountRepository
from tire_pickup.Domains.Account.Services.account_service import index_of

GENERATED_OCCURRENCES = 12

EDITABLE_FIELDS = ("message", "date", "recurring", "recurrence_weeks")


def _validate_message_and_date(message: str, when: str) -> date:
    if not message or not when:
        raise ValidationError("Message and date are required")
    parsed = parse_calendar_date(when)
    if parsed is None:
        raise ValidationError("Date must be YYYY-MM-DD")
    return parsed


def _validate_weeks(value: Any) -> int:
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    elif isinstance(value, str) and value.strip().isdigit():
        value = int(value.strip())
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValidationError("recurrenceWeeks must be a whole number of at least 1")
    return value


def expand_occurrences(root: Notification, start: date) -> List[Notification]:
    """The follow-up copies of a recurring root, spaced `recurrence_weeks` apart."""
    step = timedelta(weeks=root.recurrence_weeks)
    return [
        Notification(
            message=root.message,
            date=(start + step * i).isoformat(),
            recurring=True,
            recurrence_weeks=root.recurrence_weeks,
            parent_id=root.id,
        )
        for i in range(1, GENERATED_OCCURRENCES + 1)
    ]


class NotificationScheduler:
    """
    Manages the reminder list embedded in each account.

    A recurring reminder is expanded once, at creation; later edits and
    deletions touch exactly one entry and never regenerate or prune the
    series.
    """

    def __init__(self, repository: AccountRepository):
        self.repository = repository

    async def add_notification(
        self,
        account_id: str,
        message: str,
        when: str,
        recurring: bool = False,
        recurrence_weeks: Any = 1,
    ) -> Notification:
        message = clean_str(message)
        when = clean_str(when)
        start = _validate_message_and_date(message, when)
        weeks = _validate_weeks(recurrence_weeks)

        root = Notification(
            message=message, date=when, recurring=bool(recurring), recurrence_weeks=weeks
        )
        entries = [root]
        if root.recurring:
            try:
                entries.extend(expand_occurrences(root, start))
            except OverflowError:
                raise ValidationError("Recurring dates fall outside the supported calendar range")

        async with self.repository.batch() as accounts:
            account = accounts[index_of(accounts, account_id)]
            account.notifications.extend(entries)

        logger.info(f"Added {len(entries)} notification(s) to account {account_id}")
        return root

    async def update_notification(
        self, account_id: str, notification_id: str, updates: Dict[str, Any]
    ) -> Notification:
        changes = {key: value for key, value in updates.items() if key in EDITABLE_FIELDS}

        async with self.repository.batch() as accounts:
            account = accounts[index_of(accounts, account_id)]
            notification = account.find_notification(notification_id)
            if notification is None:
                raise NotFound("Notification not found")

            message = clean_str(changes.get("message", notification.message))
            when = clean_str(changes.get("date", notification.date))
            _validate_message_and_date(message, when)
            weeks = _validate_weeks(changes.get("recurrence_weeks", notification.recurrence_weeks))

            notification.message = message
            notification.date = when
            notification.recurrence_weeks = weeks
            if "recurring" in changes:
                notification.recurring = bool(changes["recurring"])

        logger.info(f"Updated notification {notification_id} on account {account_id}")
        return notification

    async def delete_notification(self, account_id: str, notification_id: str) -> None:
        async with self.repository.batch() as accounts:
            account = accounts[index_of(accounts, account_id)]
            notification = account.find_notification(notification_id)
            if notification is None:
                raise NotFound("Notification not found")
            account.notifications = [n for n in account.notifications if n.id != notification_id]

        logger.info(f"Deleted notification {notification_id} from account {account_id}")
