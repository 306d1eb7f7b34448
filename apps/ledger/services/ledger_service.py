"""
Recording and listing ledger events.
"""
import logging

from django.contrib.auth import get_user_model
from django.db import transaction
from rest_framework.exceptions import ValidationError

from apps.activities.services import CatalogService
from apps.common.exceptions import InsufficientBalance
from ..models import LogEntry, Redemption
from .balance_service import BalanceService

logger = logging.getLogger(__name__)


class LedgerService:
    """Append-only writes to a user's points ledger"""

    @staticmethod
    def record_earning(owner, activity_id=None, activity_name=None, points=None):
        """
        Append a log entry.

        When activity_id resolves to one of the owner's activities, its
        current name and point value are snapshotted and the caller's
        activity_name/points are ignored. An unknown or foreign activity_id
        raises NotFound.
        """
        activity = None
        if activity_id:
            activity = CatalogService.get_owned(owner, activity_id)
            activity_name = activity.name
            points = activity.point_value

        if not activity_name or points is None or points <= 0:
            raise ValidationError('activityName and a positive points value are required')

        entry = LogEntry.objects.create(
            user=owner,
            activity=activity,
            activity_name=activity_name,
            points=points,
        )
        logger.info(f"User {owner.pk} earned {points} points for '{activity_name}'")
        return entry

    @staticmethod
    def record_redemption(owner, reward_name, cost):
        """
        Append a redemption if the owner's balance covers it.

        The check and the insert run in one transaction holding a row lock
        on the owner, so concurrent redemptions for the same user are
        serialized and can never overdraw the balance.
        """
        if cost is None or cost <= 0:
            raise ValidationError('cost must be a positive integer')

        User = get_user_model()
        with transaction.atomic():
            User.objects.select_for_update().filter(pk=owner.pk).first()

            balance = BalanceService.balance_of(owner)
            if cost > balance:
                logger.info(f"User {owner.pk} redemption of {cost} refused, balance {balance}")
                raise InsufficientBalance()

            redemption = Redemption.objects.create(user=owner, reward_name=reward_name, cost=cost)

        logger.info(f"User {owner.pk} redeemed '{reward_name}' for {cost} points")
        return redemption

    @staticmethod
    def list_earnings(owner):
        return LogEntry.objects.filter(user=owner).order_by('-timestamp')

    @staticmethod
    def list_redemptions(owner):
        return Redemption.objects.filter(user=owner).order_by('-timestamp')
