"""
Web Push subscriptions and best-effort broadcast.
"""
import json
import logging

import requests
from django.conf import settings
from pywebpush import webpush, WebPushException

from ..models import PushSubscription

logger = logging.getLogger(__name__)

# Push service responses meaning the subscription is gone for good
GONE_STATUSES = (404, 410)


class PushService:
    """Service for storing subscriptions and fanning out notifications"""

    @staticmethod
    def public_key():
        return settings.VAPID_PUBLIC_KEY

    @staticmethod
    def subscribe(user, endpoint, p256dh, auth):
        """Store or refresh the user's subscription for this endpoint"""
        subscription, created = PushSubscription.objects.update_or_create(
            user=user,
            endpoint=endpoint,
            defaults={'p256dh': p256dh, 'auth': auth},
        )
        logger.info(f"User {user.pk} {'added' if created else 'refreshed'} push subscription")
        return subscription

    @staticmethod
    def send(subscription, payload):
        webpush(
            subscription_info=subscription.as_subscription_info(),
            data=json.dumps(payload),
            vapid_private_key=settings.VAPID_PRIVATE_KEY,
            vapid_claims={'sub': settings.VAPID_MAILTO},
            timeout=settings.PUSH_TIMEOUT_SECONDS,
        )

    @staticmethod
    def broadcast(title, body):
        """
        Send one notification to every stored subscription.

        Each send is independent: a failure is counted and the loop moves on.
        Subscriptions the push service reports as gone are deleted; any other
        failure keeps the subscription.
        """
        payload = {'title': title, 'body': body}
        success_count = 0
        fail_count = 0
        pruned = 0

        for subscription in PushSubscription.objects.select_related('user').order_by('created_at'):
            try:
                PushService.send(subscription, payload)
                success_count += 1
            except WebPushException as e:
                fail_count += 1
                status_code = getattr(e.response, 'status_code', None)
                logger.warning(f"Push to user {subscription.user_id} failed ({status_code}): {e}")
                if status_code in GONE_STATUSES:
                    subscription.delete()
                    pruned += 1
            except requests.RequestException as e:
                fail_count += 1
                logger.warning(f"Push to user {subscription.user_id} failed: {e}")
            except Exception as e:
                # Malformed keys surface as encoding or crypto errors; the subscription is kept
                fail_count += 1
                logger.error(f"Push to user {subscription.user_id} failed unexpectedly: {e}", exc_info=True)

        logger.info(f"Push broadcast: {success_count} sent, {fail_count} failed, {pruned} pruned")
        return {
            'success': True,
            'successCount': success_count,
            'failCount': fail_count,
            'pruned': pruned,
        }
