"""
Owner-scoped activity catalog operations.
"""
from apps.common.exceptions import NotFound
from ..models import Activity, DEFAULT_ICON

UPDATABLE_FIELDS = ('name', 'point_value', 'icon')


class CatalogService:
    """Service for a user's activity templates"""

    @staticmethod
    def list_activities(owner):
        return Activity.objects.filter(user=owner).order_by('created_at', 'id')

    @staticmethod
    def get_owned(owner, activity_id):
        """
        Fetch an activity owned by ``owner``. A missing id and someone
        else's id both raise NotFound.
        """
        activity = Activity.objects.filter(pk=activity_id, user=owner).first()
        if activity is None:
            raise NotFound('Activity not found')
        return activity

    @staticmethod
    def create_activity(owner, name, point_value, icon=None):
        return Activity.objects.create(
            user=owner,
            name=name,
            point_value=point_value,
            icon=icon or DEFAULT_ICON,
        )

    @staticmethod
    def update_activity(owner, activity_id, fields):
        """Apply the given fields; log entries keep their snapshots"""
        activity = CatalogService.get_owned(owner, activity_id)

        changed = []
        for field in UPDATABLE_FIELDS:
            if field not in fields:
                continue
            value = fields[field]
            if field == 'icon':
                value = value or DEFAULT_ICON
            setattr(activity, field, value)
            changed.append(field)

        if changed:
            activity.save(update_fields=changed)
        return activity

    @staticmethod
    def delete_activity(owner, activity_id):
        # Log entries referencing this activity keep their row; activity_id is nulled
        activity = CatalogService.get_owned(owner, activity_id)
        activity.delete()
