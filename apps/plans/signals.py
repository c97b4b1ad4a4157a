# apps/plans/signals.py
from django.db.models.signals import post_save
from django.dispatch import receiver
from apps.reports.services import ActivityLogger
from apps.reports.models import ActivityLog
from .models import Plan, PlanDay


@receiver(post_save, sender=Plan)
def log_plan_changes(sender, instance, created, **kwargs):
    if created:
        ActivityLogger.log_plan_event(
            instance, ActivityLog.ActionType.CREATED, f"Plan created: {instance.name}"
        )
    else:
        ActivityLogger.log_plan_event(
            instance, ActivityLog.ActionType.UPDATED, f"Plan updated: {instance.name}"
        )


@receiver(post_save, sender=PlanDay)
def log_progress(sender, instance, update_fields=None, **kwargs):
    """Tylko zapis postępu (bulk_create/bulk_update harmonogramu nie wysyła sygnałów)."""
    if not update_fields or 'logged' not in update_fields:
        return

    ActivityLogger.log_plan_event(
        instance.plan,
        ActivityLog.ActionType.PROGRESS_LOGGED,
        f"Logged {instance.logged} for {instance.date.isoformat()}",
        date=instance.date.isoformat(),
        logged=instance.logged,
        target=instance.target,
    )
