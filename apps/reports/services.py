# apps/reports/services.py
from django.contrib.contenttypes.models import ContentType
from .models import ActivityLog


class ActivityLogger:
    @staticmethod
    def log(user, obj, action_type, description="", details=None):
        """
        Uniwersalna metoda do logowania zdarzeń.
        """
        if not user or not user.is_authenticated:
            return None

        return ActivityLog.objects.create(
            user=user,
            content_type=ContentType.objects.get_for_model(obj),
            object_id=obj.id,
            action_type=action_type,
            description=description,
            details=details or {}
        )

    @classmethod
    def log_plan_event(cls, plan, action_type, description="", **extra):
        """
        Zdarzenie planu: wspólny kształt `details` (nazwa, cel, zakres)
        plus pola specyficzne dla akcji, np. dzień postępu.
        """
        details = {
            'plan': plan.name,
            'goal_amount': plan.goal_amount,
            'start_date': plan.start_date.isoformat(),
            'end_date': plan.end_date.isoformat(),
            'strategy': plan.strategy,
        }
        details.update(extra)
        return cls.log(plan.user, plan, action_type, description, details=details)
