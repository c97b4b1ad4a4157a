# apps/reports/models.py
from django.db import models
from django.conf import settings
from django.contrib.contenttypes.fields import GenericForeignKey
from django.contrib.contenttypes.models import ContentType


class ActivityLog(models.Model):
    # Kto?
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE)

    # Co zrobił? (Typ akcji)
    class ActionType(models.TextChoices):
        CREATED = 'created', 'Created'
        UPDATED = 'updated', 'Updated'
        PROGRESS_LOGGED = 'progress_logged', 'Progress logged'

    action_type = models.CharField(max_length=20, choices=ActionType.choices)

    # Na czym? (Plan albo dzień planu)
    content_type = models.ForeignKey(ContentType, on_delete=models.CASCADE)
    object_id = models.PositiveIntegerField()
    content_object = GenericForeignKey('content_type', 'object_id')

    description = models.TextField(blank=True)

    # Metadane (JSON - np. {"date": "2024-11-01", "logged": 1667})
    details = models.JSONField(default=dict, blank=True)

    timestamp = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-timestamp']
        indexes = [
            models.Index(fields=['content_type', 'object_id'], name='reports_act_content_8b1f4e_idx'),
        ]

    def __str__(self):
        return f"{self.user} - {self.action_type} - {self.timestamp}"
