# apps/plans/models.py
from django.db import models
from django.conf import settings
from apps.plans.domain.entities import Strategy, Intensity, WeekendRule


class Plan(models.Model):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='plans')
    name = models.CharField(max_length=255)

    # Tagi (np. Novel / Writing)
    content_type = models.CharField(max_length=100, blank=True)
    activity_type = models.CharField(max_length=100, blank=True)

    # Zakres (włącznie z end_date)
    start_date = models.DateField()
    end_date = models.DateField()
    goal_amount = models.PositiveIntegerField(default=0)

    class StrategyChoices(models.TextChoices):
        STEADY = Strategy.STEADY.value, 'Steadily'
        RISING = Strategy.RISING.value, 'Rising to the challenge'
        BITING = Strategy.BITING.value, 'Biting the bullet'
        MOUNTAIN = Strategy.MOUNTAIN.value, 'Mountain hike'
        VALLEY = Strategy.VALLEY.value, 'Valley'
        OSCILLATING = Strategy.OSCILLATING.value, 'Oscillating'
        RANDOM = Strategy.RANDOM.value, 'Randomly'

    class IntensityChoices(models.TextChoices):
        GENTLE = Intensity.GENTLE.value, 'Gentle'
        AVERAGE = Intensity.AVERAGE.value, 'Average'
        INTENSE = Intensity.INTENSE.value, 'Intense'
        EXTREME = Intensity.EXTREME.value, 'Extreme'

    class WeekendRuleChoices(models.TextChoices):
        NONE = WeekendRule.NONE.value, 'No weekend rule'
        HALF = WeekendRule.HALF.value, 'Half targets on weekends'
        OFF = WeekendRule.OFF.value, 'Weekends off'

    strategy = models.CharField(max_length=50, choices=StrategyChoices.choices, default=StrategyChoices.STEADY)
    intensity = models.CharField(max_length=50, choices=IntensityChoices.choices, default=IntensityChoices.AVERAGE)
    weekend_rule = models.CharField(max_length=20, choices=WeekendRuleChoices.choices, default=WeekendRuleChoices.NONE)

    # Ustawienia widoku (kolor, początek tygodnia...) - dla nas nieprzezroczyste
    display_settings = models.JSONField(default=dict, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return self.name


class PlanDay(models.Model):
    plan = models.ForeignKey(Plan, on_delete=models.CASCADE, related_name='days')
    date = models.DateField()
    target = models.PositiveIntegerField(default=0)
    logged = models.PositiveIntegerField(default=0)

    class Meta:
        unique_together = ('plan', 'date')  # Jeden wiersz na dzień planu
        ordering = ['date']

    def __str__(self):
        return f"{self.plan} - {self.date}: {self.logged}/{self.target}"
