from django.contrib import admin
from .models import Plan, PlanDay


class PlanDayInline(admin.TabularInline):
    model = PlanDay
    extra = 0
    fields = ('date', 'target', 'logged')
    readonly_fields = ('date', 'target')  # Harmonogram liczy alokator


@admin.register(Plan)
class PlanAdmin(admin.ModelAdmin):
    list_display = ('name', 'user', 'start_date', 'end_date', 'goal_amount', 'strategy', 'intensity', 'weekend_rule')
    list_filter = ('strategy', 'intensity', 'weekend_rule')
    search_fields = ('name',)
    inlines = [PlanDayInline]
