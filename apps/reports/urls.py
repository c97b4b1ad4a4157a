# apps/reports/urls.py
from django.urls import path
from . import views

urlpatterns = [
    path('api/stats/', views.global_stats_api_view, name='global_stats_api'),
    path('api/plans/<int:pk>/stats/', views.plan_stats_api_view, name='plan_stats_api'),
]
