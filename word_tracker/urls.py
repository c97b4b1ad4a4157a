# word_tracker/urls.py
from django.contrib import admin
from django.urls import path, include


urlpatterns = [
    path('admin/', admin.site.urls),
    path('plans/', include('apps.plans.urls')),
    path('reports/', include('apps.reports.urls')),
]
