"""
URL configuration for the backend.

The API is served from the site root with no version prefix.
"""

from django.urls import path

from .api import api

urlpatterns = [
    path("", api.urls),
]
