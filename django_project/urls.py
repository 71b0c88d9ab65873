"""bindadmin URL Configuration

The API lives at the root, the Django admin under /admin/.
"""
from django.conf import settings
from django.urls import include, path
from django.contrib import admin

from bindadmin.views import HealthCheck

urlpatterns = [
    path('admin/', admin.site.urls),
    path('', include('bindadmin.urls')),
    path('_health', HealthCheck.as_view())
]

if settings.SERVE_STATIC:
    from django.conf.urls.static import static
    urlpatterns += static(settings.STATIC_URL, document_root=settings.STATIC_ROOT)
