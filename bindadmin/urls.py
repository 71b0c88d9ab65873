from django.urls import path
from rest_framework import routers

from bindadmin import views


router = routers.DefaultRouter(trailing_slash=False)
router.register('zones', views.ZoneViewset, 'zone')
router.register('servers', views.ServerViewset, 'server')

urlpatterns = router.urls + [
    path('zones/<int:zone_id>/records/<int:record_id>',
         views.RecordDetail.as_view(), name='record-detail'),
    path('zones/<int:zone_id>/records',
         views.RecordCreate.as_view(), name='record-create'),
    path('push', views.PushView.as_view(), name='push'),
]
