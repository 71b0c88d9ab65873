from django.db import transaction
from django.utils.functional import cached_property
from rest_framework import viewsets, status, mixins, views
from rest_framework.decorators import action
from rest_framework.generics import (ListCreateAPIView, RetrieveUpdateDestroyAPIView,
                                     get_object_or_404)
from rest_framework.response import Response

from bindadmin import models, push
from bindadmin.exceptions import UnprocessableEntity
from bindadmin.registry import Registry
from bindadmin.serializers import (RecordSerializer, ServerSerializer,
                                   ZoneDetailSerializer, ZoneListSerializer)


class ZoneViewset(mixins.CreateModelMixin,
                  mixins.RetrieveModelMixin,
                  mixins.UpdateModelMixin,
                  mixins.DestroyModelMixin,
                  mixins.ListModelMixin,
                  viewsets.GenericViewSet):
    queryset = models.Zone.objects.filter(deleted=False)

    def get_serializer_class(self):
        if self.action in ['list', 'create']:
            return ZoneListSerializer
        return ZoneDetailSerializer

    def get_serializer_context(self):
        context = super().get_serializer_context()
        context['config'] = Registry.load()
        return context

    def destroy(self, request, pk=None):
        zone = self.get_object()
        zone.soft_delete()
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=['post'])
    def raise_serial(self, request, pk=None):
        zone = self.get_object()
        zone.raise_serial_number(force=True)
        return Response(self.get_serializer(zone).data)

    @action(detail=True, methods=['post'])
    def restore(self, request, pk=None):
        zone = get_object_or_404(models.Zone.objects.filter(deleted=True), pk=pk)
        zone.restore()
        return Response(ZoneDetailSerializer(zone, context=self.get_serializer_context()).data)


class ServerViewset(viewsets.ModelViewSet):
    serializer_class = ServerSerializer
    queryset = models.Server.objects.all()


class ZoneRecordsMixin:
    serializer_class = RecordSerializer

    @cached_property
    def zone(self):
        zone = get_object_or_404(models.Zone.active(), id=self.kwargs['zone_id'])
        if not zone.is_master_zone():
            raise UnprocessableEntity('Slave zones have no records.')
        return zone

    def get_queryset(self):
        return self.zone.records.select_related('zone')

    def get_serializer_context(self):
        context = super().get_serializer_context()
        context['zone'] = self.zone
        return context


class RecordCreate(ZoneRecordsMixin, ListCreateAPIView):
    paginator = None


class RecordDetail(ZoneRecordsMixin, RetrieveUpdateDestroyAPIView):
    lookup_url_kwarg = 'record_id'

    @transaction.atomic
    def perform_destroy(self, instance):
        instance.delete()
        self.zone.raise_serial_number()


class PushView(views.APIView):
    """Push the zones with pending changes to the servers right away."""

    def post(self, request, format=None):
        zones = push.push_updates()
        return Response({'pushed': [zone.domain for zone in zones]})


class HealthCheck(views.APIView):
    permission_classes = ()

    def get(self, request, format=None):
        return Response({'status': 'ok'})
