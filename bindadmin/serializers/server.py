from rest_framework import serializers

from bindadmin.models import Server


class ServerSerializer(serializers.HyperlinkedModelSerializer):

    class Meta:
        model = Server
        fields = ['id', 'url', 'hostname', 'ip_address', 'type', 'ns_record',
                  'push_updates', 'directory', 'template', 'script', 'active']

    def validate_hostname(self, value):
        return value.lower()

    def validate_directory(self, value):
        return value.rstrip('/') or '/'
