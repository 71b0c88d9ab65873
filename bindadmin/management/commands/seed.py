from django.contrib.auth import get_user_model
from django.contrib.auth.hashers import make_password
from django.core.management.base import BaseCommand
from django.db import transaction
from django_dynamic_fixture import G

from bindadmin import models


class Command(BaseCommand):
    help = 'Seed the DB'

    @transaction.atomic
    def handle(self, *a, **kwa):
        admin = get_user_model()(**{
            "pk": 1,
            "username": "admin",
            "password": make_password("admin"),
            "is_staff": True,
            "is_superuser": True
        })
        admin.save()

        G(models.Server, **{
            "hostname": "dns1.example.com",
            "ip_address": "192.0.2.1",
            "type": "master",
            "ns_record": True,
            "push_updates": True,
            "directory": "/etc/bind/zones",
            "script": "rndc reload",
            "active": True
        })

        G(models.Server, **{
            "hostname": "dns2.example.com",
            "ip_address": "192.0.2.2",
            "type": "slave",
            "ns_record": True,
            "push_updates": True,
            "directory": "/etc/bind/zones",
            "script": "rndc reload",
            "active": True
        })

        zone = G(models.Zone, **{
            "domain": "example.com",
            "master_server": None,
            "custom_settings": False,
            "deleted": False
        })

        G(models.Record, zone=zone, name="www", type="A", ttl=None, priority=None,
          data="192.0.2.10")
        G(models.Record, zone=zone, name="@", type="MX", ttl=None, priority=10,
          data="mail.example.com.")

        G(models.Zone, **{
            "domain": "example.org",
            "master_server": "198.51.100.53",
            "custom_settings": True,
            "refresh": 3600,
            "retry": 600,
            "expire": 604800,
            "negative_ttl": 300,
            "default_ttl": 3600,
            "deleted": False
        })
