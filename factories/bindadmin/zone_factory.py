from factory import Faker, Sequence, SubFactory
from factory.django import DjangoModelFactory


class ZoneFactory(DjangoModelFactory):
    domain = Sequence(lambda n: 'zone{}.example.com'.format(n))
    master_server = None
    custom_settings = False
    refresh = None
    retry = None
    expire = None
    negative_ttl = None
    default_ttl = None

    class Meta:
        model = 'bindadmin.Zone'
        django_get_or_create = ('domain',)


class SlaveZoneFactory(ZoneFactory):
    master_server = Faker('ipv4')


class RecordFactory(DjangoModelFactory):
    zone = SubFactory(ZoneFactory)
    name = Sequence(lambda n: 'host{}'.format(n))
    type = 'A'
    data = Faker('ipv4')

    class Meta:
        model = 'bindadmin.Record'
