from factory import Sequence
from factory.django import DjangoModelFactory


class ServerFactory(DjangoModelFactory):
    hostname = Sequence(lambda n: 'dns{}.example.net'.format(n))
    ip_address = Sequence(lambda n: '10.0.{}.{}'.format(n // 250, n % 250 + 1))
    type = 'master'
    ns_record = True
    push_updates = True
    directory = '/etc/bind/zones'
    active = True

    class Meta:
        model = 'bindadmin.Server'
        django_get_or_create = ('hostname',)
