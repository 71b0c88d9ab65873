import bindadmin.serial
import bindadmin.validators
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Server',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('hostname', models.CharField(max_length=255, unique=True, validators=[bindadmin.validators.validate_hostname])),
                ('ip_address', models.GenericIPAddressField(unique=True, verbose_name='IP Address')),
                ('type', models.CharField(choices=[('master', 'master'), ('slave', 'slave')], default='master', max_length=10)),
                ('ns_record', models.BooleanField(default=True, help_text='Publish this server as a NS record of the master zones')),
                ('push_updates', models.BooleanField(default=True, help_text='Push the generated configuration to this server')),
                ('active', models.BooleanField(default=True)),
            ],
            options={
                'ordering': ('hostname',),
            },
        ),
        migrations.CreateModel(
            name='Setting',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('key', models.CharField(max_length=64, unique=True)),
                ('value', models.CharField(max_length=255)),
            ],
            options={
                'ordering': ('key',),
            },
        ),
        migrations.CreateModel(
            name='Zone',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('domain', models.CharField(max_length=255, unique=True, validators=[bindadmin.validators.validate_domain])),
                ('serial', models.PositiveBigIntegerField(default=bindadmin.serial.generate_serial_number, editable=False, validators=[bindadmin.validators.validate_serial])),
                ('master_server', models.GenericIPAddressField(blank=True, default=None, help_text='Leave empty for master zones', null=True)),
                ('custom_settings', models.BooleanField(default=False, help_text='Use the timers below instead of the defaults')),
                ('refresh', models.PositiveIntegerField(blank=True, null=True)),
                ('retry', models.PositiveIntegerField(blank=True, null=True)),
                ('expire', models.PositiveIntegerField(blank=True, null=True)),
                ('negative_ttl', models.PositiveIntegerField(blank=True, null=True)),
                ('default_ttl', models.PositiveIntegerField(blank=True, null=True)),
                ('has_modifications', models.BooleanField(default=True, editable=False)),
                ('deleted', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'ordering': ['domain'],
            },
        ),
        migrations.CreateModel(
            name='Record',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255, validators=[bindadmin.validators.validate_record_name])),
                ('type', models.CharField(choices=[('A', 'A'), ('AAAA', 'AAAA'), ('CNAME', 'CNAME'), ('MX', 'MX'), ('NS', 'NS'), ('PTR', 'PTR'), ('SRV', 'SRV'), ('TXT', 'TXT')], max_length=10)),
                ('ttl', models.PositiveIntegerField(blank=True, null=True)),
                ('priority', models.PositiveIntegerField(blank=True, null=True)),
                ('data', models.CharField(max_length=255)),
                ('zone', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='records', to='bindadmin.zone')),
            ],
            options={
                'ordering': ('name', 'type', 'priority', 'data'),
            },
        ),
        migrations.CreateModel(
            name='ActivityLog',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('event', models.CharField(max_length=16)),
                ('domain', models.CharField(max_length=255)),
                ('description', models.TextField()),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('zone', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='activity', to='bindadmin.zone')),
            ],
            options={
                'ordering': ('-created_at', '-id'),
            },
        ),
    ]
