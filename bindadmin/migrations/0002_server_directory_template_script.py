import bindadmin.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('bindadmin', '0001_initial'),
    ]

    operations = [
        migrations.AddField(
            model_name='server',
            name='directory',
            field=models.CharField(default='/etc/bind/zones', help_text='Directory holding the zone files on the server', max_length=255, validators=[bindadmin.validators.validate_directory]),
            preserve_default=False,
        ),
        migrations.AddField(
            model_name='server',
            name='template',
            field=models.CharField(blank=True, default='', help_text='named.conf on the server that includes the generated zone statements', max_length=255),
        ),
        migrations.AddField(
            model_name='server',
            name='script',
            field=models.CharField(blank=True, default='', help_text='Command reloading BIND once the files are in place', max_length=255),
        ),
    ]
