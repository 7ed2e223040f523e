from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='LocationRecord',
            fields=[
                ('id', models.AutoField(primary_key=True, serialize=False)),
                ('latitude', models.FloatField()),
                ('longitude', models.FloatField()),
                ('altitude', models.FloatField(default=0.0)),
                ('timestamp', models.TextField(help_text='Client-declared observation time')),
                ('machine_name', models.CharField(help_text='Reporting machine', max_length=255)),
                ('user_name', models.CharField(blank=True, max_length=255, null=True)),
                ('location_source', models.CharField(blank=True, default='Unknown', max_length=100, null=True)),
                ('public_ip', models.CharField(blank=True, max_length=64, null=True)),
                ('city', models.CharField(blank=True, max_length=255, null=True)),
                ('country', models.CharField(blank=True, max_length=255, null=True)),
                ('accuracy', models.FloatField(blank=True, help_text='Accuracy in meters', null=True)),
                ('speed', models.FloatField(blank=True, null=True)),
                ('received_at', models.DateTimeField(help_text='When the server received the report')),
                ('server_ip', models.CharField(blank=True, help_text='Caller address', max_length=64, null=True)),
                ('user_agent', models.TextField(blank=True, default='Unknown', null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'locations',
                'ordering': ['-created_at', '-id'],
                'indexes': [
                    models.Index(fields=['machine_name'], name='idx_machine_name'),
                    models.Index(fields=['timestamp'], name='idx_timestamp'),
                    models.Index(fields=['created_at'], name='idx_created_at'),
                ],
            },
        ),
    ]
