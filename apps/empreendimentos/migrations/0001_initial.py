import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Empreendimento',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('title', models.CharField(max_length=200)),
                ('address', models.JSONField(blank=True, default=dict, help_text='street, number, neighborhood, city, state')),
                ('project_status', models.CharField(blank=True, choices=[('under_construction', 'Em Obras'), ('launch', 'Lançamento'), ('ready_to_move_in', 'Pronto para Morar')], max_length=30, null=True)),
                ('facade', models.URLField(blank=True, max_length=500)),
                ('logo', models.URLField(blank=True, max_length=500)),
                ('images', models.JSONField(blank=True, default=list)),
                ('project_evolution', models.JSONField(blank=True, default=dict)),
                ('metadata', models.JSONField(blank=True, default=dict)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'empreendimento',
                'ordering': ['title'],
                'indexes': [models.Index(fields=['project_status'], name='empreendimento_status_idx')],
            },
        ),
    ]
