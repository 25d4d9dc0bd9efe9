import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Indicacao',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=200)),
                ('rg', models.CharField(max_length=30)),
                ('cpf', models.CharField(db_index=True, max_length=14)),
                ('phone', models.CharField(max_length=30)),
                ('birth_date', models.DateField(blank=True, null=True)),
                ('address', models.JSONField(blank=True, default=dict, help_text='cep, number')),
                ('imovel', models.JSONField(blank=True, db_column='property', help_text='empreendimento de interesse', null=True)),
                ('bank', models.JSONField(blank=True, default=dict, help_text='bank, agency, account')),
                ('is_client', models.BooleanField(default=False)),
                ('indication', models.JSONField(blank=True, default=dict, help_text='name, cpf, phone')),
                ('status', models.CharField(choices=[('new', 'Novo'), ('pending', 'Pendente'), ('approved', 'Aprovado'), ('rejected', 'Rejeitado'), ('processing', 'Processando')], default='new', max_length=20)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Indicação',
                'verbose_name_plural': 'Indicações',
                'db_table': 'indicacao',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['status'], name='indicacao_status_idx'), models.Index(fields=['created_at'], name='indicacao_criada_idx')],
            },
        ),
    ]
