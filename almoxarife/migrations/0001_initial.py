"""
Initial migration for Almoxarife models.
"""

import uuid

import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):
    """Create Almoxarife models: Sequence, Unit, Sector, Supplier, Product, Movement."""

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Sequence',
            fields=[
                ('name', models.CharField(max_length=50, primary_key=True, serialize=False, verbose_name='Nome')),
                ('last_value', models.PositiveBigIntegerField(default=0, verbose_name='Último valor')),
            ],
            options={
                'verbose_name': 'Sequência',
                'verbose_name_plural': 'Sequências',
            },
        ),
        migrations.CreateModel(
            name='Unit',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=120, unique=True, verbose_name='Nome')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Unidade',
                'verbose_name_plural': 'Unidades',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Supplier',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255, verbose_name='Nome')),
                ('contact', models.CharField(blank=True, default='', max_length=255, verbose_name='Contato')),
                ('email', models.EmailField(blank=True, default='', max_length=254, verbose_name='E-mail')),
                ('phone', models.CharField(blank=True, default='', max_length=40, verbose_name='Telefone')),
                ('address', models.CharField(blank=True, default='', max_length=255, verbose_name='Endereço')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Fornecedor',
                'verbose_name_plural': 'Fornecedores',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Sector',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=120, verbose_name='Nome')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('unit', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='sectors', to='almoxarife.unit', verbose_name='Unidade')),
            ],
            options={
                'verbose_name': 'Setor',
                'verbose_name_plural': 'Setores',
                'ordering': ['name'],
                'constraints': [
                    models.UniqueConstraint(fields=('unit', 'name'), name='unique_sector_per_unit'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Product',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('code', models.PositiveIntegerField(editable=False, unique=True, verbose_name='Código')),
                ('name', models.CharField(max_length=255, verbose_name='Nome')),
                ('manufacturer', models.CharField(blank=True, max_length=255, null=True, verbose_name='Fabricante')),
                ('model', models.CharField(blank=True, max_length=255, null=True, verbose_name='Modelo')),
                ('nfe', models.CharField(blank=True, max_length=60, null=True, verbose_name='NF-e')),
                ('dt_nfe', models.DateField(blank=True, null=True, verbose_name='Data da NF-e')),
                ('dt_inclu', models.DateTimeField(default=django.utils.timezone.now, editable=False, verbose_name='Data de inclusão')),
                ('hora_inclu', models.CharField(blank=True, default='', editable=False, max_length=5, verbose_name='Hora de inclusão')),
                ('nchagpc', models.CharField(blank=True, max_length=120, null=True, verbose_name='NCHAGPC')),
                ('sector', models.CharField(blank=True, max_length=120, null=True, verbose_name='Setor')),
                ('unit', models.CharField(blank=True, max_length=120, null=True, verbose_name='Unidade')),
                ('quantity', models.PositiveIntegerField(default=0, editable=False, verbose_name='Quantidade')),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Produto',
                'verbose_name_plural': 'Produtos',
                'ordering': ['code'],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(quantity__gte=0), name='product_quantity_non_negative'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Movement',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('type', models.CharField(choices=[('IN', 'Entrada'), ('OUT', 'Saída')], max_length=3, verbose_name='Tipo')),
                ('quantity', models.PositiveIntegerField(verbose_name='Quantidade')),
                ('created_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now, editable=False, verbose_name='Data/Hora')),
                ('product', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='movements', to='almoxarife.product', verbose_name='Produto')),
                ('supplier', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='movements', to='almoxarife.supplier', verbose_name='Fornecedor')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='almoxarife_movements', to=settings.AUTH_USER_MODEL, verbose_name='Usuário')),
            ],
            options={
                'verbose_name': 'Movimentação',
                'verbose_name_plural': 'Movimentações',
                'ordering': ['-created_at', '-id'],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(quantity__gt=0), name='movement_quantity_positive'),
                ],
                'indexes': [
                    models.Index(fields=['product', 'created_at'], name='movement_product_created_idx'),
                    models.Index(fields=['type', 'created_at'], name='movement_type_created_idx'),
                ],
            },
        ),
    ]
