import uuid
from decimal import Decimal
from django.core.validators import MinValueValidator
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Item',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=200)),
                ('category', models.CharField(choices=[('Bicycle', 'Bicycle'), ('Part', 'Part')], db_index=True, max_length=20)),
                ('type', models.CharField(blank=True, max_length=100)),
                ('brand', models.CharField(blank=True, max_length=100)),
                ('price', models.DecimalField(decimal_places=2, max_digits=10, validators=[MinValueValidator(Decimal('0.00'))])),
                ('stock', models.PositiveIntegerField(default=0)),
                ('part_type', models.CharField(blank=True, max_length=100)),
                ('compatibility', models.CharField(blank=True, max_length=200)),
                ('image_url', models.URLField(blank=True, max_length=500)),
                ('is_available_for_rent', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'inventory_items',
                'ordering': ['name'],
                'indexes': [models.Index(fields=['category', 'is_available_for_rent'], name='items_cat_rent_idx')],
                'constraints': [
                    models.CheckConstraint(check=models.Q(stock__gte=0), name='item_stock_non_negative'),
                    models.CheckConstraint(check=models.Q(price__gte=0), name='item_price_non_negative'),
                ],
            },
        ),
    ]
