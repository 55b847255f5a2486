from decimal import Decimal
from django.db import migrations, models
import django.core.validators


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='AssetGroup',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100, unique=True)),
                ('monthly_addon_fee', models.DecimalField(decimal_places=2, default=Decimal('0.00'), help_text='Monthly fee when the asset is an add-on (e.g. extra bed)', max_digits=10, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))])),
                ('one_time_damage_fee', models.DecimalField(decimal_places=2, default=Decimal('0.00'), help_text='One-off charge when the asset is damaged', max_digits=10, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))])),
                ('free_replacement', models.BooleanField(default=True, help_text='Replaced free of charge (e.g. light bulbs)')),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Asset Group',
                'verbose_name_plural': 'Asset Groups',
                'ordering': ['name'],
            },
        ),
    ]
