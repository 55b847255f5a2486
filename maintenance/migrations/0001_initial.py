from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('asset_groups', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='MaintenanceSchedule',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('scope', models.PositiveSmallIntegerField(choices=[(0, 'Asset'), (1, 'Building')], default=1)),
                ('cycle_months', models.PositiveIntegerField(blank=True, help_text='Recurrence interval in months. Empty or 0 means non-recurring', null=True)),
                ('last_done_at', models.DateTimeField(blank=True, null=True)),
                ('next_due_at', models.DateTimeField(blank=True, null=True)),
                ('notify_before_days', models.PositiveIntegerField(default=0, help_text='Start notifying this many days before the due date')),
                ('title', models.CharField(blank=True, max_length=255)),
                ('description', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('asset_group', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='maintenance_schedules', to='asset_groups.assetgroup')),
            ],
            options={
                'verbose_name': 'Maintenance Schedule',
                'verbose_name_plural': 'Maintenance Schedules',
                'db_table': 'maintenance_schedule',
                'ordering': ['id'],
                'indexes': [models.Index(fields=['next_due_at'], name='ms_next_due_idx')],
            },
        ),
        migrations.CreateModel(
            name='MaintenanceNotificationSkip',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('due_date', models.DateField()),
                ('skipped_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('schedule', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='skips', to='maintenance.maintenanceschedule')),
            ],
            options={
                'verbose_name': 'Notification Skip',
                'verbose_name_plural': 'Notification Skips',
                'db_table': 'maintenance_notification_skip',
                'ordering': ['-skipped_at'],
                'constraints': [models.UniqueConstraint(fields=('schedule', 'due_date'), name='ux_mns_schedule_due')],
            },
        ),
    ]
