import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Plan',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255)),
                ('content_type', models.CharField(blank=True, max_length=100)),
                ('activity_type', models.CharField(blank=True, max_length=100)),
                ('start_date', models.DateField()),
                ('end_date', models.DateField()),
                ('goal_amount', models.PositiveIntegerField(default=0)),
                ('strategy', models.CharField(choices=[('steady', 'Steadily'), ('rising', 'Rising to the challenge'), ('biting', 'Biting the bullet'), ('mountain', 'Mountain hike'), ('valley', 'Valley'), ('oscillating', 'Oscillating'), ('random', 'Randomly')], default='steady', max_length=50)),
                ('intensity', models.CharField(choices=[('gentle', 'Gentle'), ('average', 'Average'), ('intense', 'Intense'), ('extreme', 'Extreme')], default='average', max_length=50)),
                ('weekend_rule', models.CharField(choices=[('none', 'No weekend rule'), ('half', 'Half targets on weekends'), ('off', 'Weekends off')], default='none', max_length=20)),
                ('display_settings', models.JSONField(blank=True, default=dict)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='plans', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='PlanDay',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('date', models.DateField()),
                ('target', models.PositiveIntegerField(default=0)),
                ('logged', models.PositiveIntegerField(default=0)),
                ('plan', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='days', to='plans.plan')),
            ],
            options={
                'ordering': ['date'],
                'unique_together': {('plan', 'date')},
            },
        ),
    ]
