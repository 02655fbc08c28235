import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Reservation',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=255)),
                ('contact', models.CharField(help_text='Email address or phone/WhatsApp number.', max_length=255)),
                ('booking_date', models.DateField()),
                ('booking_time', models.TimeField()),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'verbose_name': 'Reservation',
                'verbose_name_plural': 'Reservations',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['booking_date'], name='reservation_date_idx')],
                'constraints': [
                    models.UniqueConstraint(fields=('booking_date', 'booking_time'), name='reservation_unique_slot'),
                    models.CheckConstraint(
                        condition=models.Q(models.Q(('name', ''), _negated=True), models.Q(('contact', ''), _negated=True)),
                        name='reservation_requester_present',
                    ),
                ],
            },
        ),
    ]
