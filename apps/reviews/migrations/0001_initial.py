import uuid

import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Review',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(help_text='Display name or "Anonymous".', max_length=255)),
                ('project_type', models.CharField(choices=[
                    ('Web Development', 'Web Development'),
                    ('Branding & Design', 'Branding & Design'),
                    ('Video & Photography', 'Video & Photography'),
                    ('Creative Consulting', 'Creative Consulting'),
                    ('Multiple Services', 'Multiple Services'),
                    ('Other', 'Other'),
                ], max_length=64)),
                ('rating', models.PositiveSmallIntegerField(
                    help_text='Rating from 1 to 5',
                    validators=[
                        django.core.validators.MinValueValidator(1),
                        django.core.validators.MaxValueValidator(5),
                    ],
                )),
                ('body', models.TextField()),
                ('is_anonymous', models.BooleanField(default=False)),
                ('company', models.CharField(blank=True, max_length=255)),
                ('role', models.CharField(blank=True, max_length=255)),
                ('status', models.CharField(
                    choices=[('pending', 'Pending approval'), ('approved', 'Approved')],
                    default='pending',
                    max_length=16,
                )),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['status', '-created_at'], name='review_status_created_idx')],
                'constraints': [
                    models.CheckConstraint(
                        condition=models.Q(('rating__gte', 1), ('rating__lte', 5)),
                        name='review_rating_range',
                    ),
                ],
            },
        ),
    ]
