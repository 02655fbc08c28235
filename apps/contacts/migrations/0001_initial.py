import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='ContactSubmission',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=255)),
                ('email', models.EmailField(max_length=254)),
                ('phone', models.CharField(blank=True, max_length=64)),
                ('whatsapp', models.CharField(max_length=64)),
                ('brand_about', models.TextField(help_text='What the brand is about.')),
                ('goals', models.TextField(help_text='What the sender wants to achieve.')),
                ('services', models.CharField(help_text='Services the sender is interested in.', max_length=255)),
                ('message', models.TextField(blank=True)),
                ('submitted_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'verbose_name': 'Contact submission',
                'verbose_name_plural': 'Contact submissions',
                'ordering': ['-submitted_at'],
            },
        ),
    ]
