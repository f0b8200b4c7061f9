import django.db.models.deletion
from django.db import migrations, models

import menu.models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('authentication', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='MenuItem',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('item_id', models.CharField(default=menu.models.generate_item_id, max_length=128)),
                ('title', models.CharField(max_length=255)),
                ('category', models.CharField(max_length=255)),
                ('subcategory', models.CharField(blank=True, max_length=255)),
                ('description', models.TextField(blank=True, null=True)),
                ('video_url', models.URLField(blank=True, max_length=1000, null=True)),
                ('steps', models.JSONField(blank=True, default=list)),
                ('tenant', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='menu_items', to='authentication.tenant')),
            ],
            options={
                'db_table': 'menu_items',
                'ordering': ['category', 'subcategory', 'title'],
                'unique_together': {('tenant', 'item_id')},
            },
        ),
        migrations.CreateModel(
            name='MenuOrderingDocument',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('category_order', models.JSONField(blank=True, default=list)),
                ('subcategory_order', models.JSONField(blank=True, default=dict)),
                ('item_order', models.JSONField(blank=True, default=dict)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('tenant', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='menu_ordering', to='authentication.tenant')),
            ],
            options={
                'db_table': 'menu_orderings',
            },
        ),
    ]
