"""
Create the sequence that hands out product codes.
"""

from django.db import migrations


def create_product_code_sequence(apps, schema_editor):
    """Start the counter above any existing product code."""
    Sequence = apps.get_model('almoxarife', 'Sequence')
    Product = apps.get_model('almoxarife', 'Product')

    highest = Product.objects.order_by('-code').values_list('code', flat=True).first()
    Sequence.objects.get_or_create(
        name='product.code',
        defaults={'last_value': highest or 0},
    )


def remove_product_code_sequence(apps, schema_editor):
    """Remove the counter (for reverse migration)."""
    Sequence = apps.get_model('almoxarife', 'Sequence')
    Sequence.objects.filter(name='product.code').delete()


class Migration(migrations.Migration):
    """Create the product code sequence."""

    dependencies = [
        ('almoxarife', '0001_initial'),
    ]

    operations = [
        migrations.RunPython(create_product_code_sequence, remove_product_code_sequence),
    ]
