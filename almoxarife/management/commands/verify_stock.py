"""
Management command to audit product quantities against the movement ledger.

Usage:
    python manage.py verify_stock
    python manage.py verify_stock --fix
"""

from django.core.management.base import BaseCommand

from almoxarife.models import Product


class Command(BaseCommand):
    """Verify quantity == sum(IN) - sum(OUT) for every product."""

    help = 'Confere o saldo de cada produto com suas movimentações'

    def add_arguments(self, parser):
        parser.add_argument(
            '--fix',
            action='store_true',
            help='Corrige os saldos divergentes a partir das movimentações'
        )

    def handle(self, *args, **options):
        drifted = 0

        for product in Product.objects.order_by('code'):
            expected = product.ledger_total()
            if expected == product.quantity:
                continue

            drifted += 1
            self.stdout.write(
                f'{product}: saldo {product.quantity}, movimentações {expected}'
            )
            if options['fix']:
                product.recalculate()

        if not drifted:
            self.stdout.write(self.style.SUCCESS('Todos os saldos conferem'))
        elif options['fix']:
            self.stdout.write(self.style.SUCCESS(f'{drifted} produto(s) corrigido(s)'))
        else:
            self.stdout.write(self.style.WARNING(f'{drifted} produto(s) divergente(s)'))
