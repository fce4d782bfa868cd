from __future__ import annotations

from decimal import Decimal

from django.core.management.base import BaseCommand

from modules.products.models import Product

CATALOG: list[tuple[str, Decimal]] = [
    ("Cemento Holcim", Decimal("5900.00")),
    ("Cal común", Decimal("3900.00")),
    ("Arena fina (m3)", Decimal("18500.00")),
    ("Ladrillo hueco 12x18x33", Decimal("720.00")),
    ("Varilla de hierro 8mm", Decimal("6450.00")),
    ("Malla sima 15x15", Decimal("42300.00")),
    ("Pegamento para cerámicos", Decimal("8900.00")),
    ("Yeso proyectable", Decimal("7600.00")),
]


class Command(BaseCommand):
    help = "Seed the products table with development data."

    def add_arguments(self, parser):
        parser.add_argument(
            "--clear",
            action="store_true",
            help="Delete every product before seeding.",
        )

    def handle(self, *args, **options):
        if options["clear"]:
            deleted, _ = Product.objects.all().delete()
            self.stdout.write(f"Deleted {deleted} products.")

        self.stdout.write("Creating products...")
        created = 0
        for name, price in CATALOG:
            _, was_created = Product.objects.get_or_create(
                name=name,
                defaults={"price": price, "availability": True},
            )
            created += int(was_created)

        self.stdout.write(
            self.style.SUCCESS(f"Seed completed: products={created}")
        )
