from __future__ import annotations

import random
from datetime import timedelta
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from modules.customers.models import Address, Customer
from modules.simulations.models import Simulation

SEED_CUSTOMERS = [
    ("Ana Souza", "39053344705", ("Rua das Flores", "120", "Centro", "80010-000", "Curitiba", "PR")),
    ("Bruno Lima", "11122233344", ("Av. Paulista", "1578", "Bela Vista", "01310-200", "São Paulo", "SP")),
    ("Carla Mendes", "98765432100", ("Rua XV de Novembro", "45", "Centro", "80020-310", "Curitiba", "PR")),
    ("Daniel Costa", "12345678901", ("Rua da Bahia", "900", "Lourdes", "30160-011", "Belo Horizonte", "MG")),
    ("Fernanda Rocha", "74125896300", ("Av. Atlântica", "2000", "Copacabana", "22021-001", "Rio de Janeiro", "RJ")),
    ("Gabriel Santos", "36925814700", None),
]


class Command(BaseCommand):
    help = "Seed database with customers, addresses and simulations for development."

    def add_arguments(self, parser):
        parser.add_argument(
            "--simulations",
            type=int,
            default=5,
            help="Simulations created for each customer that has none yet.",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        random.seed(42)
        self.stdout.write("Seeding development data...")

        customers = self._seed_customers()
        simulations_created = self._seed_simulations(customers, options["simulations"])

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"customers={len(customers)}, "
                f"simulations={simulations_created}"
            )
        )

    def _seed_customers(self) -> list[Customer]:
        self.stdout.write("Creating customers...")
        customers: list[Customer] = []
        for name, cpf, address in SEED_CUSTOMERS:
            customer, created = Customer.objects.get_or_create(
                cpf=cpf, defaults={"name": name}
            )
            if created and address is not None:
                street, number, neighborhood, zip_code, city, state = address
                customer.address = Address.objects.create(
                    street=street,
                    number=number,
                    neighborhood=neighborhood,
                    zip_code=zip_code,
                    city=city,
                    state=state,
                )
                customer.save(update_fields=["address"])
            customers.append(customer)
        self.stdout.write(self.style.SUCCESS("Creating customers... Done!"))
        return customers

    def _seed_simulations(self, customers: list[Customer], per_customer: int) -> int:
        self.stdout.write("Creating simulations...")
        created = 0
        now = timezone.now()
        for customer in customers:
            if customer.simulations.exists():
                continue
            for _ in range(per_customer):
                requested = Decimal(random.randint(50, 900) * 1000)
                Simulation.objects.create(
                    customer=customer,
                    timestamp=now - timedelta(days=random.randint(0, 90)),
                    requested_amount=requested,
                    collateral_amount=requested * random.choice([2, 3, 4]),
                    term_months=random.choice([60, 120, 150, 240, 360]),
                    monthly_interest_rate=Decimal(random.randint(80, 250)) / 100,
                )
                created += 1
        self.stdout.write(self.style.SUCCESS("Creating simulations... Done!"))
        return created
