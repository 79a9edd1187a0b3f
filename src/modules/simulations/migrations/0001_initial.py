import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("customers", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Simulation",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("timestamp", models.DateTimeField()),
                (
                    "requested_amount",
                    models.DecimalField(decimal_places=2, max_digits=15),
                ),
                (
                    "collateral_amount",
                    models.DecimalField(decimal_places=2, max_digits=15),
                ),
                ("term_months", models.PositiveIntegerField()),
                (
                    "monthly_interest_rate",
                    models.DecimalField(decimal_places=2, max_digits=5),
                ),
                (
                    "customer",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="simulations",
                        to="customers.customer",
                    ),
                ),
            ],
            options={
                "db_table": "simulations",
                "ordering": ["id"],
                "indexes": [
                    models.Index(
                        fields=["customer", "timestamp"],
                        name="simulations_customer_ts_idx",
                    )
                ],
            },
        ),
    ]
