"""Plain-text and CSV renderings of a customer's simulations.

Both functions are pure: they receive the customer and its simulations
already loaded and return the document body as ``str``.  Timestamps are
shown in the project's local time zone.
"""

from __future__ import annotations

from datetime import datetime
from typing import Sequence

from django.utils import timezone

from modules.customers.models import Customer
from modules.simulations.models import Simulation

TEXT_TITLE = "RELATÓRIO DE SIMULAÇÕES"
TEXT_ROW = "{:<5} | {:<20} | {:<15} | {:<15} | {:<10} | {:<10}\n"
TEXT_SEPARATOR = "-" * 88 + "\n"

CSV_HEADER = (
    "ID,Data,Hora,ValorSolicitado,ValorGarantia,Meses,TaxaJuros,"
    "ClienteID,ClienteNome,ClienteCPF\n"
)


def _local(value: datetime) -> datetime:
    if timezone.is_aware(value):
        return timezone.localtime(value)
    return value


def render_text_report(customer: Customer, simulations: Sequence[Simulation]) -> str:
    """Fixed-width report: title block, header row, separator, one row each."""
    parts = [
        f"{TEXT_TITLE}\n",
        "=" * 24 + "\n\n",
        f"Cliente: {customer.name}\n",
        f"CPF: {customer.cpf}\n",
        f"Total de simulações: {len(simulations)}\n\n",
        TEXT_ROW.format(
            "ID",
            "Data/Hora",
            "Valor Solicitado",
            "Valor Garantia",
            "Meses",
            "Taxa %",
        ),
        TEXT_SEPARATOR,
    ]
    for sim in simulations:
        parts.append(
            f"{sim.id:<5d} | "
            f"{_local(sim.timestamp).strftime('%d/%m/%Y %H:%M:%S'):<20} | "
            f"{sim.requested_amount:<15.2f} | "
            f"{sim.collateral_amount:<15.2f} | "
            f"{sim.term_months:<10d} | "
            f"{sim.monthly_interest_rate:<10.2f}\n"
        )
    return "".join(parts)


def render_csv_report(customer: Customer, simulations: Sequence[Simulation]) -> str:
    """Comma-separated export; date and time go in separate columns.

    Only the customer name is quoted.  Values are written as-is, without
    escaping embedded commas or quotes.
    """
    parts = [CSV_HEADER]
    for sim in simulations:
        moment = _local(sim.timestamp)
        parts.append(
            f"{sim.id},"
            f"{moment.strftime('%d/%m/%Y')},"
            f"{moment.strftime('%H:%M:%S')},"
            f"{sim.requested_amount},"
            f"{sim.collateral_amount},"
            f"{sim.term_months},"
            f"{sim.monthly_interest_rate},"
            f"{customer.id},"
            f'"{customer.name}",'
            f"{customer.cpf}\n"
        )
    return "".join(parts)
