"""Unit tests for the text and CSV report renderers.

Rendering is pure, so customers and simulations are unsaved instances.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import pytest

from modules.customers.models import Customer
from modules.simulations.models import Simulation
from modules.simulations.reports import (
    CSV_HEADER,
    render_csv_report,
    render_text_report,
)

pytestmark = pytest.mark.unit


@pytest.fixture()
def customer() -> Customer:
    return Customer(id=3, cpf="12345678901", name="João Teste")


def _simulation(customer: Customer, id: int, **overrides) -> Simulation:
    defaults = {
        "timestamp": datetime(2024, 6, 15, 10, 30, 26),
        "requested_amount": Decimal("300000.00"),
        "collateral_amount": Decimal("1000000.00"),
        "term_months": 150,
        "monthly_interest_rate": Decimal("2.00"),
    }
    defaults.update(overrides)
    return Simulation(id=id, customer=customer, **defaults)


class TestTextReport:
    def test_title_block(self, customer):
        report = render_text_report(customer, [_simulation(customer, 1)])
        lines = report.split("\n")
        assert lines[0] == "RELATÓRIO DE SIMULAÇÕES"
        assert lines[1] == "=" * 24
        assert lines[2] == ""
        assert lines[3] == "Cliente: João Teste"
        assert lines[4] == "CPF: 12345678901"
        assert lines[5] == "Total de simulações: 1"

    def test_header_and_separator(self, customer):
        lines = render_text_report(customer, [_simulation(customer, 1)]).split("\n")
        assert lines[7] == (
            "ID    | Data/Hora            | Valor Solicitado | Valor Garantia  "
            "| Meses      | Taxa %    "
        )
        assert lines[8] == "-" * 88

    def test_data_row_is_fixed_width(self, customer):
        lines = render_text_report(customer, [_simulation(customer, 1)]).split("\n")
        assert lines[9] == (
            "1     | 15/06/2024 10:30:26  | 300000.00       | 1000000.00      "
            "| 150        | 2.00      "
        )

    def test_amounts_forced_to_two_decimals(self, customer):
        sim = _simulation(customer, 1, requested_amount=Decimal("1500"))
        assert "| 1500.00         |" in render_text_report(customer, [sim])

    def test_one_row_per_simulation(self, customer):
        sims = [_simulation(customer, i) for i in (1, 2, 3)]
        report = render_text_report(customer, sims)
        assert "Total de simulações: 3" in report
        assert report.endswith("\n")
        assert len(report.rstrip("\n").split("\n")) == 9 + 3


class TestCsvReport:
    def test_header_plus_one_line_per_simulation(self, customer):
        sims = [_simulation(customer, i) for i in (1, 2)]
        lines = render_csv_report(customer, sims).splitlines()
        assert lines[0] == CSV_HEADER.rstrip("\n")
        assert len(lines) == 3

    def test_date_and_time_split(self, customer):
        line = render_csv_report(customer, [_simulation(customer, 1)]).splitlines()[1]
        assert line == (
            '1,15/06/2024,10:30:26,300000.00,1000000.00,150,2.00,3,"João Teste",12345678901'
        )

    def test_decimals_keep_their_own_form(self, customer):
        sim = _simulation(customer, 1, requested_amount=Decimal("1500"))
        line = render_csv_report(customer, [sim]).splitlines()[1]
        assert line.split(",")[3] == "1500"

    def test_name_is_not_escaped(self, customer):
        customer.name = 'Ana "Silva", Jr'
        line = render_csv_report(customer, [_simulation(customer, 1)]).splitlines()[1]
        assert '"Ana "Silva", Jr"' in line
