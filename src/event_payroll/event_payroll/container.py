from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .hours.factory import HoursCalculatorFactory
from .payroll.config import PayrollRates
from .payroll.engine import PayrollEngine
from .payroll.service import PayrollReportService


@dataclass(frozen=True)
class Container:
    rates: PayrollRates
    hours_factory: HoursCalculatorFactory
    payroll_engine: PayrollEngine
    payroll_report_service: PayrollReportService


def build_container(*, settings: Mapping[str, Any]) -> Container:
    rates = PayrollRates.from_settings(settings)
    hours_factory = HoursCalculatorFactory()
    payroll_engine = PayrollEngine(rates, hours_factory=hours_factory)
    payroll_report_service = PayrollReportService(payroll_engine)

    return Container(
        rates=rates,
        hours_factory=hours_factory,
        payroll_engine=payroll_engine,
        payroll_report_service=payroll_report_service,
    )
