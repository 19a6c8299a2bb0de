"""Payroll ledger for staff, part-time and faculty employees, with an interactive menu."""

__version__ = "0.1.0"
__all__ = ["cli", "education", "employees"]