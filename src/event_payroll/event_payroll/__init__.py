"""Event Payroll package.

This package is organized by feature modules (shifts, events, hours, payroll, ...)
with a thin Flask controller layer over pure calculation services.
"""
