"""Banco de Horas package.

Organized by feature modules (employees, timesheet, balances, ...) with a thin
Flask controller layer on top of pure calculators and a persisted store.
"""
