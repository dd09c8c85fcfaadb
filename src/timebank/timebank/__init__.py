"""Timebank package.

This package is organized by feature modules (ledger, extraction, ...)
with a thin Flask controller layer over service/repository layers.
"""
