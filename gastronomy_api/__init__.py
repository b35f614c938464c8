"""
Gastronomy Heaven API.

A read-only HTTP API over a static menu catalog (products, categories and
restaurant details) loaded once from a JSON document at startup.
"""
