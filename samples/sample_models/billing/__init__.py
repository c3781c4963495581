"""Billing sample data classes."""
