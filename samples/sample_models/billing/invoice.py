"""Billing samples: a second `Address` sharing its simple name with `people.Address`."""

from __future__ import annotations

from dataclasses import dataclass

from sample_models import people


@dataclass
class Address:
    line1: str
    postcode: str


@dataclass
class Invoice:
    number: str
    billing: Address
    customer: people.Address
    shipping: people.Address
