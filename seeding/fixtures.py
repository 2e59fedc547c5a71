# seeding/fixtures.py
"""Fixture sources consumed by the database seeder."""

from abc import ABC, abstractmethod
from typing import List, Optional

import placeholder_data
from definitions import Customer, Invoice, Revenue, User


class FixtureSource(ABC):
    """Abstract provider of the records to seed."""

    @abstractmethod
    def users(self) -> List[User]:
        """Users to insert, with plaintext passwords."""
        pass

    @abstractmethod
    def customers(self) -> List[Customer]:
        pass

    @abstractmethod
    def invoices(self) -> List[Invoice]:
        pass

    @abstractmethod
    def revenue(self) -> List[Revenue]:
        pass


class PlaceholderFixtures(FixtureSource):
    """Sample dashboard data from `placeholder_data`."""

    def users(self) -> List[User]:
        return [User(**u) for u in placeholder_data.users]

    def customers(self) -> List[Customer]:
        return [Customer(**c) for c in placeholder_data.customers]

    def invoices(self) -> List[Invoice]:
        return [Invoice(**i) for i in placeholder_data.invoices]

    def revenue(self) -> List[Revenue]:
        return [Revenue(**r) for r in placeholder_data.revenue]


class StaticFixtures(FixtureSource):
    """Fixture source over explicit in-memory lists."""

    def __init__(
        self,
        users: Optional[List[User]] = None,
        customers: Optional[List[Customer]] = None,
        invoices: Optional[List[Invoice]] = None,
        revenue: Optional[List[Revenue]] = None,
    ):
        self._users = list(users or [])
        self._customers = list(customers or [])
        self._invoices = list(invoices or [])
        self._revenue = list(revenue or [])

    def users(self) -> List[User]:
        return list(self._users)

    def customers(self) -> List[Customer]:
        return list(self._customers)

    def invoices(self) -> List[Invoice]:
        return list(self._invoices)

    def revenue(self) -> List[Revenue]:
        return list(self._revenue)
