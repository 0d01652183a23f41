"""Exceptions raised by the finance dashboard package."""
from typing import Sequence


class FinanceDashboardError(Exception):
    """Base class for errors raised by this package."""


class MissingFieldsError(FinanceDashboardError):
    """A simulated service request lacks one of its required fields."""

    def __init__(self, fields: Sequence[str]):
        self.fields = tuple(fields)
        quoted = " e ".join(f"'{name}'" for name in self.fields)
        super().__init__(f"É necessário enviar {quoted}.")

    @property
    def message(self) -> str:
        return str(self)


class ApiUnavailableError(FinanceDashboardError):
    """The dashboard API could not be reached or answered with an error."""
