# =============================================================================
# core/services/example_service.py - Example Business Logic
# =============================================================================
# Derived-value computations over examples. All arithmetic is Decimal and
# rounded once, at the configured precision, before it is persisted.
# =============================================================================

import logging
from decimal import Decimal
from uuid import UUID

from core.models.example import Example, ExampleUpdate
from core.repositories.example_repository import ExampleRepository
from lib.money import quantize, scale

logger = logging.getLogger(__name__)

DEFAULT_MARKUP = Decimal("1.1")


class ExampleService:
    """Orchestrates example repository calls and value computations."""

    def __init__(self, examples: ExampleRepository | None = None):
        self.examples = examples or ExampleRepository()

    def apply_markup(
        self,
        example_id: str | UUID,
        factor: Decimal = DEFAULT_MARKUP,
    ) -> Example | None:
        """
        Multiply an example's value by `factor` and store the result.

        Example:
            value 10.10, factor 1.1 -> 11.11 (not 11.110000000000001)

        Returns:
            The updated example, or None if it doesn't exist
        """
        example = self.examples.get_by_id(example_id)
        if example is None:
            return None

        new_value = scale(example.value, factor)
        logger.info(f"Applying markup x{factor} to example {example.id}: {example.value} -> {new_value}")

        return self.examples.update(example.id, ExampleUpdate(value=new_value))

    def total_value(self, organization_id: str | UUID) -> Decimal:
        """Exact sum of the values of an organization's active examples."""
        examples = self.examples.list_by_organization(organization_id)
        total = sum((example.value for example in examples), Decimal("0"))
        return quantize(total)
