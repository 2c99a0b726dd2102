# =============================================================================
# core/actions/ - Entry Points
# =============================================================================
# Validates input, calls services/repositories, revalidates cached views and
# returns ActionResult envelopes. Reads return raw data or None.
# =============================================================================

from .example_actions import (
    apply_example_markup,
    create_example,
    delete_example,
    get_example_by_id,
    get_examples,
    update_example,
)
from .organization_actions import (
    get_current_organization,
    get_organization_summary,
    update_organization,
)

__all__ = [
    # Examples
    "apply_example_markup",
    "create_example",
    "delete_example",
    "get_example_by_id",
    "get_examples",
    "update_example",
    # Organizations
    "get_current_organization",
    "get_organization_summary",
    "update_organization",
]
