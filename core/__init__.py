# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains framework-agnostic business logic:
# - models/: Pydantic schemas for records, inputs and the result envelope
# - repositories/: One Supabase query per access pattern
# - services/: Orchestration across repositories, exact decimal math
# - actions/: Entry points (validate, delegate, revalidate, envelope)
# - context.py: Request-scoped context passed to every action
#
# Code in this package should NOT import from FastAPI.
# This keeps the logic testable and reusable.
# =============================================================================
