# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains framework-agnostic business logic:
# - models/: Pydantic schemas for data validation
# - services/: Intention submission pipeline and chat relay
# - prompts.py: Parish assistant persona
#
# Code in this package should NOT import FastAPI routing or read settings.
# Services receive their collaborators through constructors.
# =============================================================================
