"""Service layer: push and preference operations returning ServiceResult."""
