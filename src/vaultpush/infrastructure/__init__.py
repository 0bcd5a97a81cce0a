"""Infrastructure layer: tree copying, storage adapters, and the vault context."""
