"""Domain layer: connection model, parsing rules and the reconciliation pass."""
