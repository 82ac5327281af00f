"""Pure domain helpers (record shape, identifiers, field validation)."""
