"""HTTP middleware and per-route request checks."""
