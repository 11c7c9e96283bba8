"""HTTP backend for the budget entities."""
