"""Report output for merge runs."""
