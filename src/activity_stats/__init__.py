"""Statistics over tab-delimited activity logs."""
