"""HTTP clients for upstream weather APIs."""
