"""Python port of the faas-cli template store commands."""
