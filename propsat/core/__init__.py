"""propsat/core — configuration, exceptions, shared types and validators."""
