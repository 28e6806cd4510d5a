"""
utils/ - Shared Helpers
=======================
Logging setup and identifier generation. No dependencies on other layers
except the shared error types.
"""
