"""
repositories/ - Data Access Layer
==================================
Repositories sequence identifier generation, statement building, store
execution and row mapping, and return domain model objects.
"""
