"""
db/ - Database Layer
====================
Handles the connection pool, statement construction and schema bootstrap.
This layer knows nothing about domain models; it speaks statements and rows.
"""
