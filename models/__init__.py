"""
models/ - Domain Models
=======================
Plain dataclasses for users, posts and the aggregates assembled from them,
plus the typed row shapes that map query results onto those models.
"""
