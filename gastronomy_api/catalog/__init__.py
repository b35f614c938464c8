"""
Menu catalog layer.

Responsibilities:
- Load the catalog document (products, categories, restaurant info) once.
- Hold it as an immutable in-memory snapshot with a pandas query index.
- Answer filter, lookup and aggregate queries over that snapshot.
"""
