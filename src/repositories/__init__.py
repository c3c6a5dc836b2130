"""Repository interfaces and implementations.

This package defines the abstract :class:`RepairsRepo` record store and its
concrete adapters: an in-memory store under :mod:`repositories.memory` and a
SQLite store under :mod:`repositories.sqlite`.
"""
