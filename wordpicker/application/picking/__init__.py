"""
Picking bounded context - Application layer.

Use cases for picker sessions and the per-session definition caches that
enrich selected words asynchronously.
"""
