"""
Crime data sources.

Upstream providers return recent police events as CrimeEvent records.
"""
