"""Services Layer — company and employee use cases over the repository boundary.

Invariants:
    - Lookups that can miss return tagged results (core/result.py), never raise
    - Services never touch HTTP objects; routes pass in url_for and parsed parameters

Design Decisions:
    - One service per aggregate, composed by ServiceManager per request
"""
