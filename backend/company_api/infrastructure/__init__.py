"""Infrastructure Layer — database sessions, repositories, and logging setup.

Invariants:
    - SQLAlchemy failures are mapped to DatabaseError before leaving this layer

Design Decisions:
    - Repositories implement the Protocols in core/repository_protocols.py
"""
