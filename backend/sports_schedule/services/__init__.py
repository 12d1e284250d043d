"""Services Layer — async IO around the pure core.

Invariants:
    - Services receive an AsyncSession; they never create engines
    - Multi-record mutations go through IntegrityEngine only
"""
