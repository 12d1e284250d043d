"""Database Package — declarative Base and entity id factory.

Invariants:
    - Single async engine per process (initialized via infrastructure.database.init_db)
    - All sessions are async (AsyncSession)
"""
