"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Wire format is camelCase (leagueId, ageGroup, opposingTeamId); Python side is snake_case

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
