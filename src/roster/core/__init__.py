"""
Roster core - entity model, persistence, logging, errors and map diffing.

Modules
-------
mapdiff       difference() / snapshot() for audit logging
errors        RosterError hierarchy
logging       structlog configuration
orm           SQLAlchemy declarative tables and session helpers
repository    Generic CrudRepository
repositories  CoachRepository, TeamRepository, PlayerRepository
"""
