"""Office-days scheduler: balanced monthly weekday rosters.

Modules:
- config: load and validate configuration (YAML or JSON)
- domain: value types, SQLAlchemy models, repositories and history
- engine: combination catalog, selector and orchestration
- services: assignment constraints, scoring, editing and statistics
- io: JSON import and CSV/XLSX export
- cli: command-line interface entrypoints
"""

__all__ = [
    "config",
    "domain",
    "engine",
    "services",
    "io",
    "cli",
]
