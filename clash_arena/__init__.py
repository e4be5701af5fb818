"""
Clash Arena Results Tracker - Core Package

This package contains the core modules for:
- Match scoring and standings ranking (clash_arena.scoring)
- Lobby, team and match management (clash_arena.lobby)
- Snapshot persistence (clash_arena.persistence)
- Results export (clash_arena.export)
- Shared configuration and utilities
"""

from clash_arena.config import *
