"""
Integration tests for Club League.

These tests drive whole evenings of play through the reducer and the HTTP
API: players join, matches are queued, started and finished, bets are placed
and settled, and the resulting state is saved and restored.

Test files:
- test_main.py: application wiring and health check
- test_happy_path.py: end-to-end scenarios
"""

# Mark this package for pytest discovery
__all__ = []
