"""storyspoiler: end-to-end API tests for the Story Spoiler service.

Logs in with a fixed test account, then walks a fixed, ordered sequence of
create / edit / list / delete calls (plus negative probes), sharing the
created story id between steps and asserting status codes and messages.

Usage:
    python -m storyspoiler list                   # Show scenarios
    python -m storyspoiler run                    # Run all seven in order
    python -m pytest --live tests/                # Same sequence under pytest
"""
