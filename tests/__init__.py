"""
Test Package

Contains unit tests for all modules.
Run with: pytest tests/ -v

Test files follow the pattern:
    test_<module_name>.py

Example:
    tests/test_notes.py       - Tests for src/theory/notes.py
    tests/test_fretboard.py   - Tests for src/theory/fretboard.py
    tests/test_settings.py    - Tests for src/config/settings.py
"""
