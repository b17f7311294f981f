"""
Test Suite for Rail Bridge.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: End-to-end tests of the demo driver
    - fixtures/: Sample configuration files

Running Tests:
    pytest tests/                      # All tests
    pytest tests/unit/                 # Unit tests only
    pytest --cov=src/rail_bridge       # With coverage
"""
