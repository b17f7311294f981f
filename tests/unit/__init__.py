"""
Unit Tests - Testing Individual Components in Isolation.

Test Files:
    - test_trains.py: Train delegation and the unconfigured precondition
    - test_leads.py: Line formatting and emission
    - test_line_sinks.py: Console and in-memory sinks
    - test_variant_registry.py: Variant registration and creation
    - test_config_loader.py: Configuration loading/validation
"""
