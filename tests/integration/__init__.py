"""Integration Tests - Demo driver and module entry point."""
