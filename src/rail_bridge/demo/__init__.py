"""
Demo Package - Example Entry Point.

    - run_demo: Runs the configured lead/train pairings
"""

from rail_bridge.demo.driver import run_demo

__all__ = ["run_demo"]
