"""
Leads Package - The Implementation Family.

    - Lead: Formats and emits one line per managed train
    - NorthLead, SouthLead: Variants with their own identity
"""

from rail_bridge.leads.base import Lead
from rail_bridge.leads.variants import NorthLead, SouthLead

__all__ = ["Lead", "NorthLead", "SouthLead"]
