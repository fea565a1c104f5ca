"""
Translate instance group settings into Spotinst Elastigroup and Ocean payloads.
"""

__version__ = "0.1.0"
