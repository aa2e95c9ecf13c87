"""Vessel type categorization for launched craft.

Assigns a vessel type either from the player's editor selection or by
matching the vessel name against ordered substring rules from config.
"""

__version__ = "0.1.0"
