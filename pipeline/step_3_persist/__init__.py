"""
Step 3 Persist module for the Portfolio Backend.
Validates imported sections and writes them to the section store.
"""

from .persist_logic import save_section, save_to_portfolio

__all__ = [
    'save_section',
    'save_to_portfolio'
]
