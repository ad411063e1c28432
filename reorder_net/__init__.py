#////////////////////////////////////////////////////////////////////////////////#
# File:         __init__.py                                                      #
# Date:         2025-03-05                                                       #
# Description:  Package initialization for the inventory reorder classifier.    #
#////////////////////////////////////////////////////////////////////////////////#

"""
Inventory reorder classification package.

This package provides a synthetic sample generator and a small feed-forward
network that learns the reorder-point rule for inventory items.
"""

__version__ = "0.1.0"
