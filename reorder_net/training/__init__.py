#////////////////////////////////////////////////////////////////////////////////#
# File:         __init__.py                                                      #
# Date:         2025-03-05                                                       #
# Description:  Training package initialization for the reorder network.       #
#////////////////////////////////////////////////////////////////////////////////#

"""
Training loop for the reorder network.

This module contains:
- train_reorder_model.py: full-batch Adam training and no-grad evaluation
"""
