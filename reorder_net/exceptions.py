#////////////////////////////////////////////////////////////////////////////////#
# File:         exceptions.py                                                    #
# Date:         2025-03-06                                                       #
# Description:  Error types raised by the generator and classifier engine.      #
#////////////////////////////////////////////////////////////////////////////////#

"""
Error taxonomy for the reorder classifier.

All of these are caller errors. They are raised immediately and never retried.
"""


class ReorderNetError(Exception):
    """Base class for all reorder classifier errors."""


class InvalidArgument(ReorderNetError, ValueError):
    """A count passed to the sample generator is negative or not an integer."""


class PreconditionViolation(ReorderNetError, RuntimeError):
    """An engine operation was called in the wrong state."""


class EmptyBatch(ReorderNetError, ValueError):
    """Training was requested on a batch with zero examples."""


class TrainingCancelled(ReorderNetError, RuntimeError):
    """Training was aborted through a cancellation token."""
