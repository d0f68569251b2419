"""Domain primitives for file sorter."""

from .result import Result, Success, Failure, success, failure

__all__ = ['Result', 'Success', 'Failure', 'success', 'failure']
