"""Application services for wsquery."""

from .dispatch_service import DispatchResult, Dispatcher

__all__ = ["DispatchResult", "Dispatcher"]
