from .reconcile import CheckerError, CheckerResult, check_pattern

__all__ = ["CheckerError", "CheckerResult", "check_pattern"]
