"""
Expose common test utilities so tests can import directly:
    from tests import make_project_input, make_snapshot
"""

from .utils import make_plain_loan_input, make_project_input, make_snapshot

__all__ = ["make_project_input", "make_plain_loan_input", "make_snapshot"]
