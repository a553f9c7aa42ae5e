"""Applicant Checks - address and identity validation steps.

Each check is a stateless event handler that takes a small JSON-like record
and answers with an approval flag and a message.
"""

__version__ = "0.1.0"
