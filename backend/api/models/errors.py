"""
Error response models.

Every failure body is a single ``message`` string; the status code carries
the error kind.
"""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Standard error (and plain acknowledgement) response format."""

    message: str = ""
