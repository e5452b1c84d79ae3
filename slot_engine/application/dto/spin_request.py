"""Spin request DTO"""
from dataclasses import dataclass


@dataclass
class SpinRequest:
    """Request DTO for a spin"""

    session_id: str
