"""Exceptions raised by the signature pad package."""

from __future__ import annotations


class SignaturePadError(Exception):
    """Base exception for signature pad errors."""


class GeneratorStateError(SignaturePadError):
    """Raised when a spline generator is fed outside of its start/stop lifecycle."""


class StrokeStateError(SignaturePadError):
    """Raised when a stroke operation is called without a stroke in progress."""


class InvalidSvgError(SignaturePadError):
    """Raised when SVG input cannot be decoded or contains unsupported path commands."""


class InvalidOptionsError(SignaturePadError):
    """Raised when signature pad options are out of range."""
