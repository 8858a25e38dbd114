"""Haptic output planes and body, bHaptics device layouts and payload decoding."""

__version__ = "0.1.0"