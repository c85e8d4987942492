"""RGBA colour with components in [0, 1] and packed 0xRRGGBBAA helpers."""

from __future__ import annotations

from dataclasses import dataclass

_MASK32 = 0xFFFFFFFF


def pack_hex(red: int, green: int, blue: int, alpha: int) -> int:
    """Pack byte channels into a 32-bit 0xRRGGBBAA value."""
    return ((red << 24) + (green << 16) + (blue << 8) + alpha) & _MASK32


@dataclass(slots=True)
class Color:
    """RGBA colour with float channels; all zero by default."""

    red: float = 0.0
    green: float = 0.0
    blue: float = 0.0
    alpha: float = 0.0

    @classmethod
    def from_hex(cls, value: int) -> Color:
        """Colour from a 32-bit 0xRRGGBBAA value."""
        return cls(
            ((value >> 24) & 0xFF) / 255.0,
            ((value >> 16) & 0xFF) / 255.0,
            ((value >> 8) & 0xFF) / 255.0,
            (value & 0xFF) / 255.0,
        )

    @classmethod
    def from_bytes(cls, red: int, green: int, blue: int, alpha: int) -> Color:
        """Colour from byte channels in [0, 255]."""
        channels = (red, green, blue, alpha)
        if any(not 0 <= channel <= 0xFF for channel in channels):
            raise ValueError("byte channels must lie in [0, 255]")
        return cls(*(channel / 255.0 for channel in channels))

    def to_hex(self) -> int:
        """Packed 0xRRGGBBAA value, each channel truncated after scaling by 255."""
        return pack_hex(
            int(self.red * 255),
            int(self.green * 255),
            int(self.blue * 255),
            int(self.alpha * 255),
        )