"""Layered images in the Space Image Format."""

from __future__ import annotations

from collections.abc import Iterable

_TRANSPARENT = 2


class SpaceImage:
    """An image made of stacked layers of width times height pixels."""

    def __init__(self, width: int, height: int, data: Iterable[int]) -> None:
        size = width * height
        if size <= 0:
            raise ValueError("image dimensions must be positive")
        self.width = width
        self.height = height
        values = list(data)
        self.layers: list[list[int]] = [
            values[start:start + size] for start in range(0, len(values), size)
        ]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SpaceImage):
            return NotImplemented
        return (self.layers, self.width, self.height) == (
            other.layers, other.width, other.height)

    def __repr__(self) -> str:
        return (f"SpaceImage(width={self.width}, height={self.height}, "
                f"layers={len(self.layers)})")

    def final_image(self) -> list[int]:
        """Composite the layers: the first non-transparent pixel wins."""
        image = [_TRANSPARENT] * (self.width * self.height)
        for layer in self.layers:
            for index, value in enumerate(layer):
                if image[index] == _TRANSPARENT:
                    image[index] = value
        return image

    def single_layer(self, layer: int) -> list[int]:
        """A copy of the pixels of one layer."""
        return list(self.layers[layer])

    @classmethod
    def from_digital_sending_network(cls, width: int, height: int,
                                     stream: str) -> SpaceImage:
        """Build an image from a string of digits."""
        return cls(width, height, (int(c) for c in stream.strip()))

    def checksum(self) -> int:
        """Ones times twos on the layer with the fewest zeros."""
        if not self.layers:
            raise ValueError("image has no layers")
        layer = min(self.layers, key=lambda pixels: pixels.count(0))
        return layer.count(1) * layer.count(2)

    def render(self) -> str:
        """The final image as text, '1' for white pixels and blanks elsewhere."""
        image = self.final_image()
        rows = (
            "".join("1" if pixel == 1 else " "
                    for pixel in image[y * self.width:(y + 1) * self.width])
            for y in range(self.height)
        )
        return "".join(row + "\n" for row in rows)