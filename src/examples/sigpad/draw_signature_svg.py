"""Draw a synthetic signature with both stroke modes and print the SVG output."""

import math

from sigpad.common import StrokeMode
from sigpad.options import SignaturePadOptions
from sigpad.pad import SignaturePad
from sigpad.render import PolylineRenderer

PAD_WIDTH = 300
PAD_HEIGHT = 100


def wave_stroke(num_samples: int = 40):
    """Samples of a sine wave across the pad, like pointer move events."""
    for i in range(num_samples):
        x = 10 + i * (PAD_WIDTH - 20) / (num_samples - 1)
        y = PAD_HEIGHT / 2 + 30 * math.sin(i / 4)
        yield x, y


def draw(mode: StrokeMode) -> str:
    renderer = PolylineRenderer()
    pad = SignaturePad(SignaturePadOptions(width=PAD_WIDTH, height=PAD_HEIGHT, mode=mode), renderer)

    samples = list(wave_stroke())
    pad.begin_stroke(*samples[0])
    for x, y in samples[1:]:
        pad.move_to(x, y)
    svg = pad.end_stroke()

    print(f"{mode.name}: {len(renderer.strokes[0])} polyline points, extent {renderer.extent()}")
    return svg


def main():
    """Main"""
    for mode in StrokeMode:
        print(draw(mode))
        print()


if __name__ == "__main__":
    main()
