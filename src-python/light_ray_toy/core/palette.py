"""
Copyright 2026 light-ray-toy authors and contributors

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

"""
The fixed wavelength palette.

Each entry pairs a display color with the refractive index a prism has for
that color. The indices increase from red to violet, which is what makes a
prism fan white light out into a spectrum.
"""

from typing import NamedTuple, Tuple


class Wavelength(NamedTuple):
    """One entry of the spectrum palette."""
    name: str
    color: str
    refractive_index: float
    nanometers: float


PALETTE: Tuple[Wavelength, ...] = (
    Wavelength('red', 'red', 1.331, 650.0),
    Wavelength('orange', 'orange', 1.337, 600.0),
    Wavelength('yellow', 'yellow', 1.343, 580.0),
    Wavelength('green', 'green', 1.352, 532.0),
    Wavelength('blue', 'blue', 1.369, 470.0),
    Wavelength('indigo', 'indigo', 1.381, 440.0),
    Wavelength('violet', 'violet', 1.393, 400.0),
)

COLORS: Tuple[str, ...] = tuple(w.color for w in PALETTE)
REFRACTIVE_INDICES: Tuple[float, ...] = tuple(w.refractive_index for w in PALETTE)


def get_wavelength(index: int) -> Wavelength:
    """
    Look up a palette entry.

    Args:
        index: Position in the palette (0 = red, 6 = violet).

    Returns:
        The Wavelength entry.

    Raises:
        IndexError: If the index is outside the palette. Negative indices
            are rejected rather than wrapping around.
    """
    if not 0 <= index < len(PALETTE):
        raise IndexError(
            f"Wavelength index {index} out of range (palette has {len(PALETTE)} entries)"
        )
    return PALETTE[index]


def color_for(index: int) -> str:
    """Display color of the given wavelength index."""
    return get_wavelength(index).color


def refractive_index_for(index: int) -> float:
    """Prism refractive index for the given wavelength index."""
    return get_wavelength(index).refractive_index
