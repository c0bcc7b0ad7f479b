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

from typing import List, Optional, TYPE_CHECKING

import svgwrite

from .scene_objs import BaseSceneObj, Light, Mirror, Prism, Target
from .segment import Segment

if TYPE_CHECKING:
    from .scene import Scene


BACKGROUND_COLOR = '#1f2937'
LIGHT_COLOR = 'yellow'
TARGET_COLOR = 'green'
TARGET_SOLVED_COLOR = 'gold'
PRISM_COLOR = 'cyan'
MIRROR_COLOR = 'silver'


class SVGRenderer:
    """
    SVG renderer for traced scenes.

    The SVG is organized into two Inkscape layers, bottom to top:
    - objects: Lights, targets, prisms and mirrors
    - rays: The traced segments

    Coordinate System:
        Scene coordinates are used as-is, in screen convention
        (positive y points down), like the canvas the scenes are built on.

    Attributes:
        width (int): Canvas width in pixels
        height (int): Canvas height in pixels
        dwg (svgwrite.Drawing): The SVG drawing object
        layer_objects (svgwrite.container.Group): Group for obstacle elements
        layer_rays (svgwrite.container.Group): Group for segment elements
    """

    def __init__(self, width=800, height=600, viewbox=None, stroke_width=2):
        """
        Initialize the SVG renderer.

        Args:
            width (int): Canvas width in pixels (default: 800)
            height (int): Canvas height in pixels (default: 600)
            viewbox (tuple or None): SVG viewBox as (min_x, min_y, width, height)
                                    If None, uses (0, 0, width, height)
            stroke_width (float): Line width of the segments
        """
        self.width = width
        self.height = height
        self.stroke_width = stroke_width
        self.viewbox = viewbox if viewbox is not None else (0, 0, width, height)

        # profile='full' and debug=False so the inkscape namespace attributes are accepted
        self.dwg = svgwrite.Drawing(size=(f'{width}px', f'{height}px'),
                                    profile='full', debug=False)
        self.dwg.viewbox(*self.viewbox)
        self.dwg['xmlns:inkscape'] = 'http://www.inkscape.org/namespaces/inkscape'

        self.dwg.add(self.dwg.rect(
            insert=(self.viewbox[0], self.viewbox[1]),
            size=(self.viewbox[2], self.viewbox[3]),
            fill=BACKGROUND_COLOR
        ))

        self.layer_objects = self.dwg.add(self.dwg.g(
            id='layer-objects',
            **{'inkscape:groupmode': 'layer', 'inkscape:label': 'Objects'}
        ))
        self.layer_rays = self.dwg.add(self.dwg.g(
            id='layer-rays',
            **{'inkscape:groupmode': 'layer', 'inkscape:label': 'Rays'}
        ))

    @staticmethod
    def _normalize_coord(value):
        """Map -0.0 and values within 1e-10 of zero to 0.0."""
        if value == 0.0 or abs(value) < 1e-10:
            return 0.0
        return value

    def draw_segment(self, segment: Segment, opacity=1.0):
        """
        Draw a traced segment in its wavelength color.

        Args:
            segment (Segment): The segment to draw
            opacity (float): Stroke opacity
        """
        line = self.dwg.line(
            start=(self._normalize_coord(segment.start.x), self._normalize_coord(segment.start.y)),
            end=(self._normalize_coord(segment.end.x), self._normalize_coord(segment.end.y)),
            stroke=segment.color,
            stroke_width=self.stroke_width,
            stroke_opacity=opacity,
            stroke_linecap='round'
        )
        line['data-wavelength-index'] = str(segment.wavelength_index)
        line['data-interaction'] = segment.interaction_type
        if segment.source_id is not None:
            line['data-source'] = segment.source_id
        self.layer_rays.add(line)
        return line

    def draw_obstacle(self, obj: BaseSceneObj, solved=False):
        """
        Draw an obstacle.

        Lights, targets and prisms are drawn as discs, mirrors as thick
        line segments.

        Args:
            obj: The obstacle
            solved (bool): Targets are drawn highlighted when True

        Returns:
            The SVG element, or None for unknown obstacle types
        """
        center = (obj.position.x, obj.position.y)
        if isinstance(obj, Mirror):
            seg = obj.get_segment()
            element = self.dwg.line(
                start=(seg.p1.x, seg.p1.y),
                end=(seg.p2.x, seg.p2.y),
                stroke=MIRROR_COLOR,
                stroke_width=max(obj.size / 8, 2)
            )
        elif isinstance(obj, Target):
            element = self.dwg.circle(
                center=center, r=obj.radius,
                fill=TARGET_SOLVED_COLOR if solved else TARGET_COLOR
            )
        elif isinstance(obj, Prism):
            element = self.dwg.circle(center=center, r=obj.radius, fill=PRISM_COLOR, fill_opacity=0.5)
        elif isinstance(obj, Light):
            element = self.dwg.circle(center=center, r=obj.radius, fill=LIGHT_COLOR)
        else:
            return None

        element['id'] = f'obj-{obj.id}'
        element['data-type'] = obj.type
        self.layer_objects.add(element)
        return element

    def draw_scene(self, scene: 'Scene', segments: Optional[List[Segment]] = None, solved=False):
        """
        Draw all obstacles of a scene and, optionally, its traced segments.

        Args:
            scene (Scene): The scene
            segments (list or None): Segments to draw on top of the obstacles
            solved (bool): Whether to highlight the targets
        """
        for obj in scene.objs:
            self.draw_obstacle(obj, solved=solved)
        for segment in segments or []:
            self.draw_segment(segment)

    def save(self, filename: str = None):
        """
        Save the SVG to a file.

        Args:
            filename (str): Output filename (default: 'output.svg')
        """
        if filename is None:
            filename = "output.svg"
        self.dwg.saveas(filename)

    def to_string(self):
        """
        Get the SVG as a string.

        Returns:
            str: SVG content
        """
        return self.dwg.tostring()
