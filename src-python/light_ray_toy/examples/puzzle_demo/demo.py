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
===============================================================================
PUZZLE DEMO
===============================================================================
Builds the "Puzzle 1" layout (a light at (100, 300) and a target at
(600, 100)), solves it with two mirrors, and writes the result as SVG, CSV
and JSON. A second scene sends the same light through a prism and prints
the exit angle of every color.

Run with:
    python -m light_ray_toy.examples.puzzle_demo.demo [output_dir]
===============================================================================
"""

import math
import sys
from pathlib import Path

from light_ray_toy.core.scene import Scene
from light_ray_toy.core.scene_objs import Light, Mirror, Prism, Target
from light_ray_toy.core.simulator import Simulator
from light_ray_toy.core.svg_renderer import SVGRenderer
from light_ray_toy.analysis import (
    analyze_dispersion,
    save_segments_csv,
    save_segments_json,
    termination_counts,
)


PUZZLE_ONE = {
    'light1': {'type': 'light', 'position': {'x': 100, 'y': 300}, 'rotation': 0, 'size': 20},
    'target1': {'type': 'target', 'position': {'x': 600, 'y': 100}, 'rotation': 0, 'size': 30},
}


def build_puzzle_scene() -> Scene:
    """Puzzle 1 with the two mirrors that solve it."""
    scene = Scene.from_dict(PUZZLE_ONE)
    scene.name = "Puzzle 1"
    # Up at x=750, then left along y=100; the 1000-unit budget runs out at the target
    scene.add_object(Mirror('mirror_up', position=(750, 300), rotation=3 * math.pi / 4, size=40))
    scene.add_object(Mirror('mirror_left', position=(750, 100), rotation=math.pi / 4, size=40))
    return scene


def build_prism_scene() -> Scene:
    """A single light shining slightly above the center of a prism."""
    scene = Scene()
    scene.name = "Prism dispersion"
    scene.add_object(Light('light1', position=(100, 300)))
    scene.add_object(Prism('prism1', position=(300, 320), size=80))
    scene.add_object(Target('target1', position=(1000, 420)))
    return scene


def main(output_dir: str = "puzzle_demo_output") -> int:
    output = Path(output_dir)

    print("=" * 60)
    print("PUZZLE 1")
    print("=" * 60)
    scene = build_puzzle_scene()
    simulator = Simulator(scene, verbose=1)
    segments = simulator.run()
    print(f"  Segments: {len(segments)}")
    print(f"  Terminations: {termination_counts(simulator.trace_results)}")
    print(f"  Solved: {simulator.solved}")
    if scene.warning:
        print(f"  Warning: {scene.warning}")

    renderer = SVGRenderer(width=1000, height=600)
    renderer.draw_scene(scene, segments, solved=simulator.solved)
    output.mkdir(parents=True, exist_ok=True)
    renderer.save(str(output / "puzzle1.svg"))
    print(f"  Saved: {save_segments_csv(segments, output, 'puzzle1.csv')}")
    print(f"  Saved: {save_segments_json(segments, output, 'puzzle1.json', simulator.solved, scene.name)}")

    print()
    print("=" * 60)
    print("PRISM DISPERSION")
    print("=" * 60)
    prism_scene = build_prism_scene()
    prism_sim = Simulator(prism_scene)
    prism_segments = prism_sim.run()
    for source_id, summary in analyze_dispersion(prism_sim.trace_results).items():
        print(f"  Light '{source_id}': spread {summary.spread_deg:.3f} deg")
        for color, angle in zip(summary.colors(), summary.exit_angles_deg):
            print(f"    {color:>7}: {angle:8.3f} deg")

    renderer = SVGRenderer(width=1000, height=600)
    renderer.draw_scene(prism_scene, prism_segments, solved=prism_sim.solved)
    renderer.save(str(output / "prism.svg"))
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
