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
Export of traced segments to CSV and JSON.
"""

import csv
import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..core.segment import Segment


def segments_to_dicts(segments: List[Segment], precision: Optional[int] = None) -> List[Dict[str, Any]]:
    """
    Flatten segments into one row dict each.

    Args:
        segments: Segments to convert
        precision: Round coordinates and lengths to this many decimals (None = no rounding)

    Returns:
        List of dicts with index, endpoints, length, color and provenance
    """
    def fmt(value: float) -> float:
        return round(value, precision) if precision is not None else value

    rows = []
    for i, seg in enumerate(segments):
        rows.append({
            'segment_index': i,
            'start_x': fmt(seg.start.x),
            'start_y': fmt(seg.start.y),
            'end_x': fmt(seg.end.x),
            'end_y': fmt(seg.end.y),
            'length': fmt(seg.length),
            'color': seg.color,
            'wavelength_index': seg.wavelength_index,
            'source_id': seg.source_id if seg.source_id is not None else '',
            'interaction_type': seg.interaction_type,
        })
    return rows


def save_segments_csv(
    segments: List[Segment],
    output_path: Union[str, Path],
    filename: str = "segments.csv",
    precision_coords: int = 4,
) -> Path:
    """
    Export segments to a CSV file.

    Args:
        segments: Segments to export.
        output_path: Directory where the CSV file will be saved.
            Can be a string or Path object.
        filename: Name of the output CSV file (default: "segments.csv").
        precision_coords: Decimal places for coordinate values (default: 4).

    Returns:
        Path: Full path to the created CSV file.

    Raises:
        OSError: If the output directory cannot be created or file cannot be written.

    Example:
        >>> from light_ray_toy.analysis import save_segments_csv
        >>> output_file = save_segments_csv(simulator.run(), "./output")
    """
    output_dir = Path(output_path)
    output_dir.mkdir(parents=True, exist_ok=True)
    csv_file = output_dir / filename

    rows = segments_to_dicts(segments)
    coord_fmt = f"{{:.{precision_coords}f}}"
    fieldnames = [
        'segment_index', 'start_x', 'start_y', 'end_x', 'end_y', 'length',
        'color', 'wavelength_index', 'source_id', 'interaction_type',
    ]

    with open(csv_file, 'w', newline='', encoding='utf-8') as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for row in rows:
            for key in ('start_x', 'start_y', 'end_x', 'end_y', 'length'):
                row[key] = coord_fmt.format(row[key])
            writer.writerow(row)

    return csv_file


def save_segments_json(
    segments: List[Segment],
    output_path: Union[str, Path],
    filename: str = "segments.json",
    solved: Optional[bool] = None,
    scene_name: Optional[str] = None,
) -> Path:
    """
    Export segments (and optionally the solved flag) to a JSON file.

    The file holds {"scene": ..., "solved": ..., "segments": [...]} where
    each segment is `Segment.to_dict()`.

    Returns:
        Path: Full path to the created JSON file.
    """
    output_dir = Path(output_path)
    output_dir.mkdir(parents=True, exist_ok=True)
    json_file = output_dir / filename

    payload = {
        'scene': scene_name,
        'solved': solved,
        'segment_count': len(segments),
        'segments': [seg.to_dict() for seg in segments],
    }
    with open(json_file, 'w', encoding='utf-8') as f:
        json.dump(payload, f, indent=2)

    return json_file
