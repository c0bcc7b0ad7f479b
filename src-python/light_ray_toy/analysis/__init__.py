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

from .saving import (
    segments_to_dicts,
    save_segments_csv,
    save_segments_json,
)
from .dispersion import (
    DispersionSummary,
    analyze_dispersion,
    exit_angle_deg,
    path_lengths,
    segments_crossing,
    termination_counts,
)

__all__ = [
    'segments_to_dicts',
    'save_segments_csv',
    'save_segments_json',
    'DispersionSummary',
    'analyze_dispersion',
    'exit_angle_deg',
    'path_lengths',
    'segments_crossing',
    'termination_counts',
]
