# Copyright 2025 Berkan Tali
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""3D vector algebra and segment-segment intersection."""

import logging

from .tolerance import EPSILON
from .vector3d import Vector3D, cross_product, dot_product
from .segment3d import Segment3D
from .intersection import (
    IntersectionKind,
    IntersectionResult,
    IntersectionError,
    IdenticalSegmentsError,
    SameLineNoOverlapError,
    CollinearOverlapError,
    ParallelSegmentsError,
    SkewSegmentsError,
    intersect,
    intersect_or_raise,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = '0.1.0'

__all__ = [
    'EPSILON',
    'Vector3D', 'cross_product', 'dot_product',
    'Segment3D',
    'IntersectionKind', 'IntersectionResult',
    'IntersectionError', 'IdenticalSegmentsError', 'SameLineNoOverlapError',
    'CollinearOverlapError', 'ParallelSegmentsError', 'SkewSegmentsError',
    'intersect', 'intersect_or_raise',
    '__version__',
]
