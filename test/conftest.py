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

from pathlib import Path

import yaml

from segment_intersection import IntersectionKind, Segment3D, Vector3D

DATA_DIR = Path(__file__).parent / 'data'


def load_intersection_cases(yaml_path):
    """
    Load segment pair scenarios from a YAML file.

    Parameters
    ----------
    yaml_path : str or Path
        Path to the YAML scenario file.

    Returns
    -------
    list
        One dict per case with 'name', 'first', 'second' (Segment3D),
        'kind' (IntersectionKind) and optional 'point' / 'interval'.

    Raises
    ------
    FileNotFoundError
        If the YAML file does not exist.
    ValueError
        If the YAML structure is invalid.

    """
    yaml_path = Path(yaml_path)

    if not yaml_path.exists():
        raise FileNotFoundError(f"Case file not found: {yaml_path}")

    with open(yaml_path, 'r') as f:
        config = yaml.safe_load(f)

    if not config or not config.get('cases'):
        raise ValueError("No cases defined in case file")

    cases = []
    for i, raw in enumerate(config['cases']):
        for key in ('name', 'first', 'second', 'kind'):
            if key not in raw:
                raise ValueError(f"Case {i} missing '{key}'")

        case = {
            'name': raw['name'],
            'first': Segment3D(raw['first']['start'], raw['first']['end']),
            'second': Segment3D(raw['second']['start'], raw['second']['end']),
            'kind': IntersectionKind(raw['kind']),
            'point': None,
            'interval': None,
        }
        if 'point' in raw:
            case['point'] = Vector3D.of(raw['point'])
        if 'interval' in raw:
            start, end = raw['interval']
            case['interval'] = (Vector3D.of(start), Vector3D.of(end))
        cases.append(case)

    return cases


def pytest_generate_tests(metafunc):
    if 'case' in metafunc.fixturenames:
        cases = load_intersection_cases(DATA_DIR / 'intersection_cases.yaml')
        metafunc.parametrize('case', cases, ids=[case['name'] for case in cases])
