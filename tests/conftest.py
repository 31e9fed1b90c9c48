"""
Shared pytest fixtures for psych2cne tests.
"""

import copy
import json

import pytest


PSYCH_BF = {
    "animations": [
        {
            "anim": "idle",
            "name": "BF idle dance",
            "fps": 24,
            "loop": False,
            "offsets": [-5, 0],
            "indices": [],
        },
        {
            "anim": "singLEFT",
            "name": "BF NOTE LEFT",
            "fps": 30,
            "loop": False,
            "offsets": [12, -6],
            "indices": [0, 1, 2, 3, 7, 9, 10],
        },
        {
            "anim": "hey",
            "name": "BF HEY!!",
            "fps": 24,
            "loop": True,
            "offsets": [7.5, 4],
            "indices": [],
        },
    ],
    "no_antialiasing": False,
    "position": [0, 350],
    "camera_position": [0, 0],
    "sing_duration": 4,
    "flip_x": True,
    "scale": 1,
    "image": "characters/BOYFRIEND",
    "healthicon": "bf",
    "healthbar_colors": [49, 176, 209],
}

CNE_BF = """<!DOCTYPE codename-engine-character>
<!-- Converted using Psych2CNE hackx2.github.io/psych2cne -->
<character isPlayer="true" icon="bf" color="#31b0d1" sprite="BOYFRIEND" flipX="true" holdTime="4" y="350">
  <anim name="BF idle dance" anim="idle" loop="false" x="-5" y="0"/>
  <anim name="BF NOTE LEFT" anim="singLEFT" fps="30" loop="false" x="12" y="-6" indices="0..3,7,9,10"/>
  <anim name="BF HEY!!" anim="hey" loop="true" x="7.5" y="4"/>
</character>
"""


@pytest.fixture
def psych_bf():
    """Return a fresh copy of a Psych Engine boyfriend character."""
    return copy.deepcopy(PSYCH_BF)


@pytest.fixture
def cne_bf():
    """Return a Codename Engine boyfriend character document."""
    return CNE_BF


@pytest.fixture
def psych_bf_file(tmp_path, psych_bf):
    """Write the Psych character to a temporary .json file."""
    path = tmp_path / "bf.json"
    path.write_text(json.dumps(psych_bf), encoding="utf-8")
    return path


@pytest.fixture
def cne_bf_file(tmp_path):
    """Write the CNE character to a temporary .xml file."""
    path = tmp_path / "bf.xml"
    path.write_text(CNE_BF, encoding="utf-8")
    return path
