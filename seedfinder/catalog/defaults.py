"""
Embedded sample catalog used when the configured source is unavailable.
"""
from typing import Any

from ..models.seed import Seed


DEFAULT_RECORDS: list[dict[str, Any]] = [
    {
        "seed": "-4172144997902289642",
        "edition": "Java",
        "version": "1.21",
        "tags": ["Rare", "Scenic", "Speedrun"],
        "rarity": 88,
        "spawn": {"biomes": ["Plains", "Cherry Grove"], "x": 0, "z": 0},
        "features": {
            "village": [{"distance": 420, "x": 300, "z": -290}],
            "stronghold": [{"distance": 1250, "x": -1100, "z": 600}],
            "ancient_city": [],
            "ocean_monument": [],
            "trial_chambers": [{"distance": 2100, "x": 1900, "z": 880}],
            "mansion": [],
            "mushroom_island": [],
        },
        "description": "Cherry grove at spawn with a plains village a short walk east.",
    },
    {
        "seed": "8091867987493326313",
        "edition": "Java",
        "version": "1.20",
        "tags": ["Hardcore", "Challenge"],
        "rarity": 64,
        "spawn": {"biomes": ["Taiga", "Snowy Plains"], "x": -32, "z": 48},
        "features": {
            "village": [{"distance": 1100, "x": -900, "z": 630}],
            "stronghold": [{"distance": 2300, "x": 1500, "z": -1740}],
            "ancient_city": [{"distance": 1900, "x": -1200, "z": -1470}],
            "ocean_monument": [],
            "trial_chambers": [],
            "mansion": [{"distance": 5200, "x": 4100, "z": 3200}],
            "mushroom_island": [],
        },
        "description": "Cold start with a taiga village and an ancient city under the peaks.",
    },
    {
        "seed": "3227028068011494267",
        "edition": "Bedrock",
        "version": "1.21",
        "tags": ["Builder", "Scenic"],
        "rarity": 72,
        "spawn": {"biomes": ["Meadow", "Plains"], "x": 16, "z": -16},
        "features": {
            "village": [
                {"distance": 640, "x": 450, "z": 455},
                {"distance": 980, "x": -700, "z": 686},
            ],
            "stronghold": [{"distance": 1800, "x": -1300, "z": 1245}],
            "ancient_city": [],
            "ocean_monument": [{"distance": 2400, "x": 2000, "z": -1327}],
            "trial_chambers": [],
            "mansion": [],
            "mushroom_island": [],
        },
        "description": "Wide meadow plateau next to two villages, ideal for a base.",
    },
    {
        "seed": "1234567890",
        "edition": "Java",
        "version": "1.20",
        "tags": ["Explorer"],
        "rarity": 41,
        "spawn": {"biomes": ["Jungle", "Dark Forest"], "x": 0, "z": 0},
        "features": {
            "village": [],
            "stronghold": [{"distance": 2900, "x": 2050, "z": 2050}],
            "ancient_city": [],
            "ocean_monument": [{"distance": 1600, "x": -1500, "z": 555}],
            "trial_chambers": [],
            "mansion": [{"distance": 3400, "x": -3000, "z": -1600}],
            "mushroom_island": [{"distance": 4100, "x": 3800, "z": -1540}],
        },
        "description": "Jungle edge bordering a dark forest with a woodland mansion to the west.",
    },
    {
        "seed": "-1654510525",
        "edition": "Bedrock",
        "version": "1.20",
        "tags": ["Rare", "Speedrun"],
        "rarity": 95,
        "spawn": {"biomes": ["Plains"], "x": 8, "z": 8},
        "features": {
            "village": [{"distance": 180, "x": 120, "z": -134}],
            "stronghold": [{"distance": 900, "x": -640, "z": 633}],
            "ancient_city": [],
            "ocean_monument": [],
            "trial_chambers": [{"distance": 1500, "x": 1060, "z": 1060}],
            "mansion": [],
            "mushroom_island": [],
        },
        "description": "Village at spawn and a stronghold under a kilometre away.",
    },
]

DEFAULT_SEEDS: list[Seed] = [Seed.model_validate(record) for record in DEFAULT_RECORDS]
