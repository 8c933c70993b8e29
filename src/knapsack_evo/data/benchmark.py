"""
Built-in knapsack instances.

``p08`` is the 24-item benchmark the solver ships with, together with its
known global optimum. ``tiny`` is a three-item instance small enough to
brute force.
"""

from typing import Any, Dict


P08_ITEMS = [
    # weight, value
    (382745, 825594),
    (799601, 1677009),
    (909247, 1676628),
    (729069, 1523970),
    (467902, 943972),
    (44328, 97426),
    (34610, 69666),
    (698150, 1296457),
    (823460, 1679693),
    (903959, 1902996),
    (853665, 1844992),
    (551830, 1049289),
    (610856, 1252836),
    (670702, 1319836),
    (488960, 953277),
    (951111, 2067538),
    (323046, 675367),
    (446298, 853655),
    (931161, 1826027),
    (31385, 65731),
    (496951, 901489),
    (264724, 577243),
    (224916, 466257),
    (169684, 369261),
]

BENCHMARK_INSTANCES: Dict[str, Dict[str, Any]] = {
    "p08": {
        "name": "p08",
        "capacity": 6404180,
        "items": P08_ITEMS,
        "optimum": 13549094,
        "optimum_chromosome": "110111000110100100000111",
    },
    "tiny": {
        "name": "tiny",
        "capacity": 5,
        "items": [(2, 3), (3, 4), (4, 5)],
        "optimum": 7,
        "optimum_chromosome": "110",
    },
}

DEFAULT_INSTANCE = "p08"
