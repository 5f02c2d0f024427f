"""Standard drag tables.

Each table maps Mach number to the drag coefficient of a reference projectile:

- TableG1: flat-base bullet (Ingalls/Mayevski)
- TableG7: long boat-tail bullet (VLD)
- TableG8: flat-base bullet with long ogive

Mach values are strictly increasing within every table.
"""

from typing_extensions import List, TypedDict


class DragTablePointDictType(TypedDict):
    Mach: float
    CD: float


TableG1: List[DragTablePointDictType] = [
    {'Mach': 0.00, 'CD': 0.2629},
    {'Mach': 0.05, 'CD': 0.2558},
    {'Mach': 0.10, 'CD': 0.2487},
    {'Mach': 0.15, 'CD': 0.2413},
    {'Mach': 0.20, 'CD': 0.2344},
    {'Mach': 0.25, 'CD': 0.2278},
    {'Mach': 0.30, 'CD': 0.2214},
    {'Mach': 0.35, 'CD': 0.2155},
    {'Mach': 0.40, 'CD': 0.2104},
    {'Mach': 0.45, 'CD': 0.2061},
    {'Mach': 0.50, 'CD': 0.2032},
    {'Mach': 0.55, 'CD': 0.2020},
    {'Mach': 0.60, 'CD': 0.2034},
    {'Mach': 0.65, 'CD': 0.2165},
    {'Mach': 0.70, 'CD': 0.2230},
    {'Mach': 0.75, 'CD': 0.2313},
    {'Mach': 0.80, 'CD': 0.2417},
    {'Mach': 0.85, 'CD': 0.2546},
    {'Mach': 0.90, 'CD': 0.2706},
    {'Mach': 0.925, 'CD': 0.2838},
    {'Mach': 0.95, 'CD': 0.3017},
    {'Mach': 0.975, 'CD': 0.3237},
    {'Mach': 1.00, 'CD': 0.3537},
    {'Mach': 1.025, 'CD': 0.3860},
    {'Mach': 1.05, 'CD': 0.4041},
    {'Mach': 1.075, 'CD': 0.4147},
    {'Mach': 1.10, 'CD': 0.4209},
    {'Mach': 1.125, 'CD': 0.4248},
    {'Mach': 1.15, 'CD': 0.4270},
    {'Mach': 1.175, 'CD': 0.4280},
    {'Mach': 1.20, 'CD': 0.4280},
    {'Mach': 1.25, 'CD': 0.4263},
    {'Mach': 1.30, 'CD': 0.4230},
    {'Mach': 1.35, 'CD': 0.4183},
    {'Mach': 1.40, 'CD': 0.4127},
    {'Mach': 1.45, 'CD': 0.4068},
    {'Mach': 1.50, 'CD': 0.4008},
    {'Mach': 1.55, 'CD': 0.3947},
    {'Mach': 1.60, 'CD': 0.3887},
    {'Mach': 1.65, 'CD': 0.3828},
    {'Mach': 1.70, 'CD': 0.3770},
    {'Mach': 1.75, 'CD': 0.3715},
    {'Mach': 1.80, 'CD': 0.3663},
    {'Mach': 1.85, 'CD': 0.3612},
    {'Mach': 1.90, 'CD': 0.3564},
    {'Mach': 1.95, 'CD': 0.3518},
    {'Mach': 2.00, 'CD': 0.3474},
    {'Mach': 2.05, 'CD': 0.3432},
    {'Mach': 2.10, 'CD': 0.3392},
    {'Mach': 2.15, 'CD': 0.3354},
    {'Mach': 2.20, 'CD': 0.3318},
    {'Mach': 2.25, 'CD': 0.3284},
    {'Mach': 2.30, 'CD': 0.3251},
    {'Mach': 2.35, 'CD': 0.3219},
    {'Mach': 2.40, 'CD': 0.3188},
    {'Mach': 2.45, 'CD': 0.3159},
    {'Mach': 2.50, 'CD': 0.3131},
    {'Mach': 2.60, 'CD': 0.3078},
    {'Mach': 2.70, 'CD': 0.3029},
    {'Mach': 2.80, 'CD': 0.2984},
    {'Mach': 2.90, 'CD': 0.2943},
    {'Mach': 3.00, 'CD': 0.2906},
    {'Mach': 3.10, 'CD': 0.2872},
    {'Mach': 3.20, 'CD': 0.2842},
    {'Mach': 3.30, 'CD': 0.2814},
    {'Mach': 3.40, 'CD': 0.2788},
    {'Mach': 3.50, 'CD': 0.2764},
    {'Mach': 3.60, 'CD': 0.2742},
    {'Mach': 3.70, 'CD': 0.2721},
    {'Mach': 3.80, 'CD': 0.2702},
    {'Mach': 3.90, 'CD': 0.2684},
    {'Mach': 4.00, 'CD': 0.2668},
    {'Mach': 4.20, 'CD': 0.2638},
    {'Mach': 4.40, 'CD': 0.2614},
    {'Mach': 4.60, 'CD': 0.2594},
    {'Mach': 4.80, 'CD': 0.2577},
    {'Mach': 5.00, 'CD': 0.2563},
]

TableG7: List[DragTablePointDictType] = [
    {'Mach': 0.00, 'CD': 0.1198},
    {'Mach': 0.05, 'CD': 0.1197},
    {'Mach': 0.10, 'CD': 0.1196},
    {'Mach': 0.15, 'CD': 0.1194},
    {'Mach': 0.20, 'CD': 0.1193},
    {'Mach': 0.25, 'CD': 0.1194},
    {'Mach': 0.30, 'CD': 0.1194},
    {'Mach': 0.35, 'CD': 0.1194},
    {'Mach': 0.40, 'CD': 0.1193},
    {'Mach': 0.45, 'CD': 0.1193},
    {'Mach': 0.50, 'CD': 0.1194},
    {'Mach': 0.55, 'CD': 0.1193},
    {'Mach': 0.60, 'CD': 0.1194},
    {'Mach': 0.65, 'CD': 0.1197},
    {'Mach': 0.70, 'CD': 0.1202},
    {'Mach': 0.725, 'CD': 0.1207},
    {'Mach': 0.75, 'CD': 0.1215},
    {'Mach': 0.775, 'CD': 0.1226},
    {'Mach': 0.80, 'CD': 0.1242},
    {'Mach': 0.825, 'CD': 0.1266},
    {'Mach': 0.85, 'CD': 0.1306},
    {'Mach': 0.875, 'CD': 0.1368},
    {'Mach': 0.90, 'CD': 0.1464},
    {'Mach': 0.925, 'CD': 0.1660},
    {'Mach': 0.95, 'CD': 0.2054},
    {'Mach': 0.975, 'CD': 0.2993},
    {'Mach': 1.00, 'CD': 0.3803},
    {'Mach': 1.025, 'CD': 0.4015},
    {'Mach': 1.05, 'CD': 0.4043},
    {'Mach': 1.075, 'CD': 0.4034},
    {'Mach': 1.10, 'CD': 0.4014},
    {'Mach': 1.125, 'CD': 0.3987},
    {'Mach': 1.15, 'CD': 0.3955},
    {'Mach': 1.20, 'CD': 0.3884},
    {'Mach': 1.25, 'CD': 0.3810},
    {'Mach': 1.30, 'CD': 0.3732},
    {'Mach': 1.35, 'CD': 0.3657},
    {'Mach': 1.40, 'CD': 0.3580},
    {'Mach': 1.45, 'CD': 0.3510},
    {'Mach': 1.50, 'CD': 0.3440},
    {'Mach': 1.55, 'CD': 0.3376},
    {'Mach': 1.60, 'CD': 0.3315},
    {'Mach': 1.65, 'CD': 0.3260},
    {'Mach': 1.70, 'CD': 0.3209},
    {'Mach': 1.75, 'CD': 0.3160},
    {'Mach': 1.80, 'CD': 0.3117},
    {'Mach': 1.85, 'CD': 0.3078},
    {'Mach': 1.90, 'CD': 0.3042},
    {'Mach': 1.95, 'CD': 0.3010},
    {'Mach': 2.00, 'CD': 0.2980},
    {'Mach': 2.05, 'CD': 0.2951},
    {'Mach': 2.10, 'CD': 0.2922},
    {'Mach': 2.15, 'CD': 0.2892},
    {'Mach': 2.20, 'CD': 0.2864},
    {'Mach': 2.25, 'CD': 0.2835},
    {'Mach': 2.30, 'CD': 0.2807},
    {'Mach': 2.35, 'CD': 0.2779},
    {'Mach': 2.40, 'CD': 0.2752},
    {'Mach': 2.45, 'CD': 0.2725},
    {'Mach': 2.50, 'CD': 0.2697},
    {'Mach': 2.55, 'CD': 0.2670},
    {'Mach': 2.60, 'CD': 0.2643},
    {'Mach': 2.65, 'CD': 0.2615},
    {'Mach': 2.70, 'CD': 0.2588},
    {'Mach': 2.75, 'CD': 0.2561},
    {'Mach': 2.80, 'CD': 0.2533},
    {'Mach': 2.85, 'CD': 0.2506},
    {'Mach': 2.90, 'CD': 0.2479},
    {'Mach': 2.95, 'CD': 0.2451},
    {'Mach': 3.00, 'CD': 0.2424},
    {'Mach': 3.10, 'CD': 0.2368},
    {'Mach': 3.20, 'CD': 0.2313},
    {'Mach': 3.30, 'CD': 0.2258},
    {'Mach': 3.40, 'CD': 0.2205},
    {'Mach': 3.50, 'CD': 0.2154},
    {'Mach': 3.60, 'CD': 0.2106},
    {'Mach': 3.70, 'CD': 0.2060},
    {'Mach': 3.80, 'CD': 0.2017},
    {'Mach': 3.90, 'CD': 0.1975},
    {'Mach': 4.00, 'CD': 0.1935},
    {'Mach': 4.20, 'CD': 0.1861},
    {'Mach': 4.40, 'CD': 0.1793},
    {'Mach': 4.60, 'CD': 0.1730},
    {'Mach': 4.80, 'CD': 0.1672},
    {'Mach': 5.00, 'CD': 0.1618},
]

TableG8: List[DragTablePointDictType] = [
    {'Mach': 0.00, 'CD': 0.2105},
    {'Mach': 0.05, 'CD': 0.2105},
    {'Mach': 0.10, 'CD': 0.2104},
    {'Mach': 0.15, 'CD': 0.2104},
    {'Mach': 0.20, 'CD': 0.2103},
    {'Mach': 0.25, 'CD': 0.2103},
    {'Mach': 0.30, 'CD': 0.2103},
    {'Mach': 0.35, 'CD': 0.2103},
    {'Mach': 0.40, 'CD': 0.2104},
    {'Mach': 0.45, 'CD': 0.2104},
    {'Mach': 0.50, 'CD': 0.2105},
    {'Mach': 0.55, 'CD': 0.2106},
    {'Mach': 0.60, 'CD': 0.2109},
    {'Mach': 0.65, 'CD': 0.2113},
    {'Mach': 0.70, 'CD': 0.2119},
    {'Mach': 0.75, 'CD': 0.2127},
    {'Mach': 0.80, 'CD': 0.2138},
    {'Mach': 0.825, 'CD': 0.2143},
    {'Mach': 0.85, 'CD': 0.2154},
    {'Mach': 0.875, 'CD': 0.2173},
    {'Mach': 0.90, 'CD': 0.2210},
    {'Mach': 0.925, 'CD': 0.2276},
    {'Mach': 0.95, 'CD': 0.2388},
    {'Mach': 0.975, 'CD': 0.2614},
    {'Mach': 1.00, 'CD': 0.3104},
    {'Mach': 1.025, 'CD': 0.3305},
    {'Mach': 1.05, 'CD': 0.3412},
    {'Mach': 1.075, 'CD': 0.3459},
    {'Mach': 1.10, 'CD': 0.3471},
    {'Mach': 1.125, 'CD': 0.3466},
    {'Mach': 1.15, 'CD': 0.3456},
    {'Mach': 1.20, 'CD': 0.3426},
    {'Mach': 1.25, 'CD': 0.3383},
    {'Mach': 1.30, 'CD': 0.3336},
    {'Mach': 1.35, 'CD': 0.3286},
    {'Mach': 1.40, 'CD': 0.3237},
    {'Mach': 1.45, 'CD': 0.3190},
    {'Mach': 1.50, 'CD': 0.3145},
    {'Mach': 1.55, 'CD': 0.3101},
    {'Mach': 1.60, 'CD': 0.3059},
    {'Mach': 1.65, 'CD': 0.3019},
    {'Mach': 1.70, 'CD': 0.2981},
    {'Mach': 1.75, 'CD': 0.2944},
    {'Mach': 1.80, 'CD': 0.2909},
    {'Mach': 1.85, 'CD': 0.2876},
    {'Mach': 1.90, 'CD': 0.2844},
    {'Mach': 1.95, 'CD': 0.2814},
    {'Mach': 2.00, 'CD': 0.2785},
    {'Mach': 2.05, 'CD': 0.2757},
    {'Mach': 2.10, 'CD': 0.2731},
    {'Mach': 2.15, 'CD': 0.2705},
    {'Mach': 2.20, 'CD': 0.2681},
    {'Mach': 2.25, 'CD': 0.2658},
    {'Mach': 2.30, 'CD': 0.2633},
    {'Mach': 2.35, 'CD': 0.2610},
    {'Mach': 2.40, 'CD': 0.2589},
    {'Mach': 2.45, 'CD': 0.2569},
    {'Mach': 2.50, 'CD': 0.2550},
    {'Mach': 2.55, 'CD': 0.2532},
    {'Mach': 2.60, 'CD': 0.2514},
    {'Mach': 2.65, 'CD': 0.2497},
    {'Mach': 2.70, 'CD': 0.2481},
    {'Mach': 2.75, 'CD': 0.2465},
    {'Mach': 2.80, 'CD': 0.2450},
    {'Mach': 2.85, 'CD': 0.2435},
    {'Mach': 2.90, 'CD': 0.2421},
    {'Mach': 2.95, 'CD': 0.2407},
    {'Mach': 3.00, 'CD': 0.2394},
    {'Mach': 3.10, 'CD': 0.2368},
    {'Mach': 3.20, 'CD': 0.2344},
    {'Mach': 3.30, 'CD': 0.2320},
    {'Mach': 3.40, 'CD': 0.2298},
    {'Mach': 3.50, 'CD': 0.2277},
    {'Mach': 3.60, 'CD': 0.2256},
    {'Mach': 3.70, 'CD': 0.2237},
    {'Mach': 3.80, 'CD': 0.2218},
    {'Mach': 3.90, 'CD': 0.2200},
    {'Mach': 4.00, 'CD': 0.2183},
    {'Mach': 4.20, 'CD': 0.2151},
    {'Mach': 4.40, 'CD': 0.2120},
    {'Mach': 4.60, 'CD': 0.2091},
    {'Mach': 4.80, 'CD': 0.2064},
    {'Mach': 5.00, 'CD': 0.2038},
]


def get_drag_tables_names() -> List[str]:
    """Names of the tables defined in this module."""
    return [name for name in globals() if name.startswith("Table")]


__all__ = (
    'DragTablePointDictType',
    'TableG1',
    'TableG7',
    'TableG8',
    'get_drag_tables_names',
)
