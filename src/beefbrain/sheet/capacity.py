"""Carrying capacity by strength score (D&D 3.5e)."""

# Heavy load in pounds for strength 1-29
HEAVY_LOAD_TABLE: tuple[int, ...] = (
    10, 20, 30, 40, 50, 60, 70, 80, 90, 100,
    115, 130, 150, 175, 200, 230, 260, 300, 350, 400,
    460, 520, 600, 700, 800, 920, 1040, 1200, 1400,
)

# Strength 20 heavy load; doubles for every +10 strength beyond the table
DOUBLING_BASE = 400
MINIMUM_HEAVY_LOAD = 10

CAPACITY_KEYS = ("light", "medium", "heavy", "lift", "drag")


def heavy_load(strength: int | float) -> int:
    """Calculate the heavy load limit in pounds.

    Scores above the table double every 10 points from the strength 20
    baseline, interpolating linearly between doublings.

    Examples:
        >>> heavy_load(18)
        300
        >>> heavy_load(30)
        800
        >>> heavy_load(35)
        1200
    """
    strength = int(strength)
    if strength < 1:
        return MINIMUM_HEAVY_LOAD
    if strength <= len(HEAVY_LOAD_TABLE):
        return HEAVY_LOAD_TABLE[strength - 1]

    doublings, remainder = divmod(strength - 20, 10)
    heavy = DOUBLING_BASE * 2**doublings
    if remainder:
        next_heavy = DOUBLING_BASE * 2 ** (doublings + 1)
        heavy += (next_heavy - heavy) * remainder // 10
    return heavy


def carrying_capacity(strength: int | float) -> dict[str, str]:
    """
    Calculate all load thresholds for a strength score.

    Args:
        strength: Strength score

    Returns:
        Mapping of light, medium, heavy, lift and drag to ``"<n> lbs"`` strings
    """
    heavy = heavy_load(strength)
    loads = {
        "light": heavy // 3,
        "medium": 2 * heavy // 3,
        "heavy": heavy,
        "lift": heavy * 2,
        "drag": heavy * 5,
    }
    return {key: f"{loads[key]} lbs" for key in CAPACITY_KEYS}
