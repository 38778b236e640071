SAFE = "safe"
INAPPROPRIATE = "inappropriate"
LABELS = (SAFE, INAPPROPRIATE)


def opposite(label: str) -> str:
    return INAPPROPRIATE if label == SAFE else SAFE
