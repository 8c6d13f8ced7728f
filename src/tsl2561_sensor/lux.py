def lux(ch0: int, ch1: int) -> float:
    """Estimate illuminance in lux from the broadband (ch0) and infrared (ch1) counts.

    Piecewise empirical fit keyed on the ch1/ch0 ratio. A ratio sitting exactly on
    0.52, 0.65 or 0.80 is evaluated with the higher band's formula.
    """
    if ch0 == 0:
        return 0.0

    ratio = ch1 / ch0
    if 0.0 <= ratio < 0.52:
        return (0.0315 * ch0) - (0.0593 * ch0 * (ratio**1.4))
    if 0.52 <= ratio < 0.65:
        return (0.0229 * ch0) - (0.0291 * ch1)
    if 0.65 <= ratio < 0.80:
        return (0.0157 * ch0) - (0.0180 * ch1)
    if 0.80 <= ratio <= 1.30:
        return (0.00338 * ch0) - (0.00260 * ch1)
    return 0.0
