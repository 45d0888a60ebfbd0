from .curve import G1, bls12_381_r
from .exceptions import LengthMismatch


def _check_lengths(scalars, points):
    if len(scalars) != len(points):
        raise LengthMismatch(
            f"msm got {len(scalars)} scalars and {len(points)} points"
        )


def msm(scalars, points):
    """Computes prod points[i] ** scalars[i] one pair at a time.

    Empty input yields the neutral element.
    """
    _check_lengths(scalars, points)
    out = G1.one()
    for s, p in zip(scalars, points):
        out *= p ** s
    return out


def _default_window(n):
    if n < 4:
        return 1
    return min(16, n.bit_length() - 1)


def msm_pippenger(scalars, points, window=None):
    """Bucket (Pippenger) multi-scalar multiplication.

    Scalars are cut into `window`-bit digits. For every digit position the
    points are dropped into buckets by digit value and the buckets are summed
    with a running total, so each window costs about n + 2^window group
    operations instead of n scalar multiplications.
    """
    _check_lengths(scalars, points)
    if len(points) == 0:
        return G1.one()
    if window is None:
        window = _default_window(len(points))
    assert window > 0

    ks = [int(s) % bls12_381_r for s in scalars]
    mask = (1 << window) - 1
    num_windows = (bls12_381_r.bit_length() + window - 1) // window

    result = G1.one()
    for w in reversed(range(num_windows)):
        for _ in range(window):
            result = result * result
        buckets = [G1.one()] * (mask + 1)
        shift = w * window
        for k, p in zip(ks, points):
            digit = (k >> shift) & mask
            if digit:
                buckets[digit] = buckets[digit] * p
        running = G1.one()
        acc = G1.one()
        for j in range(mask, 0, -1):
            running = running * buckets[j]
            acc = acc * running
        result = result * acc
    return result
