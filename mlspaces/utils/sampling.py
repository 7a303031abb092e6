import math
import torch

# All randomness of the library goes through these helpers.
# generator=None falls back on torch's default generator: it is never created nor seeded here.

MAX_INT64 = 2 ** 63 - 1


def randint(low, high, generator=None):
    """Samples an integer uniformly in [low, high). The width may exceed what int64 can hold."""
    span = high - low
    assert span > 0, 'cannot sample from an empty range'
    if span <= MAX_INT64:
        return low + int(torch.randint(0, span, (), generator=generator))

    # assemble 32-bit words and reject the draws that fall past the range
    n_bits = (span - 1).bit_length()
    n_words = (n_bits + 31) // 32
    while True:
        value = 0
        for word in torch.randint(0, 2 ** 32, (n_words,), generator=generator).tolist():
            value = (value << 32) | word
        value >>= n_words * 32 - n_bits
        if value < span:
            return low + value


def uniform(low, high, generator=None):
    """Samples a float uniformly in [low, high)."""
    if low == high:
        return float(low)
    if math.isinf(high - low):
        # width beyond the float range: draw the weight of the convex combination instead
        u = float(torch.empty((), dtype=torch.float64).uniform_(0., 1., generator=generator))
        return min(max((1. - u) * low + u * high, low), high)
    return float(torch.empty((), dtype=torch.float64).uniform_(low, high, generator=generator))


def exponential(rate=1.0, generator=None):
    return float(torch.empty((), dtype=torch.float64).exponential_(rate, generator=generator))


def normal(mean=0.0, std=1.0, generator=None):
    return float(torch.empty((), dtype=torch.float64).normal_(mean, std, generator=generator))


def categorical(weights, generator=None):
    """Samples an index with probability proportional to weights."""
    weights = torch.as_tensor(weights, dtype=torch.float64)
    assert weights.dim() == 1 and len(weights) > 0, 'weights must be a non-empty vector'
    assert (weights >= 0).all() and weights.sum() > 0, 'weights must be non-negative with a positive sum'
    return int(torch.multinomial(weights, 1, generator=generator))
