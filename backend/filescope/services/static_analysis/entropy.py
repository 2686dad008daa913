"""
FileScope Entropy Estimator

Shannon entropy over the byte-value distribution of a buffer. High values
(close to 8 bits per byte) suggest compressed, packed or encrypted content.
"""

import math
from collections import Counter
from typing import List


def byte_histogram(content: bytes) -> List[int]:
    """Count occurrences of each of the 256 byte values in one pass."""
    histogram = [0] * 256
    for value, count in Counter(content).items():
        histogram[value] = count
    return histogram


def shannon_entropy(content: bytes) -> float:
    """
    Calculate Shannon entropy in bits per byte.

    Empty input has entropy 0.0. The result is not clamped to 0-8.
    """
    total = len(content)
    if total == 0:
        return 0.0

    entropy = 0.0
    for count in byte_histogram(content):
        if count == 0:
            continue
        p = count / total
        entropy -= p * math.log2(p)

    return entropy
