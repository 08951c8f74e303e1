"""
Python implementation of the PCG32 generator used for galaxy content.

Based on Melissa O'Neill's PCG-XSH-RR 64/32 algorithm (the same variant as
Wenzel Jakob's ``pcg32.h``). One instance is created per system, star and
planet from that entity's seed; instances are never shared between entities.
"""

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF

PCG32_MULT = 0x5851F42D4C957F2D
PCG32_DEFAULT_STREAM = 1


def _uint32(n):
    """Convert to unsigned 32-bit integer."""
    return int(n) & MASK32


class PCG32:
    """
    PCG32 sample stream.

    Reseeding follows ``pcg32::seed(initstate, initseq)``: the increment is
    derived from the stream selector and the initial state is mixed in
    between two steps.
    """

    def __init__(self, seed: int, stream: int = PCG32_DEFAULT_STREAM):
        """Initialize with a 64-bit seed and an optional stream selector."""
        # Number of 32-bit outputs drawn so far
        self.call_count = 0

        self.state = 0
        self.inc = ((int(stream) << 1) | 1) & MASK64
        self._step()
        self.state = (self.state + (int(seed) & MASK64)) & MASK64
        self._step()

    def _step(self) -> int:
        oldstate = self.state
        self.state = (oldstate * PCG32_MULT + self.inc) & MASK64
        xorshifted = _uint32(((oldstate >> 18) ^ oldstate) >> 27)
        rot = oldstate >> 59
        return _uint32((xorshifted >> rot) | (xorshifted << ((-rot) & 31)))

    def next_uint(self, bound: int = None) -> int:
        """
        Generate a uniformly distributed unsigned 32-bit integer.

        Args:
            bound: Optional exclusive upper bound; the result is then drawn
                without modulo bias from [0, bound)

        Returns:
            Random integer
        """
        self.call_count += 1
        if bound is None:
            return self._step()

        bound = int(bound)
        if bound <= 0:
            raise ValueError("bound must be positive")

        # Rejection threshold, computed as in pcg32::nextUInt(bound)
        threshold = _uint32(-bound) % bound
        while True:
            r = self._step()
            if r >= threshold:
                return r % bound
            self.call_count += 1

    def next_float(self) -> float:
        """Generate a single-precision-resolution number in [0, 1)."""
        return (self.next_uint() >> 9) * (1.0 / 8388608.0)  # 2^-23

    def next_double(self) -> float:
        """Generate a number in [0, 1) from one 32-bit output."""
        return self.next_uint() * 2.3283064365386963e-10  # 2^-32

    def uniform(self, low: float, high: float) -> float:
        """Linear interpolation between low and high by one float draw."""
        return low + self.next_float() * (high - low)
