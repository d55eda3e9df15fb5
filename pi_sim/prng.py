# Minimal xorshift32 PRNG (13/17/5 shift triple) for deterministic pi runs
# Marsaglia-style generator, 32 bits of state, no external deps
from dataclasses import dataclass

MASK32 = (1 << 32) - 1
ZERO_SEED_REPLACEMENT = 0x92D68CA2  # 2463534242
DEFAULT_SEED = 123456789

@dataclass
class XorShift32:
    state: int = DEFAULT_SEED

    def __post_init__(self) -> None:
        self.state &= MASK32
        # a zero state would stay zero forever
        if self.state == 0:
            self.state = ZERO_SEED_REPLACEMENT

    def next_u32(self) -> int:
        x = self.state
        x ^= (x << 13) & MASK32
        x ^= x >> 17
        x ^= (x << 5) & MASK32
        self.state = x
        return x

    def next_double(self) -> float:
        # 26 high bits of the first draw, 27 of the second -> 53-bit mantissa
        hi = self.next_u32() >> 6
        lo = self.next_u32() >> 5
        return ((hi << 27) | lo) / 2**53
