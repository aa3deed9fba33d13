from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Sequence

import structlog

from z340_reverser.ciphertext import Z340
from z340_reverser.corrections import ShiftCorrection
from z340_reverser.models.grid import ExclusionWindow, GridSpec
from z340_reverser.normalize import normalize_output
from z340_reverser.traversal import read_out
from z340_reverser.utils import ConfigurationError


log = structlog.get_logger()


@dataclass(frozen=True, slots=True)
class BlockPolicy:
    """How one segment of the ciphertext is read out.

    A `length` of None takes whatever is left of the ciphertext, a `grid` of
    None passes the segment through untouched.
    """

    name: str
    length: Optional[int] = None
    grid: Optional[GridSpec] = None
    correction: Optional[ShiftCorrection] = None
    exclusion: Optional[ExclusionWindow] = None


Z340_GRID = GridSpec(rows=9, cols=17, col_step=2, row_step=1)

# The encoder placed one symbol of line 6 thirteen positions too late.
Z340_SHIFT = ShiftCorrection(source=101, target=88)

# "LIFEIS" on the first line of the second block was never transposed.
Z340_LIFE_IS = ExclusionWindow(row=0, col_start=11, col_end=17)

Z340_BLOCKS = (
    BlockPolicy(name="Z-340-1", length=Z340_GRID.length, grid=Z340_GRID),
    BlockPolicy(
        name="Z-340-2",
        length=Z340_GRID.length,
        grid=Z340_GRID,
        correction=Z340_SHIFT,
        exclusion=Z340_LIFE_IS,
    ),
    # Some words of this block still read reversed after substitution; whether
    # that hides another rule or an encoding mistake is unresolved.
    BlockPolicy(name="Z-340-3"),
)


def split_segments(ciphertext: str, policies: Sequence[BlockPolicy]) -> List[str]:
    """Cut the ciphertext into one contiguous segment per policy."""
    for policy in policies[:-1]:
        if policy.length is None:
            raise ConfigurationError(f"Only the last block may take the remainder, not {policy.name}")

    fixed = sum(policy.length for policy in policies if policy.length is not None)
    if len(ciphertext) < fixed:
        raise ConfigurationError(f"Ciphertext length {len(ciphertext)} < {fixed} required by the blocks")
    if policies and policies[-1].length is not None and len(ciphertext) != fixed:
        raise ConfigurationError(f"Ciphertext length {len(ciphertext)} != {fixed} covered by the blocks")

    segments = []
    start = 0
    for policy in policies:
        end = len(ciphertext) if policy.length is None else start + policy.length
        segments.append(ciphertext[start:end])
        start = end
    return segments


def read_block(segment: str, policy: BlockPolicy) -> str:
    """Correct, then walk one segment according to its policy."""
    if policy.grid is None:
        log.debug("block passed through", block=policy.name, length=len(segment))
        return segment

    if policy.correction is not None:
        segment = policy.correction.apply(segment)

    result = read_out(segment, policy.grid, policy.exclusion)
    log.debug("block read", block=policy.name, length=len(result))
    return result


def assemble(ciphertext: str, policies: Sequence[BlockPolicy] = Z340_BLOCKS) -> str:
    """Read every block and concatenate the results without separators."""
    segments = split_segments(ciphertext, policies)
    return "".join(read_block(segment, policy) for segment, policy in zip(segments, policies))


def reverse_transposition(ciphertext: str = Z340, normalize: bool = True) -> str:
    """Produce the intermediate ciphertext for the substitution solver."""
    log.info("reversing transposition", length=len(ciphertext), normalize=normalize)
    intermediate = assemble(ciphertext)
    if normalize:
        intermediate = normalize_output(intermediate)
    return intermediate
