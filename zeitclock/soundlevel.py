"""Sound level measurement from a 24-bit I2S microphone with A-weighting."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

SAMPLE_RATE_HZ = 16000

MIC_FULL_SCALE_24BIT = 8388607.0
DBFS_FLOOR = -120.0

USER_CAL_OFFSET_DB = 109.3
USER_CAL_OFFSET_DBA = 105.0

DB_SMOOTH_ALPHA = 0.10
STARTUP_SKIP_BLOCKS = 5

# A-weighting at 16 kHz as three cascaded biquad sections:
# (b0, b1, b2, a1, a2).
A_WEIGHT_SECTIONS = (
    (0.529094044, 1.058188088, 0.529094044, 0.821563820, 0.168741780),
    (1.000000000, -2.000000000, 1.000000000, -1.705509630, 0.715987580),
    (1.000000000, -2.000000000, 1.000000000, -1.983886760, 0.983951670),
)


@dataclass
class Biquad:
    """Second-order IIR section in transposed direct form II."""

    b0: float
    b1: float
    b2: float
    a1: float
    a2: float
    z1: float = 0.0
    z2: float = 0.0

    def process(self, x: float) -> float:
        """Filter one sample."""
        y = self.b0 * x + self.z1
        self.z1 = self.b1 * x - self.a1 * y + self.z2
        self.z2 = self.b2 * x - self.a2 * y
        return y

    def reset(self) -> None:
        """Clear the filter state."""
        self.z1 = 0.0
        self.z2 = 0.0


class AWeightingFilter:
    """A-weighting filter for a 16 kHz sample rate."""

    def __init__(self) -> None:
        self.sections = [Biquad(*coeffs) for coeffs in A_WEIGHT_SECTIONS]

    def process(self, x: float) -> float:
        """Filter one sample through every section."""
        y = x
        for section in self.sections:
            y = section.process(y)
        return y

    def reset(self) -> None:
        """Clear the state of every section."""
        for section in self.sections:
            section.reset()


class SplSmoother:
    """Exponential smoothing of sound pressure levels; the first value is taken as is."""

    def __init__(self, alpha: float = DB_SMOOTH_ALPHA) -> None:
        self.alpha = alpha
        self.value: Optional[float] = None

    def update(self, spl: float) -> float:
        """Feed one level and return the smoothed level."""
        if self.value is None:
            self.value = spl
        else:
            self.value = (1.0 - self.alpha) * self.value + self.alpha * spl
        return self.value


def rms_to_dbfs(rms: float) -> float:
    """RMS of 24-bit samples in dB relative to full scale; -120 at or below 1."""
    if rms <= 1.0:
        return DBFS_FLOOR
    return 20.0 * math.log10(rms / MIC_FULL_SCALE_24BIT)


def convert_inmp441_sample(raw: int) -> int:
    """Signed 24-bit sample from a 32-bit I2S word (arithmetic shift by 8)."""
    raw = ((int(raw) + (1 << 31)) % (1 << 32)) - (1 << 31)
    return raw >> 8


def a_weighting_gain_db(
    frequency: float = 1000.0,
    sample_rate: float = SAMPLE_RATE_HZ,
    amplitude: float = 100000.0,
    n: int = SAMPLE_RATE_HZ,
) -> float:
    """Gain in dB of a fresh A-weighting filter for a sine of ``frequency``."""
    if n <= 0:
        raise ValueError("sample count must be positive")
    if amplitude == 0:
        raise ValueError("amplitude must not be zero")
    filt = AWeightingFilter()
    sum_sq = 0.0
    sum_sq_a = 0.0
    for i in range(n):
        x = amplitude * math.sin(2.0 * math.pi * frequency * i / sample_rate)
        y = filt.process(x)
        sum_sq += x * x
        sum_sq_a += y * y
    rms = math.sqrt(sum_sq / n)
    rms_a = math.sqrt(sum_sq_a / n)
    return 20.0 * math.log10(rms_a / rms)


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


class SoundLevelMeter:
    """Turns blocks of stereo I2S frames into an A-weighted sound level.

    Each frame is a ``(left, right)`` pair of raw 32-bit words. The filter
    state carries over from block to block. The first ``startup_skip``
    blocks are measured but not reported.
    """

    def __init__(
        self,
        left_channel: bool = True,
        cal_offset_dba: float = USER_CAL_OFFSET_DBA,
        startup_skip: int = STARTUP_SKIP_BLOCKS,
    ) -> None:
        self.left_channel = left_channel
        self.cal_offset_dba = cal_offset_dba
        self.startup_skip = startup_skip
        self.filter = AWeightingFilter()
        self.db_value = 0
        self.dc_offset = 0
        self.peak = 0
        self.rms = 0.0
        self.rms_a = 0.0
        self.dbfs = DBFS_FLOOR
        self.dbfs_a = DBFS_FLOOR
        self.spl_dba = DBFS_FLOOR + cal_offset_dba

    def process_block(self, frames: Iterable[Sequence[int]]) -> Optional[int]:
        """Measure one block; return the level in dBA, or None while skipping."""
        channel = 0 if self.left_channel else 1
        samples = [convert_inmp441_sample(frame[channel]) for frame in frames]
        if not samples:
            return None
        count = len(samples)

        dc_offset = _trunc_div(sum(samples), count)
        peak = 0
        sum_sq = 0
        sum_sq_weighted = 0.0
        for sample in samples:
            centered = sample - dc_offset
            peak = max(peak, abs(centered))
            sum_sq += centered * centered
            weighted = self.filter.process(float(centered))
            sum_sq_weighted += weighted * weighted

        self.dc_offset = dc_offset
        self.peak = peak
        self.rms = math.sqrt(sum_sq / count)
        self.rms_a = math.sqrt(sum_sq_weighted / count)
        self.dbfs = rms_to_dbfs(self.rms)
        self.dbfs_a = rms_to_dbfs(self.rms_a)
        self.spl_dba = self.dbfs_a + self.cal_offset_dba

        if self.startup_skip > 0:
            self.startup_skip -= 1
            return None

        self.db_value = int(self.spl_dba + 0.5)
        return self.db_value