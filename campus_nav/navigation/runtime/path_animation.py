#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
路径动画：把经过的时间换算成进度，再按进度取箭头、脉冲、方向指示的位置

本模块不含定时器，由宿主按帧传入 elapsed_ms；停止动画即不再调用 frame_at。
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from campus_nav.navigation.common.constants import (
    DEFAULT_ANIMATION_DURATION_MS,
    DIRECTION_EPSILON,
    MAX_DIRECTION_INDICATORS,
    PULSE_COUNT,
    PULSE_SPACING,
)
from campus_nav.navigation.core.bezier_smoother import BezierSegment, PathSample, point_at_progress


def ease_in_out_cubic(t: float) -> float:
    if t < 0.5:
        return 4 * t * t * t
    return 1 - (-2 * t + 2) ** 3 / 2


@dataclass
class AnimationFrame:
    progress: float
    arrow: Optional[PathSample]
    pulses: List[PathSample] = field(default_factory=list)
    indicators: List[PathSample] = field(default_factory=list)
    finished: bool = False


class PathAnimation:
    """
    单条路径的动画

    示例:
        ```python
        anim = PathAnimation(segments, duration_ms=3000)
        frame = anim.frame_at(elapsed_ms)
        ```
    """

    def __init__(
        self,
        segments: Sequence[BezierSegment],
        duration_ms: float = DEFAULT_ANIMATION_DURATION_MS,
        epsilon: float = DIRECTION_EPSILON,
        max_indicators: int = MAX_DIRECTION_INDICATORS,
    ):
        if duration_ms <= 0:
            raise ValueError("duration_ms必须大于0")
        self.segments_ = list(segments)
        self.duration_ms_ = duration_ms
        self.epsilon_ = epsilon
        self.max_indicators_ = max_indicators

    def progress_at(self, elapsed_ms: float) -> float:
        """经过 elapsed_ms 后的缓动进度"""
        linear = min(1.0, max(0.0, elapsed_ms / self.duration_ms_))
        return ease_in_out_cubic(linear)

    def sample(self, progress: float) -> Optional[PathSample]:
        return point_at_progress(self.segments_, progress, self.epsilon_)

    def indicator_progresses(self) -> List[float]:
        """方向指示位置：把路径均分为 n+1 份"""
        count = min(self.max_indicators_, len(self.segments_))
        return [i / (count + 1) for i in range(1, count + 1)]

    def frame_at(self, elapsed_ms: float) -> AnimationFrame:
        progress = self.progress_at(elapsed_ms)
        finished = elapsed_ms >= self.duration_ms_

        if not self.segments_:
            return AnimationFrame(progress=progress, arrow=None, finished=finished)

        pulses = []
        for i in range(PULSE_COUNT):
            sample = self.sample((progress + i * PULSE_SPACING) % 1)
            if sample is not None:
                pulses.append(sample)

        indicators = [self.sample(p) for p in self.indicator_progresses()]

        return AnimationFrame(
            progress=progress,
            arrow=self.sample(progress),
            pulses=pulses,
            indicators=[s for s in indicators if s is not None],
            finished=finished,
        )
