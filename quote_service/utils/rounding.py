"""금액 반올림 유틸리티.

가격 계산은 중간 단계에서 반올림하지 않고, 화면/저장 직전에만 정수로 바꿉니다.
파이썬 기본 round() 는 은행가 반올림(짝수 쪽)이므로,
견적 금액에는 항상 0.5 를 올리는 방식을 사용합니다.
"""

import math


def round_half_up(value: float) -> int:
    """가장 가까운 정수로 반올림 (x.5 는 양의 방향으로 올림, 예: -2.5 → -2)."""
    return int(math.floor(value + 0.5))


def round_to_nearest(value: float, step: int) -> int:
    """
    step 단위로 반올림합니다.

    예: round_to_nearest(114_950, 100) == 115_000
    """
    return round_half_up(value / step) * step
