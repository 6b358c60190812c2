import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, List


@dataclass
class Page:
    """정렬된 조회 결과의 한 페이지와 전체 개수 정보를 담습니다."""
    items: List[Any]
    total: int
    page: int
    per_page: int

    @property
    def last_page(self) -> int:
        return max(1, math.ceil(self.total / self.per_page))

    def to_dict(self, serialize: Callable[[Any], Dict[str, Any]]) -> Dict[str, Any]:
        return {
            "data": [serialize(item) for item in self.items],
            "current_page": self.page,
            "per_page": self.per_page,
            "total": self.total,
            "last_page": self.last_page,
        }
