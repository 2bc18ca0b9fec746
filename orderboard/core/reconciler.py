"""导入对账

把粘贴或上传的文本解析为候选订单，并与已有订单按订单号匹配：
- 没有匹配 -> 候选状态为 new
- 有匹配且新批次类型优先级严格更高 -> 候选状态为 update，携带已有订单 id
- 有匹配但优先级不更高 -> 丢弃，已有记录保持不变

已有订单在调用时被复制为不可变快照，处理过程中不会看到外部变化。
同一批次内的重复订单号都只与原始快照比较，不会把前面的行当作已有订单。
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, List, Optional, Tuple

from .date_parser import parse_delivery_date
from .errors import EmptyImportResult, LineSkipped
from .line_parser import parse_line
from .order_types import OrderType, color_of, supersedes

logger = logging.getLogger(__name__)

STATUS_NEW = "new"
STATUS_UPDATE = "update"


@dataclass(frozen=True)
class OrderSnapshot:
    """对账时使用的已有订单的只读副本"""
    id: object
    order_number: str
    type: Optional[str]


@dataclass(frozen=True)
class ImportCandidate:
    order_number: str
    customer_name: str
    type: OrderType
    delivery_date: date
    status: str = STATUS_NEW
    order_id: Optional[object] = None
    source_file: Optional[str] = None

    @property
    def color(self) -> str:
        return color_of(self.type)

    def fields(self) -> dict:
        """需要写入存储的字段（不含 id 和 created_at）"""
        return {
            "order_number": self.order_number,
            "customer_name": self.customer_name,
            "type": self.type.value,
            "delivery_date": self.delivery_date,
            "source_file": self.source_file,
        }


@dataclass(frozen=True)
class SkippedLine:
    line_number: int
    line: str
    reason: str
    detail: str = ""


@dataclass
class ImportReport:
    candidates: List[ImportCandidate] = field(default_factory=list)
    skipped: List[SkippedLine] = field(default_factory=list)

    @property
    def new_count(self) -> int:
        return sum(1 for c in self.candidates if c.status == STATUS_NEW)

    @property
    def update_count(self) -> int:
        return sum(1 for c in self.candidates if c.status == STATUS_UPDATE)

    def ensure_not_empty(self) -> "ImportReport":
        if not self.candidates:
            raise EmptyImportResult(skipped_count=len(self.skipped))
        return self


def snapshot_orders(orders: Iterable) -> Tuple[OrderSnapshot, ...]:
    return tuple(
        OrderSnapshot(id=o.id, order_number=o.order_number, type=o.type)
        for o in orders
    )


def _index(snapshot: Tuple[OrderSnapshot, ...]) -> dict:
    # 订单号重复时以快照中第一条为准
    index = {}
    for order in snapshot:
        index.setdefault(order.order_number, order)
    return index


def analyze_import(
    text: str,
    batch_type,
    existing_orders: Iterable,
    source_file: Optional[str] = None,
    header_marker: Optional[str] = None,
) -> ImportReport:
    """解析整段文本并生成候选变更集

    batch_type 不合法时抛出 UnknownOrderType；单行错误只记录到 report.skipped。
    """
    order_type = OrderType.parse(batch_type)
    index = _index(snapshot_orders(existing_orders))
    report = ImportReport()

    for line_number, raw in enumerate((text or "").strip().split("\n"), start=1):
        try:
            parsed = parse_line(raw, header_marker)
            if parsed is None:
                if raw.strip():
                    logger.info("Header line skipped: %r", raw.strip())
                continue
            delivery_date = parse_delivery_date(parsed.date_token)
        except LineSkipped as exc:
            logger.warning("Line %d skipped (%s): %s", line_number, exc.reason, exc)
            report.skipped.append(
                SkippedLine(line_number=line_number, line=raw.strip(), reason=exc.reason, detail=str(exc))
            )
            continue

        candidate = ImportCandidate(
            order_number=parsed.order_number,
            customer_name=parsed.customer_name,
            type=order_type,
            delivery_date=delivery_date,
            source_file=source_file,
        )

        existing = index.get(candidate.order_number)
        if existing is None:
            report.candidates.append(candidate)
        elif supersedes(order_type, existing.type):
            report.candidates.append(
                ImportCandidate(
                    order_number=candidate.order_number,
                    customer_name=candidate.customer_name,
                    type=order_type,
                    delivery_date=delivery_date,
                    status=STATUS_UPDATE,
                    order_id=existing.id,
                    source_file=source_file,
                )
            )
        else:
            logger.debug(
                "Order %s kept as %s; %s does not supersede it",
                existing.order_number, existing.type, order_type.value,
            )

    logger.info(
        "Import analysed: %d new, %d update, %d skipped",
        report.new_count, report.update_count, len(report.skipped),
    )
    return report


def reconcile_import(text: str, batch_type, existing_orders: Iterable, source_file: Optional[str] = None) -> List[ImportCandidate]:
    return analyze_import(text, batch_type, existing_orders, source_file=source_file).candidates
