"""提交已确认的导入变更集

- new 候选 -> store.create，created_at 在提交时统一打上
- update 候选 -> store.update(order_id, 字段)，只写候选里带的字段

所有操作都会被尝试，不做事务也不重试；部分失败时已成功的操作保留。
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, List, Optional, Protocol

from .errors import CommitFailed, CommitPartialFailure, OrderBoardError, StoreUnavailable
from .reconciler import STATUS_NEW, STATUS_UPDATE, ImportCandidate

logger = logging.getLogger(__name__)


class OrderStore(Protocol):
    def read_all(self) -> list: ...

    def create(self, fields: dict): ...

    def update(self, order_id, fields: dict) -> None: ...

    def delete(self, order_id) -> None: ...

    def delete_many(self, order_ids) -> None: ...


@dataclass(frozen=True)
class CommitFailure:
    order_number: str
    status: str
    order_id: Optional[object]
    error: str
    store_unavailable: bool = False


@dataclass
class CommitResult:
    created: List[object] = field(default_factory=list)
    updated: List[object] = field(default_factory=list)
    failures: List[CommitFailure] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return len(self.created) + len(self.updated)

    @property
    def status(self) -> str:
        if not self.failures:
            return "success" if self.succeeded else "empty"
        return "partial" if self.succeeded else "failed"

    def raise_for_status(self) -> "CommitResult":
        status = self.status
        if status == "partial":
            raise CommitPartialFailure(
                self,
                f"{len(self.failures)} of {self.succeeded + len(self.failures)} operations failed",
            )
        if status == "failed":
            message = f"All {len(self.failures)} operations failed"
            if all(f.store_unavailable for f in self.failures):
                raise CommitFailed(self, message) from StoreUnavailable(self.failures[0].error)
            raise CommitFailed(self, message)
        return self


def commit_import(store: OrderStore, candidates: Iterable[ImportCandidate], now: Optional[datetime] = None) -> CommitResult:
    created_at = now or datetime.now()
    result = CommitResult()

    for candidate in candidates:
        try:
            if candidate.status == STATUS_NEW:
                new_id = store.create(dict(candidate.fields(), created_at=created_at))
                result.created.append(new_id)
            elif candidate.status == STATUS_UPDATE:
                store.update(candidate.order_id, candidate.fields())
                result.updated.append(candidate.order_id)
            else:
                raise ValueError(f"Unknown candidate status {candidate.status!r}")
        except (OrderBoardError, ValueError) as exc:
            logger.error("Commit of order %s (%s) failed: %s", candidate.order_number, candidate.status, exc)
            result.failures.append(
                CommitFailure(
                    order_number=candidate.order_number,
                    status=candidate.status,
                    order_id=candidate.order_id,
                    error=str(exc),
                    store_unavailable=isinstance(exc, StoreUnavailable),
                )
            )

    logger.info(
        "Import committed: %d created, %d updated, %d failed",
        len(result.created), len(result.updated), len(result.failures),
    )
    return result


