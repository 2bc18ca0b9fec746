"""订单看板异常定义

- 行级错误（InvalidLineFormat / InvalidDate）只在导入时被记录并跳过，不会中断整批导入
- EmptyImportResult 是提示性质的警告，不是系统故障
- 提交阶段的错误（CommitPartialFailure / CommitFailed）需要返回给调用方
"""


class OrderBoardError(Exception):
    """所有订单看板异常的基类"""


class UnknownOrderType(OrderBoardError, ValueError):
    """订单类型不在固定的五种类型之内"""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Unknown order type: {value!r}")


class LineSkipped(OrderBoardError):
    """导入时某一行被跳过"""

    reason = "skipped"

    def __init__(self, line: str, detail: str = ""):
        self.line = line
        self.detail = detail
        super().__init__(detail or f"{self.reason}: {line!r}")


class InvalidLineFormat(LineSkipped):
    reason = "invalid_line_format"


class InvalidDate(LineSkipped):
    reason = "invalid_date"


class EmptyImportResult(OrderBoardError):
    """整批处理后没有任何候选记录（通常是类型选错或粘贴内容不对）"""

    def __init__(self, skipped_count: int = 0):
        self.skipped_count = skipped_count
        super().__init__(
            "The content is empty or contains no valid orders; nothing to import."
        )


class StoreUnavailable(OrderBoardError):
    """订单存储无法读写"""


class StoreWriteError(OrderBoardError):
    """存储可达，但单个写操作被拒绝"""


class OrderNotFound(OrderBoardError):
    def __init__(self, order_id):
        self.order_id = order_id
        super().__init__(f"Order {order_id} not found")


class CommitError(OrderBoardError):
    """提交导入变更集失败的基类，携带完整的 CommitResult"""

    def __init__(self, result, message: str):
        self.result = result
        super().__init__(message)


class CommitPartialFailure(CommitError):
    """部分操作成功、部分失败；已成功的操作不会回滚"""


class CommitFailed(CommitError):
    """所有操作均失败"""
