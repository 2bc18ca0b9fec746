"""导入文本的单行解析

每行包含三个字段：订单号、客户名、交货日期。粘贴内容来源不同：
- 逗号分隔（CSV 导出）：第一段为订单号，最后一段为日期，中间所有段用逗号拼回作为客户名
- 空白分隔（对齐的纯文本）：第一个词为订单号，最后一个词为日期，中间用单个空格拼接

空行和表头行返回 None；格式错误抛出 InvalidLineFormat。
"""

from dataclasses import dataclass
from typing import Optional

from .errors import InvalidLineFormat
from ..config.settings import settings

CURRENCY_MARKER = "€"


@dataclass(frozen=True)
class ParsedLine:
    order_number: str
    customer_name: str
    date_token: str


def is_header(line: str, marker: Optional[str] = None) -> bool:
    marker = (marker or settings.IMPORT_HEADER_MARKER).lower()
    return marker in line.lower()


def parse_line(raw: str, header_marker: Optional[str] = None) -> Optional[ParsedLine]:
    line = (raw or "").strip()
    if not line:
        return None
    if is_header(line, header_marker):
        return None

    comma_parts = line.split(",")
    if len(comma_parts) >= 3:
        order_number = comma_parts[0].strip()
        date_token = comma_parts[-1].strip()
        customer_name = ",".join(comma_parts[1:-1]).strip()
    else:
        tokens = line.split()
        if len(tokens) < 3:
            raise InvalidLineFormat(line, f"Expected at least 3 fields: {line!r}")
        order_number = tokens[0]
        date_token = tokens[-1]
        customer_name = " ".join(tokens[1:-1])

    if not order_number or not customer_name or not date_token:
        raise InvalidLineFormat(line, f"Incomplete line: {line!r}")

    order_number = order_number.replace(CURRENCY_MARKER, "").strip()
    if not order_number:
        raise InvalidLineFormat(line, f"Missing order number: {line!r}")

    return ParsedLine(order_number=order_number, customer_name=customer_name, date_token=date_token)
