"""看板与日历API路由

- /board：按今天把订单分为待处理 / 已确认 / 已归档
- /calendar/{year}/{month}：已确认订单的月历，每天显示优先级最高的类型
- /calendar/{year}/{month}/{day}/summary：某天的配送摘要（可复制到邮件）
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from typing import Optional
from datetime import date

from ... import schemas
from ...core.calendar import aggregate_month
from ...core.classifier import classify
from ...core.summary import build_daily_summary
from ...database.connection import get_db
from .orders import load_orders

router = APIRouter(tags=["board"])


def _today(today: Optional[date]) -> date:
    return today or date.today()


def _read_orders(orders):
    return [schemas.OrderRead.model_validate(o) for o in orders]


@router.get("/board", response_model=schemas.BoardResponse)
def read_board(
    today: Optional[date] = Query(None, description="默认为服务器当天"),
    db: Session = Depends(get_db),
):
    today = _today(today)
    buckets = classify(load_orders(db), today)
    return schemas.BoardResponse(
        today=today,
        pending=_read_orders(buckets.pending),
        confirmed=_read_orders(buckets.confirmed),
        archived=_read_orders(buckets.archived),
    )


@router.get("/calendar/{year}/{month}", response_model=schemas.MonthCalendarRead)
def read_month(
    year: int,
    month: int,
    today: Optional[date] = Query(None, description="默认为服务器当天"),
    db: Session = Depends(get_db),
):
    """月历只统计已确认的订单"""
    if not 1 <= month <= 12:
        raise HTTPException(status_code=422, detail="month must be between 1 and 12")
    today = _today(today)
    confirmed = classify(load_orders(db), today).confirmed
    month_calendar = aggregate_month(confirmed, year, month, today)
    return schemas.MonthCalendarRead(
        year=month_calendar.year,
        month=month_calendar.month,
        leading_blanks=month_calendar.leading_blanks,
        days=[schemas.CalendarDayRead.model_validate(d) for d in month_calendar.days],
    )


@router.get("/calendar/{year}/{month}/{day}/summary", response_model=schemas.DailySummaryRead)
def read_daily_summary(
    year: int,
    month: int,
    day: int,
    today: Optional[date] = Query(None, description="默认为服务器当天"),
    db: Session = Depends(get_db),
):
    try:
        target = date(year, month, day)
    except ValueError:
        raise HTTPException(status_code=422, detail="Invalid date")
    confirmed = classify(load_orders(db), _today(today)).confirmed
    summary = build_daily_summary(confirmed, target)
    return schemas.DailySummaryRead(day=summary.day, orders=_read_orders(summary.orders), html=summary.html)
