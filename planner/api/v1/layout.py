"""
Layout API endpoints - overlap layout for the day and week calendar views
"""
from datetime import date, datetime

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from planner.api.deps import get_settings
from planner.config import Settings
from planner.domain.errors import ValidationError
from planner.domain.interval import PositionedInterval
from planner.domain.layout_item import CalendarEventItem, TaskItem
from planner.application.layout import compute_layout, compute_day_layout, compute_week_layout


router = APIRouter(prefix="/api/v1/layout", tags=["layout"])


# === Request/Response models ===

class EventIn(BaseModel):
    id: str
    start_time: datetime
    end_time: datetime
    all_day: bool = False


class TaskIn(BaseModel):
    id: str
    scheduled_time: str | None = None  # HH:MM
    duration: int | None = None  # minutes
    all_day: bool = False
    scheduled_date: date | None = None


class LayoutRequest(BaseModel):
    events: list[EventIn] = []
    tasks: list[TaskIn] = []


class DayLayoutRequest(LayoutRequest):
    day: date


class WeekLayoutRequest(LayoutRequest):
    week_start: date


class PositionedItemResponse(BaseModel):
    id: str
    kind: str  # event, task
    start_minutes: int
    end_minutes: int
    column_index: int
    total_columns: int
    left: float  # percent
    width: float  # percent


class DayLayoutResponse(BaseModel):
    day: date
    items: list[PositionedItemResponse]


class WeekLayoutResponse(BaseModel):
    days: list[DayLayoutResponse]


# === Helper functions ===

def _to_items(req: LayoutRequest) -> tuple[list[CalendarEventItem], list[TaskItem]]:
    events = [
        CalendarEventItem(
            id=e.id, start_time=e.start_time, end_time=e.end_time,
            all_day=e.all_day, payload=e,
        )
        for e in req.events
    ]
    tasks = [
        TaskItem(
            id=t.id, scheduled_time=t.scheduled_time, duration=t.duration,
            all_day=t.all_day, scheduled_date=t.scheduled_date, payload=t,
        )
        for t in req.tasks
    ]
    return events, tasks


def _to_response(items: list[PositionedInterval]) -> list[PositionedItemResponse]:
    return [
        PositionedItemResponse(
            id=p.id,
            kind=p.kind,
            start_minutes=p.start_minutes,
            end_minutes=p.end_minutes,
            column_index=p.column_index,
            total_columns=p.total_columns,
            left=p.left,
            width=p.width,
        )
        for p in items
    ]


# === Endpoints ===

@router.post("/", response_model=list[PositionedItemResponse])
def layout(req: LayoutRequest, settings: Settings = Depends(get_settings)):
    """Разложить события и задачи одного дня по колонкам"""
    events, tasks = _to_items(req)
    try:
        positioned = compute_layout(events, tasks, settings)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return _to_response(positioned)


@router.post("/day", response_model=DayLayoutResponse)
def day_layout(req: DayLayoutRequest, settings: Settings = Depends(get_settings)):
    """Layout for items that fall on req.day"""
    events, tasks = _to_items(req)
    try:
        positioned = compute_day_layout(events, tasks, req.day, settings)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return DayLayoutResponse(day=req.day, items=_to_response(positioned))


@router.post("/week", response_model=WeekLayoutResponse)
def week_layout(req: WeekLayoutRequest, settings: Settings = Depends(get_settings)):
    """Layout for the seven days starting at req.week_start"""
    events, tasks = _to_items(req)
    try:
        week = compute_week_layout(events, tasks, req.week_start, settings)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return WeekLayoutResponse(
        days=[DayLayoutResponse(day=d, items=_to_response(items)) for d, items in week.items()]
    )
