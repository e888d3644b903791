"""
Workout session endpoints.

Start, progress and finish sessions, and browse history by date.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from lumbar.api.dependencies import get_session_service
from lumbar.schemas.session_log import CompletionCreate, SessionLogResponse, SessionStart
from lumbar.services.session_service import SessionService

router = APIRouter()


@router.post("", summary="Start a session for a routine.", response_model=SessionLogResponse,
             status_code=status.HTTP_201_CREATED, )
def start_session(data: SessionStart, service: SessionService = Depends(get_session_service)):
    session_id = service.start(data.routine_id)
    return service.to_response(service.get_or_raise(session_id))


@router.get("", summary="Session history, most recent first.", response_model=list[SessionLogResponse], )
def list_sessions(limit: Optional[int] = Query(None, ge=1, description="Maximum number of sessions"),
                  service: SessionService = Depends(get_session_service), ):
    return [service.to_response(s) for s in service.history(limit)]


@router.get("/today/completed", summary="Whether a session was finished today.")
def completed_today(service: SessionService = Depends(get_session_service)):
    return {"completed_today": service.has_completed_today()}


@router.get("/range", summary="Sessions in a date range (inclusive).", response_model=list[SessionLogResponse], )
def list_sessions_in_range(start: Optional[datetime.date] = Query(None, description="Range start (inclusive)"),
                           end: Optional[datetime.date] = Query(None, description="Range end (inclusive)"),
                           service: SessionService = Depends(get_session_service), ):
    # Default: last 30 days
    end_date = end or service.clock().date()
    start_date = start or end_date - datetime.timedelta(days=30)
    return [service.to_response(s) for s in service.sessions_for_range(start_date, end_date)]


@router.get("/date/{date}", summary="Sessions started on a date.", response_model=list[SessionLogResponse], )
def list_sessions_by_date(date: datetime.date, service: SessionService = Depends(get_session_service)):
    return [service.to_response(s) for s in service.sessions_for_date(date)]


@router.get("/{session_id}", summary="Get one session.", response_model=SessionLogResponse, )
def get_session(session_id: int, service: SessionService = Depends(get_session_service)):
    return service.to_response(service.get_or_raise(session_id))


@router.post("/{session_id}/completions", summary="Mark an exercise complete.", response_model=SessionLogResponse, )
def record_completion(session_id: int, data: CompletionCreate,
                      service: SessionService = Depends(get_session_service), ):
    session_log = service.record_completion(session_id, data.exercise_id, data.actual_reps, data.actual_duration)
    return service.to_response(session_log)


@router.post("/{session_id}/finish", summary="Finish a session.", response_model=SessionLogResponse, )
def finish_session(session_id: int, service: SessionService = Depends(get_session_service)):
    return service.to_response(service.finish(session_id))


@router.delete("/{session_id}", summary="Delete a session from history.", status_code=status.HTTP_204_NO_CONTENT, )
def delete_session(session_id: int, service: SessionService = Depends(get_session_service)):
    service.delete(session_id)
