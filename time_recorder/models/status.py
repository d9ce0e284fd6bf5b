"""Pydantic models for time recorder responses."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..constants import MSG_OK


class MessageResponse(BaseModel):
    """Error or informational response body."""

    message: str


class StatusResponse(BaseModel):
    """Attendance times as read from the portal after the request's last page load."""

    model_config = ConfigDict(populate_by_name=True)

    message: str = MSG_OK
    start_time: str = Field(default="", serialization_alias="startTime")
    leave_time: str = Field(default="", serialization_alias="leaveTime")

    @classmethod
    def from_times(cls, start_time: Optional[str], leave_time: Optional[str]) -> StatusResponse:
        # Absent times are sent as empty strings, never null.
        return cls(start_time=start_time or "", leave_time=leave_time or "")
