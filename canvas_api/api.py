"""Canvas API client — typed endpoint catalogue on top of the Dispatcher.

Each method maps to one or a short fixed sequence of the primitive verbs
(get/getall/post/put/delete/head). Methods ending in ``_by_sis`` take an SIS
identifier and resolve it with the ``sis_*_id:`` path prefix.

Usage:
    async with CanvasAPI("https://canvas.example.edu", tokens=["..."]) as canvas:
        sections = await canvas.course_sections(1234)
        await canvas.delete_section_by_sis("2024-FA-MATH101-01")
"""

from __future__ import annotations

import asyncio
import logging
from itertools import chain
from typing import Any

import httpx

from canvas_api.connector.dispatcher import Dispatcher
from canvas_api.connector.types import ConnectorOptions
from canvas_api.schemas.account import CanvasAccount
from canvas_api.schemas.base import dump_payload
from canvas_api.schemas.course import CanvasCourse, CoursePayload
from canvas_api.schemas.enrollment import CanvasEnrollment, EnrollmentPayload
from canvas_api.schemas.grading_standard import CanvasGradingStandard
from canvas_api.schemas.ids import SELF, CanvasID, sis_course_id, sis_section_id, sis_user_id
from canvas_api.schemas.section import CanvasSection, SectionPayload

logger = logging.getLogger(__name__)

DEFAULT_COURSE_TIME_ZONE = "America/Chicago"


class CanvasAPI(Dispatcher):
    """Canvas client exposing accounts, courses, sections, grading standards and enrollments."""

    def __init__(
        self,
        origin: str | None,
        tokens: list[str] | None = None,
        options: ConnectorOptions | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        default_course_time_zone: str = DEFAULT_COURSE_TIME_ZONE,
    ):
        super().__init__(origin, tokens, options, transport=transport)
        self.default_course_time_zone = default_course_time_zone

    @classmethod
    def from_settings(cls, settings, **kwargs):
        kwargs.setdefault("default_course_time_zone", settings.default_course_time_zone)
        return super().from_settings(settings, **kwargs)

    # ------------------------------------------------------------------
    # Accounts
    # ------------------------------------------------------------------

    async def get_root_accounts(self) -> list[CanvasAccount]:
        return [CanvasAccount.model_validate(a) for a in await self.getall("/accounts")]

    async def get_sub_accounts(self, account_id: CanvasID) -> list[CanvasAccount]:
        data = await self.getall(f"/accounts/{account_id}/sub_accounts", {"recursive": True})
        return [CanvasAccount.model_validate(a) for a in data]

    async def get_root_account(self) -> CanvasAccount | None:
        accounts = await self.get_root_accounts()
        return accounts[0] if accounts else None

    async def _account_or_root(self, account_id: CanvasID | None) -> CanvasID | None:
        if account_id:
            return account_id
        root = await self.get_root_account()
        return root.id if root else None

    # ------------------------------------------------------------------
    # Courses
    # ------------------------------------------------------------------

    async def get_user_courses(self, user_id: CanvasID | None = None) -> list[CanvasCourse]:
        """Courses of a user; the token's own user when ``user_id`` is omitted."""
        data = await self.getall(f"/users/{user_id or SELF}/courses")
        return [CanvasCourse.model_validate(c) for c in data]

    async def get_user_courses_by_sis(self, sis_id: str) -> list[CanvasCourse]:
        return await self.get_user_courses(sis_user_id(sis_id))

    async def get_course(self, course_id: CanvasID) -> CanvasCourse:
        return CanvasCourse.model_validate(await self.get(f"/courses/{course_id}"))

    async def get_course_by_sis(self, sis_id: str) -> CanvasCourse:
        return await self.get_course(sis_course_id(sis_id))

    async def get_courses(
        self,
        account_id: CanvasID | None = None,
        published: bool | None = None,
        enrollment_type: list[str] | None = None,
    ) -> list[CanvasCourse]:
        """Courses of an account, defaulting to the root account.

        Returns an empty list when no account can be resolved.
        """
        account_id = await self._account_or_root(account_id)
        if not account_id:
            return []

        params: dict[str, Any] = {}
        if published is not None:
            params["published"] = published
        if enrollment_type:
            params["enrollment_type[]"] = list(enrollment_type)

        data = await self.getall(f"/accounts/{account_id}/courses", params)
        return [CanvasCourse.model_validate(c) for c in data]

    async def create_course(self, account_id: CanvasID, payload: CoursePayload | dict) -> CanvasCourse:
        body = dump_payload(payload)
        course = dict(body.get("course") or {})
        if not course.get("time_zone"):
            course["time_zone"] = self.default_course_time_zone
        body["course"] = course
        return CanvasCourse.model_validate(await self.post(f"/accounts/{account_id}/courses", body))

    # ------------------------------------------------------------------
    # Grading standards
    # ------------------------------------------------------------------

    async def get_grading_standards(self, account_id: CanvasID | None = None) -> list[CanvasGradingStandard]:
        account_id = await self._account_or_root(account_id)
        if not account_id:
            return []
        data = await self.getall(f"/accounts/{account_id}/grading_standards")
        return [CanvasGradingStandard.model_validate(g) for g in data]

    # ------------------------------------------------------------------
    # Sections
    # ------------------------------------------------------------------

    async def course_sections(self, course_id: CanvasID | None) -> list[CanvasSection]:
        if not course_id:
            return []
        data = await self.getall(f"/courses/{course_id}/sections")
        return [CanvasSection.model_validate(s) for s in data]

    async def course_sections_batched(self, course_ids: list[CanvasID]) -> list[CanvasSection]:
        """Sections of several courses, fetched concurrently, in course order."""
        per_course = await asyncio.gather(*(self.course_sections(course_id) for course_id in course_ids))
        return list(chain.from_iterable(per_course))

    async def get_section(self, section_id: CanvasID) -> CanvasSection:
        return CanvasSection.model_validate(await self.get(f"/sections/{section_id}"))

    async def get_section_by_sis(self, sis_id: str) -> CanvasSection:
        return await self.get_section(sis_section_id(sis_id))

    async def create_section(self, course_id: CanvasID, payload: SectionPayload | dict) -> CanvasSection:
        data = await self.post(f"/courses/{course_id}/sections", dump_payload(payload))
        return CanvasSection.model_validate(data)

    async def create_sections(
        self, course_id: CanvasID, payloads: list[SectionPayload | dict]
    ) -> list[CanvasSection]:
        return list(await asyncio.gather(*(self.create_section(course_id, payload) for payload in payloads)))

    async def delete_section(self, section_id: CanvasID) -> None:
        """Delete a section that may still have enrollments or an SIS id.

        Canvas rejects deleting a section with active enrollments, and a
        deleted section keeps its SIS id reserved. Stages: deactivate every
        enrollment (concurrently), clear the SIS id, delete. A failing stage
        aborts the ones after it.
        """
        enrollments = await self.get_section_enrollments(section_id)
        logger.info("Deleting section %s: deactivating %d enrollment(s)", section_id, len(enrollments))
        await asyncio.gather(*(self.deactivate_enrollment_from_section(e) for e in enrollments))
        await self.remove_sis_from_section(section_id)
        await self.delete(f"/sections/{section_id}")

    async def delete_section_by_sis(self, sis_id: str) -> None:
        await self.delete_section(sis_section_id(sis_id))

    async def remove_sis_from_section(self, section_id: CanvasID) -> None:
        await self.put(f"/sections/{section_id}", dump_payload(SectionPayload.void_sis_section_id()))

    async def remove_sis_from_section_by_sis(self, sis_id: str) -> None:
        await self.remove_sis_from_section(sis_section_id(sis_id))

    async def remove_sis_from_sections_by_sis(self, sis_ids: list[str]) -> None:
        await asyncio.gather(*(self.remove_sis_from_section_by_sis(sis_id) for sis_id in sis_ids))

    async def section_exists(self, section_id: CanvasID) -> bool:
        return await self.head(f"/sections/{section_id}")

    async def sections_exist(self, section_ids: list[CanvasID]) -> list[bool]:
        return list(await asyncio.gather(*(self.section_exists(section_id) for section_id in section_ids)))

    async def section_exists_by_sis(self, sis_id: str) -> bool:
        return await self.section_exists(sis_section_id(sis_id))

    async def sections_exist_by_sis(self, sis_ids: list[str]) -> list[bool]:
        return list(await asyncio.gather(*(self.section_exists_by_sis(sis_id) for sis_id in sis_ids)))

    # ------------------------------------------------------------------
    # Enrollments
    # ------------------------------------------------------------------

    async def get_course_enrollments(self, course_id: CanvasID) -> list[CanvasEnrollment]:
        data = await self.getall(f"/courses/{course_id}/enrollments")
        return [CanvasEnrollment.model_validate(e) for e in data]

    async def get_section_enrollments(self, section_id: CanvasID) -> list[CanvasEnrollment]:
        data = await self.getall(f"/sections/{section_id}/enrollments")
        return [CanvasEnrollment.model_validate(e) for e in data]

    async def get_section_enrollments_by_sis(self, sis_id: str) -> list[CanvasEnrollment]:
        return await self.get_section_enrollments(sis_section_id(sis_id))

    async def create_enrollment(
        self, course_id: CanvasID, payload: EnrollmentPayload | dict
    ) -> CanvasEnrollment:
        data = await self.post(f"/courses/{course_id}/enrollments", dump_payload(payload))
        return CanvasEnrollment.model_validate(data)

    async def deactivate_enrollment_from_section(self, enrollment: CanvasEnrollment) -> Any:
        return await self.delete(
            f"/courses/{enrollment.course_id}/enrollments/{enrollment.id}",
            {"task": "deactivate"},
        )
