"""
Master router for the Unit Master screens.
"""
import os
from typing import Optional
from fastapi import APIRouter, File, Form, Request, UploadFile
from .base import BaseRouter
from config.logging_config import get_api_logger
from core.exceptions import BaseAPIException, handle_unexpected_error
from helpers.constants import AppConstants
from helpers.enums import UserAccountStatus, UserRole, get_enum_lookup
from models.upload import UploadedFile
from schema.base import Notification, NotificationType
from schema.unit import (
    AddUnitFormResponse, CreateUnitResponse, LookupsResponse, UnitIndexResponse
)

UNIT_INDEX_PATH = "/master/units"
ADD_UNIT_FORM_PATH = "/master/units/add"
UNEXPECTED_ERROR_NOTIFICATION = "An Unexpected Error Occured"


def to_uploaded_file(file: Optional[UploadFile]) -> Optional[UploadedFile]:
    """Adapt a framework upload to an ``UploadedFile``; an empty, unnamed part means no file."""
    if file is None:
        return None

    stream = file.file
    stream.seek(0, os.SEEK_END)
    length = stream.tell()
    stream.seek(0)

    if not file.filename and length == 0:
        return None
    return UploadedFile(file_name=file.filename or "", length=length, stream=stream)


class MasterRouter(BaseRouter):
    """Router for Unit Master endpoints."""

    def __init__(self):
        super().__init__()
        self.logger = get_api_logger()

    @staticmethod
    def _with_form_notification(error: BaseAPIException, message: str) -> BaseAPIException:
        """Attach an error toast and send the client back to the create-unit form."""
        error.notification = Notification(type=NotificationType.ERROR, message=message).model_dump(mode="json")
        error.redirect_to = ADD_UNIT_FORM_PATH
        return error

    def get_router(self) -> APIRouter:
        """Get master router."""
        router = APIRouter(prefix="/master", tags=["master"])

        @router.get("/units", response_model=UnitIndexResponse)
        async def unit_index(request: Request):
            """Unit Master index; lists existing units."""
            return UnitIndexResponse(
                portal_name=AppConstants.PORTAL_NAME,
                units=[],
                trace_id=getattr(request.state, "trace_id", None)
            )

        @router.get("/units/add", response_model=AddUnitFormResponse)
        async def add_unit_form(request: Request):
            """Describe the create-unit form and its upload constraints."""
            self.check_services()
            upload_settings = self.unit_service.upload_settings
            return AddUnitFormResponse(
                allowed_extensions=upload_settings.allowed_extensions,
                max_file_size_mb=upload_settings.max_file_size_mb,
                trace_id=getattr(request.state, "trace_id", None)
            )

        @router.post("/units", response_model=CreateUnitResponse)
        async def add_unit(
            request: Request,
            unit_name: Optional[str] = Form(None),
            file: Optional[UploadFile] = File(None)
        ):
            """
            Create a unit with an optional uploaded file.

            The file is validated for size and type before it is saved.
            """
            self.check_services()
            upload = to_uploaded_file(file)
            self.logger.info(f"Create unit requested - unit_name: {unit_name!r} | "
                             f"file: {upload.file_name if upload else None}")

            try:
                result = await self.unit_service.create_unit(unit_name, upload)
            except BaseAPIException as e:
                self._with_form_notification(e, e.message)
                raise
            except Exception as e:
                self.logger.error(f"Create unit failed - unit_name: {unit_name!r} | error: {e}", exc_info=True)
                error = handle_unexpected_error(e, trace_id=getattr(request.state, "trace_id", None))
                raise self._with_form_notification(error, UNEXPECTED_ERROR_NOTIFICATION) from e
            finally:
                if file is not None:
                    await file.close()

            return CreateUnitResponse(
                success=True,
                message="Unit created successfully.",
                unit_name=result.unit_name,
                stored_file=result.stored_file,
                notification=Notification(
                    type=NotificationType.SUCCESS,
                    message="Unit Created Successfully"
                ),
                redirect_to=UNIT_INDEX_PATH,
                trace_id=getattr(request.state, "trace_id", None)
            )

        @router.get("/lookups", response_model=LookupsResponse)
        async def lookups(request: Request):
            """Role and account status values for drop-downs."""
            return LookupsResponse(
                roles=get_enum_lookup(UserRole),
                account_statuses=get_enum_lookup(UserAccountStatus),
                trace_id=getattr(request.state, "trace_id", None)
            )

        return router
