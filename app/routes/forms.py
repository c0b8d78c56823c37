"""
Form endpoints - Form templates and the send/respond workflow.
"""

from typing import List
from fastapi import APIRouter, Depends

from app.models.form import FormResponseSubmit, FormSendRequest, FormType
from app.routes.deps import simulate_latency
from app.services.form_service import FormService, get_form_service

router = APIRouter(prefix="/api", tags=["Forms"], dependencies=[Depends(simulate_latency)])


@router.get("/form-types", response_model=List[FormType])
async def list_form_types(service: FormService = Depends(get_form_service)):
    return service.list_form_types()


@router.get("/form-types/{form_type_id}", response_model=FormType)
async def get_form_type(form_type_id: str, service: FormService = Depends(get_form_service)):
    return service.get_form_type(form_type_id)


@router.post("/forms/{form_type_id}/send")
async def send_form(form_type_id: str, request: FormSendRequest, service: FormService = Depends(get_form_service)):
    """
    Attach a form to an alert and ask its owner to fill it in.
    """
    result = service.send_form(request.alert_id, form_type_id)
    return {
        "success": True,
        "message": f"Form {form_type_id} sent",
        "alert": result.entity,
    }


@router.post("/form-responses")
async def submit_form_response(request: FormResponseSubmit, service: FormService = Depends(get_form_service)):
    """
    Record the owner's answers to the attached form.

    Rejected with 400 when no form has been sent for the alert. Earlier
    versions accepted such answers silently; they are refused now so a
    stored response always belongs to a sent form.
    """
    result = service.submit_response(request.alert_id, request.response)
    return {
        "success": True,
        "message": "Form response received",
        "alert": result.entity,
    }
