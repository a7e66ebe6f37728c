from fastapi import APIRouter, Depends, HTTPException

from ..services import mailer
from ..services.crud import validate_schema
from .forms import parse_body
from .schemas_packages import EnquiryIn

router = APIRouter(prefix="/api", tags=["enquiry"])


@router.post("/enquiry")
def send_enquiry(body=Depends(parse_body)):
    """
    Forward a package enquiry from the public site to the admin mailbox.
    """
    data, _ = body
    enquiry = validate_schema(EnquiryIn, data)
    try:
        mailer.send_enquiry_email(enquiry.model_dump())
    except mailer.MailConfigError:
        raise HTTPException(status_code=500, detail="Server configuration error")
    except mailer.MailDeliveryError:
        raise HTTPException(status_code=500, detail="Failed to send enquiry. Please try again later.")
    return {"success": True, "message": "Enquiry sent successfully!"}
