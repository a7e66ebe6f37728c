from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..db import get_db
from ..models.package_models import PackageAmenity
from ..services.crud import get_or_404, serialize, validate_schema
from ..services.packages import resolve_amenities
from ..services.storage import Storage, get_storage
from .forms import parse_body
from .resources import TOUR_PACKAGES
from .schemas_packages import AmenityIdsIn

router = APIRouter(prefix="/api/tour-packages", tags=["tour-packages"])


@router.put("/{package_id}/amenities")
def replace_package_amenities(
    package_id: int,
    body=Depends(parse_body),
    db: Session = Depends(get_db),
    storage: Storage = Depends(get_storage),
):
    """
    Replace the amenity set of a package.
    """
    package = get_or_404(db, TOUR_PACKAGES, package_id)
    data, _ = body
    payload = validate_schema(AmenityIdsIn, data)
    package.amenities = resolve_amenities(db, payload.amenity_ids)
    db.commit()
    return serialize(TOUR_PACKAGES, get_or_404(db, TOUR_PACKAGES, package_id), storage)


@router.delete("/{package_id}/amenities/{amenity_id}")
def remove_package_amenity(
    package_id: int,
    amenity_id: int,
    db: Session = Depends(get_db),
    storage: Storage = Depends(get_storage),
):
    package = get_or_404(db, TOUR_PACKAGES, package_id)
    amenity = db.get(PackageAmenity, amenity_id)
    if amenity is None or amenity not in package.amenities:
        raise HTTPException(status_code=404, detail="Amenity not linked to this package")
    package.amenities.remove(amenity)
    db.commit()
    return serialize(TOUR_PACKAGES, get_or_404(db, TOUR_PACKAGES, package_id), storage)
