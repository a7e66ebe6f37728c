"""Tour package amenities."""
import logging
from typing import List

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ..models.package_models import PackageAmenity, package_amenity_relations

logger = logging.getLogger(__name__)


def resolve_amenities(db: Session, amenity_ids: List[int]) -> List[PackageAmenity]:
    """Load amenities by id; unknown ids are a 400."""
    wanted = list(dict.fromkeys(amenity_ids))
    if not wanted:
        return []
    found = db.query(PackageAmenity).filter(PackageAmenity.id.in_(wanted)).all()
    missing = sorted(set(wanted) - {a.id for a in found})
    if missing:
        raise HTTPException(
            status_code=400,
            detail=f"Unknown amenity id(s): {', '.join(str(i) for i in missing)}",
        )
    return found


def apply_package_amenities(db: Session, package, payload: dict) -> None:
    """Replace the amenity set when ``amenity_ids`` was submitted.

    An empty submitted value (every box unchecked) clears the set; updates that
    leave the key out keep it.
    """
    if "amenity_ids" not in payload:
        return
    package.amenities = resolve_amenities(db, payload["amenity_ids"] or [])


def add_amenity_summary(package, data: dict) -> None:
    data["amenities"] = [{"id": a.id, "name": a.name, "icon": a.icon} for a in package.amenities]


def unlink_amenity(db: Session, amenity) -> None:
    """Drop an amenity from every package before the amenity row goes."""
    result = db.execute(
        package_amenity_relations.delete().where(package_amenity_relations.c.amenity_id == amenity.id)
    )
    if result.rowcount:
        logger.info(f"Removed amenity {amenity.id} from {result.rowcount} package(s)")
