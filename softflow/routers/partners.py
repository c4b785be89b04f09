from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..auth.auth import require_admin
from ..crud import common
from ..crud.content import get_partners
from ..database.database import get_db
from ..models.partner import Partner
from ..schemas.partner import PartnerForm, PartnerOut

router = APIRouter(prefix="/api/partners", tags=["partners"])
admin_router = APIRouter(prefix="/api/admin/partners", tags=["admin"], dependencies=[Depends(require_admin)])


@router.get("", response_model=List[PartnerOut])
def list_partners(db: Session = Depends(get_db)):
    return get_partners(db)


@admin_router.post("", response_model=PartnerOut, status_code=201)
def create_partner(payload: PartnerForm, db: Session = Depends(get_db)):
    return common.create(db, Partner, payload.model_dump(), "create partner")


@admin_router.put("/{partner_id}", response_model=PartnerOut)
def update_partner(partner_id: int, payload: PartnerForm, db: Session = Depends(get_db)):
    partner = common.get_by_id(db, Partner, partner_id)
    if not partner:
        raise HTTPException(status_code=404, detail="Partner not found")
    return common.update(db, partner, payload.model_dump(), "update partner")


@admin_router.delete("/{partner_id}", status_code=204)
def delete_partner(partner_id: int, db: Session = Depends(get_db)):
    partner = common.get_by_id(db, Partner, partner_id)
    if not partner:
        raise HTTPException(status_code=404, detail="Partner not found")
    common.delete(db, partner, "delete partner")
