from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from energy_harmony.core.database import get_db
from energy_harmony.core.deps import get_current_user
from energy_harmony.core.errors import NotFound
from energy_harmony.models.device import Device
from energy_harmony.schemas.device import DeviceCreate, DeviceUpdate, DeviceResponse

router = APIRouter(
    prefix="/api/devices",
    tags=["Devices"],
    dependencies=[Depends(get_current_user)]
)

def get_owned_device(db: Session, device_id: int, user_id: int) -> Device:
    device = db.query(Device).filter(
        Device.id == device_id,
        Device.user_id == user_id
    ).first()
    if not device:
        raise NotFound("Device not found")
    return device

@router.get("", response_model=List[DeviceResponse])
def list_devices(
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user)
):
    return db.query(Device).filter(Device.user_id == user_id).order_by(Device.id.asc()).all()

@router.post("", response_model=DeviceResponse, status_code=status.HTTP_201_CREATED)
def create_device(
    data: DeviceCreate,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user)
):
    device = Device(
        user_id=user_id,
        name=data.name,
        type=data.type,
        consumption=data.consumption,
        is_active=data.is_active
    )
    db.add(device)
    db.commit()
    db.refresh(device)
    return device

@router.get("/{id}", response_model=DeviceResponse)
def get_device(
    id: int,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user)
):
    return get_owned_device(db, id, user_id)

@router.put("/{id}", response_model=DeviceResponse)
def update_device(
    id: int,
    data: DeviceUpdate,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user)
):
    device = get_owned_device(db, id, user_id)

    # empty strings keep the stored name/type
    device.name = data.name or device.name
    device.type = data.type or device.type
    if data.consumption is not None:
        device.consumption = data.consumption
    if data.is_active is not None:
        device.is_active = data.is_active

    db.commit()
    db.refresh(device)
    return device

@router.delete("/{id}")
def delete_device(
    id: int,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user)
):
    device = get_owned_device(db, id, user_id)

    db.delete(device)
    db.commit()

    return {"message": "Device deleted"}
