from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from f1companion.api.deps import IdPath, get_current_user
from f1companion.core.errors import NotFoundError
from f1companion.db.database import get_db
from f1companion.projections import constructor_response, driver_response
from f1companion.repository.catalog import CatalogRepository
from f1companion.schemas.catalog import ConstructorOut, DriverOut

router = APIRouter(tags=["catalog"], dependencies=[Depends(get_current_user)])


@router.get("/drivers", response_model=list[DriverOut])
async def list_drivers(
    active_only: bool | None = Query(default=None, alias="activeOnly"),
    db: AsyncSession = Depends(get_db),
):
    drivers = await CatalogRepository(db).list_drivers(active_only)
    return [driver_response(driver) for driver in drivers]


@router.get("/drivers/{driver_id}", response_model=DriverOut)
async def get_driver(driver_id: IdPath, db: AsyncSession = Depends(get_db)):
    driver = await CatalogRepository(db).get_driver(driver_id)
    if driver is None:
        raise NotFoundError(f"Driver {driver_id} not found")
    return driver_response(driver)


@router.get("/constructors", response_model=list[ConstructorOut])
async def list_constructors(
    active_only: bool | None = Query(default=None, alias="activeOnly"),
    db: AsyncSession = Depends(get_db),
):
    constructors = await CatalogRepository(db).list_constructors(active_only)
    return [constructor_response(constructor) for constructor in constructors]


@router.get("/constructors/{constructor_id}", response_model=ConstructorOut)
async def get_constructor(
    constructor_id: IdPath, db: AsyncSession = Depends(get_db)
):
    constructor = await CatalogRepository(db).get_constructor(constructor_id)
    if constructor is None:
        raise NotFoundError(f"Constructor {constructor_id} not found")
    return constructor_response(constructor)
