"""Catalog API Routes

Category -> material -> size/fitting hierarchy used to build product names.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.api.schemas.catalog_request import (
    CategoryRequestSchema,
    MaterialRequestSchema,
    SizeRequestSchema,
    FittingRequestSchema,
)
from src.app.use_cases.pagination import PageDTO
from src.app.use_cases.catalog.dtos import (
    CatalogTreeDTO,
    CategoryDTO,
    MaterialDTO,
    SizeDTO,
    FittingDTO,
    AddCategoryCommandDTO,
    AddMaterialCommandDTO,
    AddSizeCommandDTO,
    AddFittingCommandDTO,
    DeactivationResultDTO,
    ProductNameCommandDTO,
    ProductNameDTO,
)
from src.app.use_cases.catalog import (
    GetCatalog,
    ListMaterials,
    ListSizes,
    ListFittings,
    AddCategory,
    AddMaterial,
    AddSize,
    AddFitting,
    DeactivateCategory,
    DeactivateMaterial,
    DeactivateSize,
    DeactivateFitting,
    BuildProductName,
)
from src.app.services.cache_service import CacheService
from src.adapter.repositories import (
    SqlAlchemyCategoryRepository,
    SqlAlchemyMaterialRepository,
    SqlAlchemySizeRepository,
    SqlAlchemyFittingRepository,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session, get_cache_service
from src.api.error import raise_for_error

router = APIRouter(prefix="/catalog", tags=["Catalog"])


def _unwrap(result):
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("", response_model=CatalogTreeDTO)
async def get_catalog(
    session: AsyncSession = Depends(get_session),
    cache: CacheService = Depends(get_cache_service),
):
    """
    Full active catalog as a tree.

    Inactive nodes and everything below them are omitted. The tree is
    cached until the next catalog change.
    """
    use_case = GetCatalog(
        SqlAlchemyCategoryRepository(session),
        SqlAlchemyMaterialRepository(session),
        SqlAlchemySizeRepository(session),
        SqlAlchemyFittingRepository(session),
        cache,
        ttl_seconds=ApplicationConfig.CATALOG_CACHE_TTL_SECONDS,
    )
    return _unwrap(await use_case.execute())


@router.get("/materials/{category_id}", response_model=PageDTO[MaterialDTO])
async def list_materials(category_id: int, session: AsyncSession = Depends(get_session)):
    items = _unwrap(await ListMaterials(SqlAlchemyMaterialRepository(session)).execute(category_id))
    return PageDTO[MaterialDTO].single(items)


@router.get("/sizes/{material_id}", response_model=PageDTO[SizeDTO])
async def list_sizes(material_id: int, session: AsyncSession = Depends(get_session)):
    items = _unwrap(await ListSizes(SqlAlchemySizeRepository(session)).execute(material_id))
    return PageDTO[SizeDTO].single(items)


@router.get("/fittings/{material_id}", response_model=PageDTO[FittingDTO])
async def list_fittings(material_id: int, session: AsyncSession = Depends(get_session)):
    items = _unwrap(await ListFittings(SqlAlchemyFittingRepository(session)).execute(material_id))
    return PageDTO[FittingDTO].single(items)


@router.post("/categories", response_model=CategoryDTO, status_code=status.HTTP_201_CREATED)
async def add_category(
    request: CategoryRequestSchema,
    session: AsyncSession = Depends(get_session),
    cache: CacheService = Depends(get_cache_service),
):
    """
    Add a category.

    **Returns:**
    - 201: Category created
    - 400: Empty name
    - 409: An active category with this name exists
    """
    uow = SqlAlchemyUnitOfWork(session)
    use_case = AddCategory(uow, SqlAlchemyCategoryRepository(session), cache)
    return _unwrap(await use_case.execute(AddCategoryCommandDTO(name=request.name)))


@router.post("/materials", response_model=MaterialDTO, status_code=status.HTTP_201_CREATED)
async def add_material(
    request: MaterialRequestSchema,
    session: AsyncSession = Depends(get_session),
    cache: CacheService = Depends(get_cache_service),
):
    uow = SqlAlchemyUnitOfWork(session)
    use_case = AddMaterial(
        uow, SqlAlchemyCategoryRepository(session), SqlAlchemyMaterialRepository(session), cache
    )
    command = AddMaterialCommandDTO(category_id=request.category_id, name=request.name)
    return _unwrap(await use_case.execute(command))


@router.post("/sizes", response_model=SizeDTO, status_code=status.HTTP_201_CREATED)
async def add_size(
    request: SizeRequestSchema,
    session: AsyncSession = Depends(get_session),
    cache: CacheService = Depends(get_cache_service),
):
    uow = SqlAlchemyUnitOfWork(session)
    use_case = AddSize(
        uow, SqlAlchemyMaterialRepository(session), SqlAlchemySizeRepository(session), cache
    )
    command = AddSizeCommandDTO(material_id=request.material_id, value=request.value)
    return _unwrap(await use_case.execute(command))


@router.post("/fittings", response_model=FittingDTO, status_code=status.HTTP_201_CREATED)
async def add_fitting(
    request: FittingRequestSchema,
    session: AsyncSession = Depends(get_session),
    cache: CacheService = Depends(get_cache_service),
):
    uow = SqlAlchemyUnitOfWork(session)
    use_case = AddFitting(
        uow, SqlAlchemyMaterialRepository(session), SqlAlchemyFittingRepository(session), cache
    )
    command = AddFittingCommandDTO(material_id=request.material_id, name=request.name)
    return _unwrap(await use_case.execute(command))


@router.delete("/categories/{category_id}", response_model=DeactivationResultDTO)
async def deactivate_category(
    category_id: int,
    session: AsyncSession = Depends(get_session),
    cache: CacheService = Depends(get_cache_service),
):
    """
    Deactivate a category with its materials, sizes and fittings.

    Rows are kept (soft delete) so existing bills are unaffected.
    """
    uow = SqlAlchemyUnitOfWork(session)
    use_case = DeactivateCategory(
        uow,
        SqlAlchemyCategoryRepository(session),
        SqlAlchemyMaterialRepository(session),
        SqlAlchemySizeRepository(session),
        SqlAlchemyFittingRepository(session),
        cache,
    )
    return _unwrap(await use_case.execute(category_id))


@router.delete("/materials/{material_id}", response_model=DeactivationResultDTO)
async def deactivate_material(
    material_id: int,
    session: AsyncSession = Depends(get_session),
    cache: CacheService = Depends(get_cache_service),
):
    uow = SqlAlchemyUnitOfWork(session)
    use_case = DeactivateMaterial(
        uow,
        SqlAlchemyMaterialRepository(session),
        SqlAlchemySizeRepository(session),
        SqlAlchemyFittingRepository(session),
        cache,
    )
    return _unwrap(await use_case.execute(material_id))


@router.delete("/sizes/{size_id}", response_model=DeactivationResultDTO)
async def deactivate_size(
    size_id: int,
    session: AsyncSession = Depends(get_session),
    cache: CacheService = Depends(get_cache_service),
):
    uow = SqlAlchemyUnitOfWork(session)
    use_case = DeactivateSize(uow, SqlAlchemySizeRepository(session), cache)
    return _unwrap(await use_case.execute(size_id))


@router.delete("/fittings/{fitting_id}", response_model=DeactivationResultDTO)
async def deactivate_fitting(
    fitting_id: int,
    session: AsyncSession = Depends(get_session),
    cache: CacheService = Depends(get_cache_service),
):
    uow = SqlAlchemyUnitOfWork(session)
    use_case = DeactivateFitting(uow, SqlAlchemyFittingRepository(session), cache)
    return _unwrap(await use_case.execute(fitting_id))


@router.get("/product-name", response_model=ProductNameDTO)
async def build_product_name(
    material_id: Optional[int] = Query(None),
    size_id: Optional[int] = Query(None),
    fitting_id: Optional[int] = Query(None),
    session: AsyncSession = Depends(get_session),
):
    """
    Join a catalog selection into a product name.

    Size and fitting must belong to the material. For ply sizes the
    response includes the square-feet quantity.
    """
    use_case = BuildProductName(
        SqlAlchemyMaterialRepository(session),
        SqlAlchemySizeRepository(session),
        SqlAlchemyFittingRepository(session),
    )
    command = ProductNameCommandDTO(material_id=material_id, size_id=size_id, fitting_id=fitting_id)
    return _unwrap(await use_case.execute(command))
