"""GetCatalog Use Case

Returns the active catalog tree, served from cache when possible.
"""

import logging
from collections import defaultdict
from libs.result import Result, Return, Error
from src.app.repositories.catalog_repository import (
    CategoryRepository,
    MaterialRepository,
    SizeRepository,
    FittingRepository,
)
from src.app.services.cache_service import CacheService
from .dtos import (
    CATALOG_CACHE_KEY,
    CatalogTreeDTO,
    CategoryNodeDTO,
    MaterialNodeDTO,
    SizeDTO,
    FittingDTO,
)

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_TTL_SECONDS = 600


class GetCatalog:
    """
    Use Case: Active catalog tree

    Business Rules:
    1. Only active nodes are returned
    2. Nodes whose parent is not active are dropped
    3. The tree is cached for ttl_seconds; catalog mutations invalidate it

    Flow:
    1. Return cached tree on hit
    2. Load the four active tiers
    3. Assemble tree, cache it, return it
    """

    def __init__(
        self,
        category_repo: CategoryRepository,
        material_repo: MaterialRepository,
        size_repo: SizeRepository,
        fitting_repo: FittingRepository,
        cache: CacheService,
        ttl_seconds: int = DEFAULT_CATALOG_TTL_SECONDS,
    ):
        self.category_repo = category_repo
        self.material_repo = material_repo
        self.size_repo = size_repo
        self.fitting_repo = fitting_repo
        self.cache = cache
        self.ttl_seconds = ttl_seconds

    async def execute(self) -> Result[CatalogTreeDTO]:
        try:
            # Step 1: Cache
            cached = await self.cache.get(CATALOG_CACHE_KEY)
            if cached is not None:
                logger.debug("Catalog served from cache")
                return Return.ok(CatalogTreeDTO.model_validate(cached))

            # Step 2: Active tiers
            categories = await self.category_repo.list_active()
            materials = await self.material_repo.list_active()
            sizes = await self.size_repo.list_active()
            fittings = await self.fitting_repo.list_active()

            # Step 3: Assemble
            sizes_by_material = defaultdict(list)
            for size in sizes:
                sizes_by_material[size.material_id].append(SizeDTO.from_entity(size))

            fittings_by_material = defaultdict(list)
            for fitting in fittings:
                fittings_by_material[fitting.material_id].append(FittingDTO.from_entity(fitting))

            materials_by_category = defaultdict(list)
            for material in materials:
                materials_by_category[material.category_id].append(
                    MaterialNodeDTO(
                        id=material.id,
                        category_id=material.category_id,
                        name=material.name,
                        sizes=sizes_by_material[material.id],
                        fittings=fittings_by_material[material.id],
                    )
                )

            tree = CatalogTreeDTO(
                categories=[
                    CategoryNodeDTO(
                        id=category.id,
                        name=category.name,
                        materials=materials_by_category[category.id],
                    )
                    for category in categories
                ]
            )

            await self.cache.set(CATALOG_CACHE_KEY, tree.model_dump(mode="json"), self.ttl_seconds)
            return Return.ok(tree)

        except Exception as e:
            logger.error(f"Failed to load catalog: {e}")
            return Return.err(
                Error(
                    code="GET_CATALOG_FAILED",
                    message="Failed to load catalog",
                    reason=str(e),
                )
            )
