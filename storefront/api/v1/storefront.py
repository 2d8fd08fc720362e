from fastapi import APIRouter, Depends

from storefront.api.v1.schemas import CatalogResponseSchema, HeroSchema, ServiceSchema
from storefront.application.use_cases.catalog import HeroContentUseCase, ListCatalogUseCase
from storefront.wiring.dependencies import get_hero_content_use_case, get_list_catalog_use_case

router = APIRouter()


@router.get("/services", response_model=CatalogResponseSchema)
def list_services(uc: ListCatalogUseCase = Depends(get_list_catalog_use_case)):
    services = uc.execute()
    return CatalogResponseSchema(
        categories=ListCatalogUseCase.categories(services),
        services=[ServiceSchema.from_entity(s) for s in services],
    )


@router.get("/content/hero", response_model=HeroSchema)
def hero_content(uc: HeroContentUseCase = Depends(get_hero_content_use_case)):
    hero = uc.execute()
    return HeroSchema(title=hero.title, subtitle=hero.subtitle)
