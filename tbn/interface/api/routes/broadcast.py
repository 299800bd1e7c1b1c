"""TBN broadcast routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from tbn.application.usecase.broadcast import (
    BroadcastInfoResponse,
    GetBroadcastInfoRequest,
    GetBroadcastInfoUseCase,
    ListRegionsUseCase,
)

router = APIRouter(prefix="/tbn", tags=["tbn"], route_class=DishkaRoute)


@router.get("/regions", response_model=dict[str, str])
async def list_regions(
    list_regions_use_case: FromDishka[ListRegionsUseCase],
) -> dict[str, str]:
    """List regional stations.

    Example:
        GET /api/tbn/regions

        Response:
        {"2": "부산", "3": "광주", ...}
    """
    return await list_regions_use_case.execute()


@router.get("/broadcast/{region_code}", response_model=BroadcastInfoResponse)
async def get_broadcast_info(
    region_code: str,
    get_broadcast_info_use_case: FromDishka[GetBroadcastInfoUseCase],
) -> BroadcastInfoResponse:
    """Show what a regional station is currently airing.

    Always answers 200; unreadable fields carry a placeholder.

    Example:
        GET /api/tbn/broadcast/2

        Response:
        {
            "title": "출발 부산대행진",
            "mc": "홍길동",
            "time": "07:00 ~ 09:00",
            "region_code": "2",
            "region_name": "부산"
        }
    """
    return await get_broadcast_info_use_case.execute(
        GetBroadcastInfoRequest(region_code=region_code)
    )
