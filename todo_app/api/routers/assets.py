from fastapi import APIRouter, Depends
from fastapi.responses import Response

from todo_app.api.dependencies import get_asset_store
from todo_app.utils.assets import AssetStore

router = APIRouter(
    prefix="/static",
    tags=["assets"],
    responses={404: {"description": "Not Found"}},
)


@router.get(
    "/{file_name}",
    summary="Servir un asset embarqué (feuille de style, icônes)",
)
def get_asset(file_name: str, assets: AssetStore = Depends(get_asset_store)):
    asset = assets.lookup(file_name)
    return Response(content=asset.content, media_type=asset.media_type)
